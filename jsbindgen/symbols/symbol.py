"""
Symbol class for representing C++ classes, member functions and data members.
"""

from typing import Iterable, List, Optional, Set

from .parameter import Parameter
from .symbol_kind import SymbolKind, Visibility


def strip_namespace(name: str) -> str:
    separator_index = name.rfind('::')
    if separator_index > 0:
        return name[separator_index + 2:]
    return name


def extract_namespace(name: str) -> str:
    separator_index = name.rfind('::')
    if separator_index > 0:
        return name[:separator_index]
    return ''


class Symbol:
    """
    Represents one node of the native program structure.

    Attributes:
        kind: CLASS, FUNCTION or VARIABLE
        name: Symbol name, possibly namespace-qualified for classes
        type: Declared type (return type for functions, value type for variables)
        is_static: True for static members
        visibility: Access level of the member
        parameters: Ordered parameters (functions only)
        children: Members in declaration order (classes only)
        documentation_tags: Annotation markers found in comments, e.g. '[noscript]'
        arg_list: Declared argument text, e.g. '(float x, float y) const'
        return_comment: Documentation of the return value, if any
    """

    def __init__(self, kind: SymbolKind, name: str, type: str = '',
                 is_static: bool = False,
                 visibility: Visibility = Visibility.PUBLIC,
                 parameters: Optional[Iterable[Parameter]] = None,
                 children: Optional[Iterable['Symbol']] = None,
                 documentation_tags: Optional[Iterable[str]] = None,
                 arg_list: Optional[str] = None,
                 return_comment: str = ''):
        self.kind: SymbolKind = kind
        self.name: str = name
        self.type: str = type
        self.is_static: bool = is_static
        self.visibility: Visibility = visibility
        self.parameters: List[Parameter] = list(parameters or [])
        self.children: List[Symbol] = list(children or [])
        self.documentation_tags: Set[str] = set(documentation_tags or [])
        self.return_comment: str = return_comment or ''

        if self.children and kind != SymbolKind.CLASS:
            raise ValueError(f"Only class symbols can have children, got {kind} '{name}'")
        if self.parameters and kind != SymbolKind.FUNCTION:
            raise ValueError(f"Only function symbols can have parameters, got {kind} '{name}'")

        if arg_list is None:
            arg_list = '(' + ', '.join(p.to_string() for p in self.parameters) + ')' \
                if kind == SymbolKind.FUNCTION else ''
        self.arg_list: str = arg_list

    @property
    def unqualified_name(self) -> str:
        return strip_namespace(self.name)

    @property
    def namespace(self) -> str:
        return extract_namespace(self.name)

    def is_const(self) -> bool:
        """True for data members declared const."""
        t = self.type.strip()
        return t.startswith('const ') or t.endswith(' const')

    def find_child_by_name(self, name: str) -> Optional['Symbol']:
        for child in self.children:
            if child.name == name:
                return child
        return None

    def __repr__(self) -> str:
        return f"Symbol({self.kind.value}: {self.name})"
