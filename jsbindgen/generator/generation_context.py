"""
Immutable context threaded through every generator component for one run.
"""

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Tuple

from ..symbols import SymbolTable, strip_namespace
from .exclusions import ExclusionTable
from .scriptability import DEFAULT_OPT_OUT_MARKER, ScriptabilityFilter
from .type_classifier import TypeClassifier

DEFAULT_REFCOUNT_MEMBERS = ('Refs', 'WeakRefs')
DEFAULT_PRELUDE_INCLUDES = ('BindingsHelpers.h',)
DEFAULT_BINDINGS_NAMESPACE = 'JSBindings'


@dataclass(frozen=True)
class GenerationContext:
    """
    Everything the generator needs besides the class being bound.

    Attributes:
        exposed_classes: Unqualified names of the classes selected for exposure
        header_paths: Class name -> include path for the native header
        classifier: Type classifier aware of the exposed classes
        scriptability: Filter deciding which members can be exposed
        refcount_members: Member names marking a reference counted class
        prelude_includes: Headers included at the top of every generated unit
        using_namespaces: Extra namespaces opened in every generated unit
        bindings_namespace: Namespace wrapping the generated bindings
    """
    exposed_classes: Tuple[str, ...] = ()
    header_paths: Mapping[str, str] = field(default_factory=dict)
    classifier: TypeClassifier = field(default_factory=TypeClassifier)
    scriptability: ScriptabilityFilter = field(default_factory=ScriptabilityFilter)
    refcount_members: Tuple[str, str] = DEFAULT_REFCOUNT_MEMBERS
    prelude_includes: Tuple[str, ...] = DEFAULT_PRELUDE_INCLUDES
    using_namespaces: Tuple[str, ...] = ()
    bindings_namespace: str = DEFAULT_BINDINGS_NAMESPACE

    @classmethod
    def create(cls, symbol_table: SymbolTable, allow_list: Iterable[str] = (),
               header_paths: Optional[Mapping[str, str]] = None,
               value_types: Iterable[str] = (),
               exclusions: Optional[ExclusionTable] = None,
               opt_out_marker: str = DEFAULT_OPT_OUT_MARKER,
               **options) -> 'GenerationContext':
        """Select the exposed classes from the symbol table and build the context."""
        allow_list = tuple(allow_list)
        exposed = []
        for symbol in symbol_table.classes():
            name = strip_namespace(symbol.name)
            if ScriptabilityFilter.is_class_exposable(symbol, allow_list) and name not in exposed:
                exposed.append(name)

        return cls(
            exposed_classes=tuple(exposed),
            header_paths=dict(header_paths or {}),
            classifier=TypeClassifier(exposed, value_types),
            scriptability=ScriptabilityFilter(opt_out_marker, exclusions),
            **options,
        )

    def is_exposed(self, class_name: str) -> bool:
        return strip_namespace(class_name) in self.exposed_classes

    def include_for_class(self, class_name: str) -> str:
        name = strip_namespace(class_name)
        return self.header_paths.get(name, f'{name}.h')
