"""
Overload set construction.

Exposable member functions are grouped by logical name and given a unique mangled
name per parameter-type signature, so each signature gets exactly one C function.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .. import logger
from ..symbols import Parameter, Symbol, SymbolKind, Visibility
from .generation_context import GenerationContext
from .type_classifier import identifier_for_type, is_void


@dataclass(frozen=True)
class Overload:
    """One concrete binding of one function signature"""
    mangled_name: str
    source_function: Symbol
    parameters: Tuple[Parameter, ...]


@dataclass(frozen=True)
class OverloadSet:
    """All overloads sharing a base name, in discovery order"""
    base_name: str
    exposed_name: str
    is_static: bool
    is_constructor: bool
    overloads: Tuple[Overload, ...]

    @property
    def needs_selector(self) -> bool:
        return len(self.overloads) >= 2

    @property
    def selector_name(self) -> str:
        return f'{self.base_name}_Selector'

    @property
    def entry_point(self) -> str:
        """Function to register for this set: the selector, or the only overload."""
        if self.needs_selector:
            return self.selector_name
        return self.overloads[0].mangled_name

    def __len__(self) -> int:
        return len(self.overloads)


def base_function_name(class_name: str, member: Symbol, is_constructor: bool) -> str:
    name = f'{class_name}_Ctor' if is_constructor else f'{class_name}_{member.name}'
    if member.is_static:
        name += '_Static'
    return name


def mangle(base_name: str, parameters: List[Parameter]) -> str:
    return base_name + ''.join('_' + identifier_for_type(p.basic_type()) for p in parameters)


class OverloadSetBuilder:
    """Builds instance or static overload sets for one class"""

    def __init__(self, context: GenerationContext):
        self.context = context

    def is_refcounted(self, class_symbol: Symbol) -> bool:
        """Managed objects carry both reference count members and are not constructible from script."""
        return all(class_symbol.find_child_by_name(name) is not None
                   for name in self.context.refcount_members)

    def is_constructor(self, class_symbol: Symbol, member: Symbol) -> bool:
        return not member.is_static and member.name == class_symbol.unqualified_name

    def accepts(self, class_symbol: Symbol, member: Symbol) -> bool:
        """Check that a member function can be bound as an overload."""
        if member.kind != SymbolKind.FUNCTION or member.visibility != Visibility.PUBLIC:
            return False
        if 'operator' in member.name:
            return False
        if not self.context.scriptability.is_exposable(member, class_symbol):
            return False

        classifier = self.context.classifier
        is_ctor = self.is_constructor(class_symbol, member)
        if is_ctor and self.is_refcounted(class_symbol):
            logger.debug(f"Skipping constructor of refcounted class {class_symbol.name}")
            return False
        if not is_ctor and not (is_void(member.type) or classifier.is_marshalable(member.type)):
            logger.debug(f"Skipping {class_symbol.name}::{member.name}: unsupported return type {member.type}")
            return False

        for param in member.parameters:
            basic = param.basic_type()
            if not classifier.is_marshalable(basic) or '*' in basic:
                logger.debug(f"Skipping {class_symbol.name}::{member.name}: unsupported parameter {param.type}")
                return False
        return True

    def build(self, class_symbol: Symbol, static: bool) -> List[OverloadSet]:
        class_name = class_symbol.unqualified_name
        grouped: Dict[str, List[Overload]] = {}
        set_info: Dict[str, Tuple[str, bool]] = {}

        for member in class_symbol.children:
            if member.kind != SymbolKind.FUNCTION or member.is_static != static:
                continue
            if not self.accepts(class_symbol, member):
                continue

            is_ctor = self.is_constructor(class_symbol, member)
            base_name = base_function_name(class_name, member, is_ctor)
            mangled_name = mangle(base_name, member.parameters)

            overloads = grouped.setdefault(base_name, [])
            set_info.setdefault(base_name, (member.name, is_ctor))

            # Same signature already registered, typically the const variation
            if any(o.mangled_name == mangled_name for o in overloads):
                continue
            overloads.append(Overload(mangled_name, member, tuple(member.parameters)))

        return [
            OverloadSet(
                base_name=base_name,
                exposed_name=set_info[base_name][0],
                is_static=static,
                is_constructor=set_info[base_name][1],
                overloads=tuple(overloads),
            )
            for base_name, overloads in grouped.items()
        ]

    def build_instance(self, class_symbol: Symbol) -> List[OverloadSet]:
        """Instance methods and constructors"""
        return self.build(class_symbol, static=False)

    def build_static(self, class_symbol: Symbol) -> List[OverloadSet]:
        return self.build(class_symbol, static=True)
