"""
Dependency resolution: which other exposed classes a class's bindings refer to.
"""

from typing import List, Tuple

from ..symbols import Symbol, SymbolKind
from .generation_context import GenerationContext
from .type_classifier import sanitize_type_name


class DependencyResolver:
    """
    Collects exposed class types used by a class's exposable member functions.

    Dependencies are only forward-declared by the generated code, so cycles between
    classes are fine. Order follows discovery so output is reproducible.
    """

    def __init__(self, context: GenerationContext):
        self.context = context

    def find_dependencies(self, class_symbol: Symbol) -> Tuple[str, ...]:
        own_name = class_symbol.unqualified_name
        dependencies: List[str] = []

        for child in class_symbol.children:
            if child.kind != SymbolKind.FUNCTION or 'operator' in child.name:
                continue
            if not self.context.scriptability.is_exposable(child, class_symbol):
                continue

            type_names = [child.type] + [p.basic_type() for p in child.parameters]
            for type_name in type_names:
                if not type_name or not self.context.classifier.is_class_type(type_name):
                    continue
                name = sanitize_type_name(type_name)
                if name != own_name and name not in dependencies:
                    dependencies.append(name)

        return tuple(dependencies)
