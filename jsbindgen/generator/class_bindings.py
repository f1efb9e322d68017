"""
Generation of the bindings unit for a single class.
"""

from dataclasses import dataclass

from .. import logger
from ..symbols import Symbol
from .exposition import ClassBindingPlan, ExpositionAssembler
from .generation_context import GenerationContext
from .naming import bindings_file_name


@dataclass(frozen=True)
class GeneratedUnit:
    """One generated source file"""
    class_name: str
    file_name: str
    source: str


class ClassBindingsGenerator:
    """Generates the bindings unit of one exposed class at a time"""

    def __init__(self, context: GenerationContext):
        self.context = context
        self.assembler = ExpositionAssembler(context)

    def plan(self, class_symbol: Symbol) -> ClassBindingPlan:
        return self.assembler.plan(class_symbol)

    def generate(self, class_symbol: Symbol) -> GeneratedUnit:
        class_name = class_symbol.unqualified_name
        logger.assert_true(self.context.is_exposed(class_name),
                           f"Class {class_symbol.name} is not selected for exposure")

        logger.info(f"Generating bindings for {class_name}")
        source = self.assembler.assemble(class_symbol)
        return GeneratedUnit(class_name, bindings_file_name(class_name), source)
