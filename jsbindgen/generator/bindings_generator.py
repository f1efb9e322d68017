"""
Whole-run generation over every exposed class of a symbol table.
"""

from pathlib import Path
from typing import List

from .. import logger
from ..result import GenerationResult, GenerationStatus
from ..symbols import SymbolTable
from .class_bindings import ClassBindingsGenerator
from .generation_context import GenerationContext


class BindingsGenerator:
    """
    Generates one bindings unit per exposed class.

    Classes are independent of each other: a failure while generating one class is
    logged and reported in its result, and generation continues with the next class.
    """

    def __init__(self, symbol_table: SymbolTable, context: GenerationContext):
        self.symbol_table = symbol_table
        self.context = context
        self.class_generator = ClassBindingsGenerator(context)

    def generate_all(self) -> List[GenerationResult]:
        results = []
        for class_symbol in self.symbol_table.classes():
            if not self.context.is_exposed(class_symbol.name):
                continue
            try:
                unit = self.class_generator.generate(class_symbol)
            except Exception as e:
                logger.exception(f"Generating bindings for {class_symbol.name} failed")
                results.append(GenerationResult(class_symbol.unqualified_name, GenerationStatus.FAILED, str(e)))
                continue
            results.append(GenerationResult(unit.class_name, GenerationStatus.SUCCESS,
                                            f"Generated {unit.file_name}", unit=unit))

        failed = sum(1 for r in results if not r.succeeded)
        logger.info(f"Generated bindings for {len(results) - failed} classes, {failed} failed")
        return results

    def write_all(self, output_dir: Path) -> List[GenerationResult]:
        """Generate every class and write the successful units into output_dir."""
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        results = self.generate_all()
        for result in results:
            if result.unit is None:
                continue
            output_path = output_dir / result.unit.file_name
            with open(output_path, 'w', newline='\n', encoding='utf-8') as f:
                f.write(result.unit.source)
            logger.debug(f"Wrote {output_path}")
        return results
