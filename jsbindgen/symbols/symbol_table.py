"""
SymbolTable class holding the top-level symbols of the program being bound.
"""

from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional

from .symbol import Symbol
from .symbol_kind import SymbolKind
from .. import logger


class SymbolTable:
    """
    Read-only collection of top-level symbols in discovery order.

    Symbols are either handed in directly or loaded from Doxygen XML.
    Nothing in the generator mutates the table once it is built.
    """

    def __init__(self, symbols: Iterable[Symbol] = ()):
        self._symbols: Dict[str, Symbol] = {}
        for symbol in symbols:
            if symbol.name in self._symbols:
                logger.warning(f"Duplicate symbol {symbol.name}, keeping the first definition")
                continue
            self._symbols[symbol.name] = symbol

    @classmethod
    def load_from_doxygen(cls, xml_dir: Path) -> 'SymbolTable':
        """Load all class symbols from a Doxygen XML output directory."""
        from ..doxygen.doxygen_parser import DoxygenParser

        logger.info(f"Loading symbols from Doxygen XML at {xml_dir}")
        symbols = DoxygenParser(xml_dir).parse_classes()
        table = cls(symbols)
        logger.info(f"Loaded {len(table)} symbols")
        return table

    def get_symbol(self, name: str) -> Optional[Symbol]:
        """Get symbol by (possibly qualified) name."""
        return self._symbols.get(name)

    def classes(self) -> Iterator[Symbol]:
        """Iterate class symbols in discovery order."""
        for symbol in self._symbols.values():
            if symbol.kind == SymbolKind.CLASS:
                yield symbol

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols.values())
