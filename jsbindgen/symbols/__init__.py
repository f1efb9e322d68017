"""
Symbol tree describing the native classes to bind.
"""

from .symbol_kind import SymbolKind, Visibility
from .parameter import Parameter
from .symbol import Symbol, strip_namespace, extract_namespace
from .symbol_table import SymbolTable

__all__ = [
    'SymbolKind',
    'Visibility',
    'Parameter',
    'Symbol',
    'strip_namespace',
    'extract_namespace',
    'SymbolTable',
]
