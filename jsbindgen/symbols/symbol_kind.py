"""
Symbol kind and visibility enumerations for type-safe symbol classification.
"""

from enum import Enum


class SymbolKind(Enum):
    """Kinds of native program elements the generator understands."""
    CLASS = "class"
    FUNCTION = "function"
    VARIABLE = "variable"


class Visibility(Enum):
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
