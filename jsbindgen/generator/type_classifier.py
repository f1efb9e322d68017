"""
Type classification for native type names.

Every declared type is reduced to a basic type name and mapped to exactly one
TypeCategory; the rest of the generator only ever matches on the category.
"""

import re
from enum import Enum
from typing import FrozenSet, Iterable

from ..symbols.symbol import strip_namespace

NUMBER_TYPES = frozenset({
    'char', 'short', 'int', 'long', 'long long',
    'unsigned', 'unsigned char', 'unsigned short', 'unsigned int',
    'unsigned long', 'unsigned long long',
    'signed char', 'uint', 'ushort', 'uchar',
    'int8_t', 'uint8_t', 'int16_t', 'uint16_t',
    'int32_t', 'uint32_t', 'int64_t', 'uint64_t',
    'u8', 'u16', 'u32', 'u64', 's8', 's16', 's32', 's64',
    'size_t',
    'float', 'double',
})

BOOLEAN_TYPE = 'bool'

STRING_TYPES = frozenset({'string', 'String'})

VOID_TYPE = 'void'


class TypeCategory(Enum):
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    STRING = "string"
    POD = "pod"
    CLASS_BY_VALUE = "class_by_value"
    CLASS_BY_POINTER = "class_by_pointer"
    UNSUPPORTED = "unsupported"


CLASS_CATEGORIES = frozenset({TypeCategory.CLASS_BY_VALUE, TypeCategory.CLASS_BY_POINTER})

# Categories the marshaling emitter knows how to read and push
MARSHALABLE_CATEGORIES = frozenset({
    TypeCategory.NUMERIC,
    TypeCategory.BOOLEAN,
    TypeCategory.STRING,
    TypeCategory.CLASS_BY_VALUE,
    TypeCategory.CLASS_BY_POINTER,
})


def _strip_const(t: str) -> str:
    if t.startswith('const '):
        t = t[len('const '):].strip()
    if t.endswith(' const'):
        t = t[:-len(' const')].strip()
    return t


def sanitize_type_name(type_name: str) -> str:
    """
    Reduce a declared type to its basic type name.

    Strips the trailing reference or pointer marker, const qualifiers and any
    namespace prefix. The result is a fixed point, so sanitizing twice is a no-op:
        'const float3&'      -> 'float3'
        'Tundra::Entity *'   -> 'Entity'
        'const std::string&' -> 'string'
    """
    t = type_name.strip()
    while True:
        stripped = t
        if stripped.endswith('&') or stripped.endswith('*'):
            stripped = stripped[:-1].strip()
        stripped = _strip_const(stripped)
        if stripped == t:
            break
        t = stripped
    return strip_namespace(t)


def identifier_for_type(type_name: str) -> str:
    """Sanitized basic type name usable inside a C identifier."""
    return re.sub(r'\W', '_', sanitize_type_name(type_name))


def is_void(type_name: str) -> bool:
    return sanitize_type_name(type_name) == VOID_TYPE and '*' not in type_name


def is_pod(category: TypeCategory) -> bool:
    return category in (TypeCategory.NUMERIC, TypeCategory.BOOLEAN, TypeCategory.POD)


class TypeClassifier:
    """
    Classifies declared type names against the set of exposed classes.

    Attributes:
        class_names: Unqualified names of the classes being exposed
        value_types: Simple value types treated as plain-old-data
    """

    def __init__(self, class_names: Iterable[str] = (), value_types: Iterable[str] = ()):
        self.class_names: FrozenSet[str] = frozenset(class_names)
        self.value_types: FrozenSet[str] = frozenset(value_types)

    def classify(self, type_name: str) -> TypeCategory:
        raw = type_name.strip()
        basic = sanitize_type_name(raw)

        if basic in STRING_TYPES:
            return TypeCategory.STRING
        if not basic or basic == VOID_TYPE:
            return TypeCategory.UNSUPPORTED
        if any(marker in raw for marker in ('[', '(', '<')) or 'std::' in raw:
            return TypeCategory.UNSUPPORTED

        if raw.count('*') > 1 or ('*' in raw and raw.endswith('&')):
            # Pointer to pointer, reference to pointer
            return TypeCategory.UNSUPPORTED

        # A const pointer (Foo* const) is still passed and returned as a pointer
        is_pointer = re.sub(r'\s*const$', '', raw).endswith('*')
        if basic in NUMBER_TYPES:
            return TypeCategory.UNSUPPORTED if is_pointer else TypeCategory.NUMERIC
        if basic == BOOLEAN_TYPE:
            return TypeCategory.UNSUPPORTED if is_pointer else TypeCategory.BOOLEAN
        if basic in self.value_types:
            return TypeCategory.UNSUPPORTED if is_pointer else TypeCategory.POD
        if basic in self.class_names:
            return TypeCategory.CLASS_BY_POINTER if is_pointer else TypeCategory.CLASS_BY_VALUE
        return TypeCategory.UNSUPPORTED

    def is_marshalable(self, type_name: str) -> bool:
        return self.classify(type_name) in MARSHALABLE_CATEGORIES

    def is_class_type(self, type_name: str) -> bool:
        return self.classify(type_name) in CLASS_CATEGORIES
