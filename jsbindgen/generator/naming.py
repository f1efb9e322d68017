"""
Naming conventions shared by the emitted bindings.
"""

import re

from ..symbols import strip_namespace

DUK_SIGNATURE = '(duk_context* ctx)'


def class_identifier(class_name: str) -> str:
    """Name of the C string holding the script-visible class identifier."""
    return f'{strip_namespace(class_name)}_Id'


def finalizer_name(class_name: str) -> str:
    return f'{strip_namespace(class_name)}_Finalizer'


def getter_name(class_name: str, property_name: str) -> str:
    return f'{strip_namespace(class_name)}_Get_{property_name}'


def setter_name(class_name: str, property_name: str) -> str:
    return f'{strip_namespace(class_name)}_Set_{property_name}'


def bindings_file_name(class_name: str) -> str:
    return f'{strip_namespace(class_name)}Bindings.cpp'


# Locals declared by the generated wrappers themselves
RESERVED_LOCALS = frozenset({'ctx', 'thisObj', 'newObj', 'ret', 'numArgs', 'obj'})


def local_name(name: str, index: int) -> str:
    """Variable name for an extracted argument; unnamed or clashing parameters go by position."""
    if not name or name in RESERVED_LOCALS or re.fullmatch(r'arg\d+', name):
        return f'arg{index}'
    return name
