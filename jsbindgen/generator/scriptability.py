"""
Scriptability filter: decides whether a member can be exposed to script at all.
"""

import re
from typing import Iterable, Optional

from .. import logger
from ..symbols import Symbol, SymbolKind, strip_namespace
from .exclusions import ExclusionTable
from .type_classifier import STRING_TYPES, sanitize_type_name

DEFAULT_OPT_OUT_MARKER = '[noscript]'

# Pointers to float vectors, e.g. 'float3 *'
_FLOAT_VECTOR_POINTER = re.compile(r'float[234]\*$')


def is_bad_type(type_name: str) -> bool:
    """
    Stricter type check applied before classification.

    Flags bool and float pointers, float vector pointers, standard library types,
    C strings and array syntax. The string types are always allowed.
    """
    if sanitize_type_name(type_name) in STRING_TYPES:
        return False
    t = re.sub(r'\s+\*', '*', type_name.strip())
    return ('bool*' in t
            or t.endswith('float*')
            or _FLOAT_VECTOR_POINTER.search(t) is not None
            or 'std::' in t
            or 'char*' in t
            or '[' in t)


class ScriptabilityFilter:
    """Applies the exposability rules to functions and data members"""

    def __init__(self, opt_out_marker: str = DEFAULT_OPT_OUT_MARKER,
                 exclusions: Optional[ExclusionTable] = None):
        self.opt_out_marker = opt_out_marker
        self.exclusions = exclusions or ExclusionTable()

    def is_exposable(self, member: Symbol, owner: Optional[Symbol] = None) -> bool:
        if '[' in member.arg_list:
            return False
        if is_bad_type(member.type):
            return False
        for param in member.parameters:
            if is_bad_type(param.type) or is_bad_type(param.basic_type()):
                return False

        if self.opt_out_marker in member.documentation_tags:
            return False
        if self.opt_out_marker in member.return_comment:
            return False

        if owner is not None and self.exclusions.is_excluded(owner, member):
            logger.debug(f"Member {owner.name}::{member.name} excluded by rule")
            return False
        return True

    @staticmethod
    def is_class_exposable(symbol: Symbol, allow_list: Iterable[str]) -> bool:
        """Only classes are candidates; an empty allow-list exposes every class."""
        if symbol.kind != SymbolKind.CLASS:
            return False
        allowed = set(allow_list)
        return not allowed or strip_namespace(symbol.name) in allowed
