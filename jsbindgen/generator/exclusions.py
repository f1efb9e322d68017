"""
Declarative exclusion table for members that must not be exposed.

Native libraries occasionally declare members that cannot be bound (unimplemented
functions, members hidden in unnamed unions, ...). Instead of special-casing them in
the generator, such members are listed as rules and consulted by the scriptability filter.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from ..symbols import Symbol, SymbolKind, strip_namespace
from .type_classifier import sanitize_type_name


@dataclass(frozen=True)
class ExclusionRule:
    """
    One excluded member, or group of members.

    class_name: Unqualified class name the rule applies to
    member_name: Member name; None matches every member of the class
    parameter_types: Exact basic parameter types; None matches any signature
    kind: Restrict the rule to functions or variables; None matches both
    """
    class_name: str
    member_name: Optional[str] = None
    parameter_types: Optional[Tuple[str, ...]] = None
    kind: Optional[SymbolKind] = None

    def matches(self, owner: Symbol, member: Symbol) -> bool:
        if strip_namespace(owner.name) != self.class_name:
            return False
        if self.kind is not None and member.kind != self.kind:
            return False
        if self.member_name is not None and member.name != self.member_name:
            return False
        if self.parameter_types is not None:
            signature = tuple(sanitize_type_name(p.basic_type()) for p in member.parameters)
            if signature != self.parameter_types:
                return False
        return True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ExclusionRule':
        unknown = set(data) - {'class', 'member', 'parameters', 'kind'}
        if unknown:
            raise KeyError(f"Unknown exclusion rule keys: {', '.join(sorted(unknown))}")
        if 'class' not in data:
            raise KeyError("Exclusion rule requires a 'class' entry")

        parameters = data.get('parameters')
        kind = data.get('kind')
        return cls(
            class_name=data['class'],
            member_name=data.get('member'),
            parameter_types=tuple(parameters) if parameters is not None else None,
            kind=SymbolKind(kind) if kind is not None else None,
        )


class ExclusionTable:
    """Ordered, read-only set of exclusion rules"""

    def __init__(self, rules: Iterable[ExclusionRule] = ()):
        self._rules: Tuple[ExclusionRule, ...] = tuple(rules)

    @property
    def rules(self) -> Tuple[ExclusionRule, ...]:
        return self._rules

    def is_excluded(self, owner: Symbol, member: Symbol) -> bool:
        return any(rule.matches(owner, member) for rule in self._rules)

    def __len__(self) -> int:
        return len(self._rules)
