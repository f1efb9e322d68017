"""
Function parameter representation.
"""


class Parameter:
    """Represents a single function parameter with declared type and name."""

    def __init__(self, param_type: str, name: str = ''):
        self.type = param_type
        self.name = name

    def basic_type(self) -> str:
        """
        Return the declared type without const and reference qualifiers.

        A pointer marker is kept, so callers can still tell pointer parameters apart:
            'const float3&' -> 'float3'
            'const Foo*'    -> 'Foo*'
        """
        t = self.type.strip()
        if t.startswith('const '):
            t = t[len('const '):].strip()
        if t.endswith('&'):
            t = t[:-1].strip()
        if t.endswith(' const'):
            t = t[:-len(' const')].strip()
        return t

    def is_pointer(self) -> bool:
        return self.type.strip().endswith('*')

    def is_reference(self) -> bool:
        return self.type.strip().endswith('&')

    def to_string(self) -> str:
        """Convert parameter back to string form."""
        result = self.type
        if self.name:
            result += f" {self.name}"
        return result

    def __repr__(self) -> str:
        return f"Parameter({self.to_string()!r})"
