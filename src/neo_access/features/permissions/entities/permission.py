"""Permission domain entities for the neo-access permissions feature.

Global permissions are namespace defaults for a resource identifier and
everything nested beneath it; role permissions override them for one role.
"""

from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Sequence, Tuple


@dataclass(frozen=True)
class GlobalPermission:
    """Default allow/deny rule for a resource identifier."""
    
    name: str
    is_allowed: bool
    
    def __str__(self) -> str:
        return f"{self.name}={'allow' if self.is_allowed else 'deny'}"


@dataclass(frozen=True)
class RolePermission:
    """Allow/deny override for a resource identifier scoped to one role."""
    
    name: str
    role_id: str
    is_allowed: bool
    
    def to_rule(self) -> "RoleRule":
        return RoleRule(self.role_id, self.is_allowed)
    
    def __str__(self) -> str:
        return f"{self.name}[{self.role_id}]={'allow' if self.is_allowed else 'deny'}"


class RoleRule(NamedTuple):
    """A (role, decision) pair stored under a resource name in the role index."""
    
    role_id: str
    is_allowed: bool


@dataclass(frozen=True)
class Identity:
    """Minimal principal: the engine only ever looks at the name."""
    
    name: str


@dataclass(frozen=True)
class ResourceName:
    """Value object splitting a resource identifier into namespace segments.
    
    ``None`` and the empty string both normalise to ``""`` with no segments.
    The separator is matched literally, never as a pattern.
    """
    
    value: str
    separator: str = "."
    
    @classmethod
    def parse(cls, identifier: Optional[str], separator: str = ".") -> "ResourceName":
        return cls(identifier or "", separator)
    
    @property
    def segments(self) -> Tuple[str, ...]:
        if not self.value:
            return ()
        return tuple(self.value.split(self.separator))
    
    def candidates(self) -> List[str]:
        """Enclosing names from the full path down to the first segment."""
        return candidate_names(self.segments, self.separator)
    
    def __str__(self) -> str:
        return self.value


def join_segments(segments: Sequence[str], depth: int, separator: str = ".") -> str:
    """Join the first ``depth`` segments back into a resource name."""
    return separator.join(segments[:depth])


def candidate_names(segments: Sequence[str], separator: str = ".") -> List[str]:
    """List enclosing names, most specific first.
    
    ``("A", "B", "C")`` gives ``["A.B.C", "A.B", "A"]``.
    """
    return [join_segments(segments, depth, separator) for depth in range(len(segments), 0, -1)]
