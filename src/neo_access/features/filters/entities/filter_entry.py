"""Filter entry entity."""

from dataclasses import dataclass

from .protocols import Specification


@dataclass(frozen=True, eq=False)
class FilterEntry:
    """A role-gated predicate registered for one data type.
    
    With ``inverse=False`` the predicate applies only to identities whose name
    equals ``role``; with ``inverse=True`` it applies to everyone else.
    Entries compare by identity so that disposing one never removes an equal twin.
    """
    
    predicate: Specification
    role: str
    inverse: bool = False
    
    def applies_to(self, identity_name: str) -> bool:
        return (identity_name == self.role) != self.inverse
    
    def __repr__(self) -> str:
        scope = f"not {self.role}" if self.inverse else self.role
        name = getattr(self.predicate, "__name__", type(self.predicate).__name__)
        return f"FilterEntry({name}, applies to {scope})"
