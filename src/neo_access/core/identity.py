"""Principal contract shared by the permission engine and the filter registry."""

from typing import Any, Protocol, runtime_checkable

from .exceptions import InvalidIdentityError


@runtime_checkable
class Principal(Protocol):
    """Anything with a display name; the name is matched against role ids."""
    
    @property
    def name(self) -> str:
        ...


def identity_name(identity: Any) -> str:
    """Return the identity's name.
    
    Raises:
        InvalidIdentityError: If the identity is missing or has no name
    """
    name = getattr(identity, "name", None)
    if not isinstance(name, str):
        raise InvalidIdentityError(
            "Identity name is required for access control",
            details={"identity_type": type(identity).__name__}
        )
    return name
