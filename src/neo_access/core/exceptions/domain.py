"""Domain exceptions for neo-access.

Exceptions raised by the permission engine, the filter registry and the
configuration layer.
"""

from .base import NeoAccessError


# Configuration Errors

class ConfigurationError(NeoAccessError):
    """Raised when there's a configuration issue."""
    pass


# Authorization Errors

class AuthorizationError(NeoAccessError):
    """Base class for authorization-related errors."""
    pass


class PermissionDeniedError(AuthorizationError):
    """Raised when an identity is not allowed to access a resource."""
    pass


class InvalidIdentityError(NeoAccessError):
    """Raised when an identity without a name reaches the permission engine.
    
    This is a caller contract violation, not a recoverable condition.
    """
    pass


# Permission Source Errors

class PermissionSourceError(NeoAccessError):
    """Raised when permission records cannot be loaded from a source repository."""
    pass


class DuplicatePermissionError(PermissionSourceError):
    """Raised when a source returns more than one global permission for a name."""
    pass
