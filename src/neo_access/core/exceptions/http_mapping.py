"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .base import NeoAccessError
from .domain import (
    ConfigurationError,
    AuthorizationError,
    PermissionDeniedError,
    InvalidIdentityError,
    PermissionSourceError,
    DuplicatePermissionError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 401 Unauthorized
    InvalidIdentityError: 401,
    
    # 403 Forbidden
    AuthorizationError: 403,
    PermissionDeniedError: 403,
    
    # 500 Internal Server Error
    ConfigurationError: 500,
    DuplicatePermissionError: 500,
    
    # 503 Service Unavailable
    PermissionSourceError: 503,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for an exception.
    
    The most specific class in the exception's MRO that has a mapping wins;
    unmapped exceptions map to 500.
    """
    for exception_type in type(exception).__mro__:
        if exception_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_type]
        if exception_type is NeoAccessError:
            break
    return 500
