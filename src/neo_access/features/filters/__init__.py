"""Filters feature for neo-access.

Role-gated row-level filters:
- entities/: FilterEntry and the FilterableQuery protocol
- services/: FilterRegistry with disposable registrations
"""

from .entities import FilterEntry, FilterableQuery, Specification
from .services import FilterRegistry, FilterRegistration

__all__ = [
    "FilterEntry",
    "FilterableQuery",
    "Specification",
    "FilterRegistry",
    "FilterRegistration",
]
