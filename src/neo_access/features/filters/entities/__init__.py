"""Filter entities and protocols."""

from .filter_entry import FilterEntry
from .protocols import FilterableQuery, Specification

__all__ = [
    "FilterEntry",
    "FilterableQuery",
    "Specification",
]
