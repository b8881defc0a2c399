"""Protocol interfaces for row-level filters."""

from typing import Any, Callable, Protocol, TypeVar, runtime_checkable


T = TypeVar("T")

# A filter predicate: returns True for rows the identity may see
Specification = Callable[[Any], bool]


@runtime_checkable
class FilterableQuery(Protocol):
    """A lazily evaluated query that can be narrowed by a predicate.
    
    ``filter`` returns a new query of the same shape; the receiver is untouched.
    """
    
    def filter(self, predicate: Specification) -> "FilterableQuery":
        ...
