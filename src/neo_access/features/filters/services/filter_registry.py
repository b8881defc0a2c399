"""
Filter Registry for neo-access

Keeps, per data type, an ordered list of role-gated predicates and applies
the ones relevant to an identity to a query or an in-memory collection.
"""

import logging
import threading
from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple

from ....core.identity import Principal, identity_name
from ..entities.filter_entry import FilterEntry
from ..entities.protocols import FilterableQuery, Specification

logger = logging.getLogger(__name__)


class FilterRegistration:
    """Disposal handle for a registered filter.
    
    ``dispose`` removes exactly the entry it was created for; calling it again
    does nothing. Also usable as a context manager.
    """
    
    def __init__(self, registry: "FilterRegistry", type_token: Hashable, entry: FilterEntry):
        self.type_token = type_token
        self.entry = entry
        self._registry: Optional["FilterRegistry"] = registry
        self._lock = threading.Lock()
    
    @property
    def disposed(self) -> bool:
        return self._registry is None
    
    def dispose(self) -> None:
        with self._lock:
            registry, self._registry = self._registry, None
        if registry is not None:
            registry._remove(self.type_token, self.entry)
    
    close = dispose
    
    def __enter__(self) -> "FilterRegistration":
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.dispose()


class FilterRegistry:
    """Registry of row-level filters keyed by a type token.
    
    Per-type lists are immutable tuples replaced on every write, so
    ``apply_filters`` iterates without locking while registrations and
    disposals serialize on a single writer lock.
    """
    
    def __init__(self):
        self._filters: Dict[Hashable, Tuple[FilterEntry, ...]] = {}
        self._lock = threading.Lock()
    
    def register_filter(
        self,
        type_token: Hashable,
        predicate: Specification,
        role: str,
        inverse: bool = False
    ) -> FilterRegistration:
        """
        Register a filter for a data type.
        
        Args:
            type_token: Stable token for the filtered type (usually the class)
            predicate: Returns True for rows that remain visible
            role: Role the filter is scoped to
            inverse: Apply to identities other than ``role`` instead
            
        Returns:
            Handle whose disposal removes this filter
        """
        entry = FilterEntry(predicate=predicate, role=role, inverse=inverse)
        with self._lock:
            self._filters[type_token] = self._filters.get(type_token, ()) + (entry,)
        
        logger.debug(f"Registered {entry!r} for {_token_name(type_token)}")
        return FilterRegistration(self, type_token, entry)
    
    def registered_filters(self, type_token: Hashable) -> Tuple[FilterEntry, ...]:
        """Filters currently registered for a type, in registration order."""
        return self._filters.get(type_token, ())
    
    def applicable_filters(self, type_token: Hashable, identity: Principal) -> List[FilterEntry]:
        """Filters for a type that apply to the identity, in registration order."""
        name = identity_name(identity)
        return [entry for entry in self.registered_filters(type_token) if entry.applies_to(name)]
    
    def apply_filters(self, type_token: Hashable, identity: Principal, data: Any) -> Any:
        """
        Narrow a query or collection with the filters that apply to an identity.
        
        Queries (objects with a ``filter`` method) are narrowed by chaining
        ``filter`` calls; any other iterable is materialized into a new list.
        When nothing is registered for the type the input is returned as is.
        
        Args:
            type_token: Token the filters were registered under
            identity: Principal whose name selects the filters
            data: FilterableQuery or iterable of rows
            
        Returns:
            Data of the same shape, filtered
        """
        registered = self.registered_filters(type_token)
        if not registered:
            return data
        
        predicates = [entry.predicate for entry in self.applicable_filters(type_token, identity)]
        
        if isinstance(data, FilterableQuery):
            result = data
            for predicate in predicates:
                result = result.filter(predicate)
            return result
        
        return _filter_collection(data, predicates)
    
    def clear(self, type_token: Optional[Hashable] = None) -> None:
        """Drop every filter, or only those for one type.
        
        Handles of dropped entries become no-ops.
        """
        with self._lock:
            if type_token is None:
                self._filters = {}
            else:
                self._filters.pop(type_token, None)
    
    def _remove(self, type_token: Hashable, entry: FilterEntry) -> None:
        with self._lock:
            entries = self._filters.get(type_token, ())
            remaining = tuple(registered for registered in entries if registered is not entry)
            if len(remaining) == len(entries):
                return
            if remaining:
                self._filters[type_token] = remaining
            else:
                del self._filters[type_token]
        
        logger.debug(f"Removed {entry!r} for {_token_name(type_token)}")


def _filter_collection(data: Iterable[Any], predicates: List[Specification]) -> List[Any]:
    return [item for item in data if all(predicate(item) for predicate in predicates)]


def _token_name(type_token: Hashable) -> str:
    return getattr(type_token, "__name__", str(type_token))
