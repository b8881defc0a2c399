"""Copy-on-write cache of access decisions.

The cache is an immutable mapping tagged with the snapshot generation it was
computed against. Writers publish a whole new mapping with one reference
assignment, so readers see either the old or the new complete state and never
block. Concurrent misses for the same key may both compute and publish; the
result is a pure function of the snapshot, so the duplicate write is harmless.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class _CacheState:
    generation: int
    entries: Mapping[str, bool] = field(default_factory=lambda: MappingProxyType({}))


def decision_key(identity_name: str, resource_identifier: Optional[str]) -> str:
    """Cache key for an (identity, resource) pair.
    
    The key is ``name:resource`` with no escaping, so names or identifiers
    containing ":" can collide: identity ``a:b`` on ``c`` and identity ``a``
    on ``b:c`` share the key ``a:b:c``.
    """
    return f"{identity_name}:{resource_identifier or ''}"


class DecisionCache:
    """Memoizes (identity, resource) decisions for one snapshot generation."""
    
    def __init__(self, generation: int = 0):
        self._state = _CacheState(generation)
        # Instrumentation only; not synchronized
        self.hits = 0
        self.misses = 0
    
    @property
    def generation(self) -> int:
        return self._state.generation
    
    def get(self, key: str, generation: int) -> Optional[bool]:
        """Cached decision for ``key``, or None on a miss.
        
        Entries belonging to any generation other than ``generation`` are misses.
        """
        state = self._state
        value = state.entries.get(key) if state.generation == generation else None
        if value is None:
            self.misses += 1
        else:
            self.hits += 1
        return value
    
    def put(self, key: str, value: bool, generation: int) -> None:
        """Publish a new mapping with ``key`` added.
        
        Writes computed against an older generation than the cache holds are
        dropped; a write for a newer generation starts a fresh mapping.
        """
        state = self._state
        if generation < state.generation:
            return
        if generation > state.generation:
            entries = {key: value}
        else:
            entries = dict(state.entries)
            entries[key] = value
        self._state = _CacheState(generation, MappingProxyType(entries))
    
    def reset(self, generation: int) -> None:
        """Replace the cache with an empty one for a newer snapshot generation.
        
        Resetting to the current or an older generation keeps the entries.
        """
        if generation > self._state.generation:
            self._state = _CacheState(generation)
    
    def snapshot(self) -> Mapping[str, bool]:
        """Current entries as a read-only mapping."""
        return self._state.entries
    
    def __len__(self) -> int:
        return len(self._state.entries)
