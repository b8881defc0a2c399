"""Change tracking for permission records.

Listens to the global and role change feeds and answers one question: has
anything changed since the last successful reload? Handlers only bump a
counter; the reload itself happens on the next decision request, so any
burst of signals collapses into a single reload.
"""

import itertools
import logging
from typing import List, Optional

from ...events.entities.protocols import ChangeFeed, Subscription

logger = logging.getLogger(__name__)


class ChangeTracker:
    """Staleness flag driven by two independent change feeds."""
    
    def __init__(
        self,
        global_changes: Optional[ChangeFeed] = None,
        role_changes: Optional[ChangeFeed] = None
    ):
        self._counter = itertools.count(1)
        # Starts stale: nothing has been loaded yet
        self._version = next(self._counter)
        self._loaded_version = 0
        
        self._subscriptions: List[Subscription] = []
        if global_changes is not None:
            self._subscriptions.append(global_changes.subscribe(self._on_global_change))
        if role_changes is not None:
            self._subscriptions.append(role_changes.subscribe(self._on_role_change))
    
    @property
    def is_stale(self) -> bool:
        return self._version != self._loaded_version
    
    def mark_stale(self) -> None:
        """Force a reload on the next decision request."""
        self._version = next(self._counter)
    
    def begin_reload(self) -> int:
        """Capture the change state a reload is about to load."""
        return self._version
    
    def mark_fresh(self, token: int) -> None:
        """Record a successful reload of the state captured by ``begin_reload``.
        
        Signals received while the reload was running keep the tracker stale.
        """
        if token > self._loaded_version:
            self._loaded_version = token
    
    def close(self) -> None:
        """Release both change feed subscriptions."""
        subscriptions, self._subscriptions = self._subscriptions, []
        for subscription in subscriptions:
            subscription.unsubscribe()
        if subscriptions:
            logger.debug(f"Released {len(subscriptions)} permission change subscriptions")
    
    def _on_global_change(self) -> None:
        self.mark_stale()
    
    def _on_role_change(self) -> None:
        self.mark_stale()
