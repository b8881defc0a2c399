"""In-process change feed.

Delivers content-free change signals to registered handlers synchronously on
the publisher's thread. Handlers are expected to be trivial (flip a flag,
bump a counter); anything expensive belongs to the consumer's next request.
"""

import logging
import threading
from typing import Tuple

from ..entities.protocols import ChangeHandler
from ..entities.subscription import FeedSubscription

logger = logging.getLogger(__name__)


class SignalFeed:
    """Observer-style feed of change signals for one record category."""
    
    def __init__(self, name: str):
        self.name = name
        # Copy-on-write so publish never iterates a list being modified
        self._handlers: Tuple[ChangeHandler, ...] = ()
        self._lock = threading.Lock()
    
    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)
    
    def subscribe(self, handler: ChangeHandler) -> FeedSubscription:
        """Register a handler and return the subscription that releases it."""
        with self._lock:
            self._handlers = self._handlers + (handler,)
        
        logger.debug(f"Subscribed handler to feed {self.name} ({len(self._handlers)} total)")
        return FeedSubscription(self.name, lambda: self._remove(handler))
    
    def publish(self) -> int:
        """Signal every subscribed handler.
        
        A failing handler is logged and does not prevent delivery to the rest.
        
        Returns:
            Number of handlers signalled successfully
        """
        delivered = 0
        for handler in self._handlers:
            try:
                handler()
                delivered += 1
            except Exception as e:
                logger.error(f"Change handler failed on feed {self.name}: {e}")
        return delivered
    
    def _remove(self, handler: ChangeHandler) -> None:
        with self._lock:
            handlers = list(self._handlers)
            for index, registered in enumerate(handlers):
                if registered is handler:
                    del handlers[index]
                    break
            self._handlers = tuple(handlers)
        
        logger.debug(f"Unsubscribed handler from feed {self.name}")
