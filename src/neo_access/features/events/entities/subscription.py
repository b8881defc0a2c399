"""Subscription handle for in-process change feeds."""

import threading
from typing import Callable, Optional


class FeedSubscription:
    """Releases a handler from the feed it was registered on.
    
    The release callback runs at most once, so ``unsubscribe`` may be called
    any number of times from any thread.
    """
    
    def __init__(self, feed_name: str, release: Callable[[], None]):
        self.feed_name = feed_name
        self._release: Optional[Callable[[], None]] = release
        self._lock = threading.Lock()
    
    @property
    def active(self) -> bool:
        """Check if the subscription still receives signals."""
        return self._release is not None
    
    def unsubscribe(self) -> None:
        with self._lock:
            release, self._release = self._release, None
        if release is not None:
            release()
    
    def __repr__(self) -> str:
        state = "active" if self.active else "released"
        return f"FeedSubscription({self.feed_name}, {state})"
