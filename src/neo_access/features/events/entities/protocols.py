"""Protocol interfaces for change feeds.

A change feed delivers content-free signals meaning "this category of
records changed". Consumers subscribe with a zero-argument handler and keep
the returned subscription to release it later.
"""

from typing import Callable, Protocol, runtime_checkable


ChangeHandler = Callable[[], None]


@runtime_checkable
class Subscription(Protocol):
    """Handle returned by a change feed subscription."""
    
    def unsubscribe(self) -> None:
        """Stop delivering signals to the handler. Safe to call more than once."""
        ...


@runtime_checkable
class ChangeFeed(Protocol):
    """Protocol for a push-based feed of change signals."""
    
    def subscribe(self, handler: ChangeHandler) -> Subscription:
        """Register a handler invoked on every change signal."""
        ...
