"""Change feed entities and protocols."""

from .protocols import ChangeFeed, ChangeHandler, Subscription
from .subscription import FeedSubscription

__all__ = [
    "ChangeFeed",
    "ChangeHandler",
    "Subscription",
    "FeedSubscription",
]
