"""Events feature for neo-access.

In-process change feeds used to tell the permission engine that global or
role permission records changed.
"""

from .entities import ChangeFeed, ChangeHandler, Subscription, FeedSubscription
from .services import SignalFeed

__all__ = [
    "ChangeFeed",
    "ChangeHandler",
    "Subscription",
    "FeedSubscription",
    "SignalFeed",
]
