"""Change feed services."""

from .signal_feed import SignalFeed

__all__ = ["SignalFeed"]
