"""Filter services."""

from .filter_registry import FilterRegistry, FilterRegistration

__all__ = ["FilterRegistry", "FilterRegistration"]
