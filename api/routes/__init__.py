"""API routes package"""

from . import calendars, health, market_list

__all__ = ["calendars", "health", "market_list"]
