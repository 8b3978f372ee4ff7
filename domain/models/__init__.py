"""
Domain models package - immutable calendar, dispatch and market list entities.
"""

from domain.models.calendar import (
    DAYS_PER_WEEK,
    MealCandidate,
    Slot,
    SlotAssignment,
    GeneratedCalendar,
    NoMealsAvailable,
    NO_MEALS_AVAILABLE,
)
from domain.models.dispatch import (
    SendPayload,
    DispatchFailure,
    DispatchResult,
    AggregateDispatchResult,
)
from domain.models.market import MarketListItem

__all__ = [
    # Calendar models
    "DAYS_PER_WEEK",
    "MealCandidate",
    "Slot",
    "SlotAssignment",
    "GeneratedCalendar",
    "NoMealsAvailable",
    "NO_MEALS_AVAILABLE",
    # Dispatch models
    "SendPayload",
    "DispatchFailure",
    "DispatchResult",
    "AggregateDispatchResult",
    # Market list models
    "MarketListItem",
]
