"""
Domain enums for the CookCourse calendar service.
Contains all enumeration types used across the domain models.
"""

import enum
from typing import Any


class PeriodKind(str, enum.Enum):
    """Length of a generated meal calendar"""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @classmethod
    def parse(cls, value: Any) -> "PeriodKind":
        """Parse a period kind, falling back to WEEKLY for anything unrecognized."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.WEEKLY


class RoleKind(str, enum.Enum):
    """Meal occasion within a day. Declaration order is the display order."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class SendState(str, enum.Enum):
    """Lifecycle of a single recipient send: PENDING -> SENT | FAILED"""

    PENDING = "pending"
    SENT = "sent"
    FAILED = "failed"


class DispatchOutcome(str, enum.Enum):
    """Aggregate classification of one dispatch run"""

    FULL_SUCCESS = "full_success"
    PARTIAL_SUCCESS = "partial_success"
    TOTAL_FAILURE = "total_failure"


class FailureCategory(str, enum.Enum):
    """Diagnostic classification of a failed send"""

    RATE_LIMITED = "rate_limited"
    PROVIDER_ERROR = "provider_error"
    TRANSPORT_ERROR = "transport_error"
    UNKNOWN = "unknown"
