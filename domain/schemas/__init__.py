"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.calendar_schemas import (
    MealCandidateSchema,
    RoleMealSchema,
    SlotSchema,
    CalendarSchema,
    GenerateCalendarRequest,
    CalendarGenerationResponse,
    SendCalendarRequest,
    RecipientResultSchema,
    DispatchResponse,
)
from domain.schemas.market_schemas import MarketListItemResponse, MarketListResponse
from domain.schemas.profile_schemas import FamilyMember, UserProfile

__all__ = [
    # Calendar schemas
    "MealCandidateSchema",
    "RoleMealSchema",
    "SlotSchema",
    "CalendarSchema",
    "GenerateCalendarRequest",
    "CalendarGenerationResponse",
    "SendCalendarRequest",
    "RecipientResultSchema",
    "DispatchResponse",
    # Market list schemas
    "MarketListItemResponse",
    "MarketListResponse",
    # Profile schemas
    "FamilyMember",
    "UserProfile",
]
