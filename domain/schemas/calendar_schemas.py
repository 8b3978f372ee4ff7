from __future__ import annotations

import datetime as dt
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from domain.enums import DispatchOutcome, FailureCategory, PeriodKind, RoleKind, SendState


class MealCandidateSchema(BaseModel):
    id: str
    name: str
    category: str = ""
    image_ref: Optional[str] = None

    model_config = {"from_attributes": True}


class RoleMealSchema(BaseModel):
    role: RoleKind
    meal: Optional[MealCandidateSchema] = None


class SlotSchema(BaseModel):
    date: dt.date
    meals: List[RoleMealSchema]


class CalendarSchema(BaseModel):
    period: PeriodKind
    anchor_date: date
    label: Optional[str] = None
    slots: List[SlotSchema] = Field(..., min_length=1)

    @field_validator("period", mode="before")
    @classmethod
    def parse_period(cls, v):
        return PeriodKind.parse(v)


class GenerateCalendarRequest(BaseModel):
    user_id: str = Field(..., min_length=1)
    period: PeriodKind = PeriodKind.WEEKLY
    anchor_date: Optional[date] = None
    locale: Optional[str] = None

    @field_validator("period", mode="before")
    @classmethod
    def parse_period(cls, v):
        """Unknown period kinds fall back to weekly."""
        return PeriodKind.parse(v)


class CalendarGenerationResponse(BaseModel):
    available: bool
    calendar: Optional[CalendarSchema] = None
    message: Optional[str] = None


class SendCalendarRequest(BaseModel):
    user_id: str = Field(..., min_length=1)
    calendar: CalendarSchema
    locale: Optional[str] = None


class RecipientResultSchema(BaseModel):
    recipient: str
    state: SendState
    status_code: Optional[int] = None
    category: Optional[FailureCategory] = None
    error: Optional[str] = None


class DispatchResponse(BaseModel):
    outcome: DispatchOutcome
    total_requested: int
    succeeded: int
    failed: List[RecipientResultSchema]
    results: List[RecipientResultSchema]
    message: str
    display_seconds: float
