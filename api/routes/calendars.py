from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from fastapi import APIRouter, Depends

from api.dependencies import (
    get_assignment_engine,
    get_clock,
    get_dispatch_service,
    get_meal_repository,
    get_profile_repository,
    get_settings,
)
from app.config import Settings
from app.exceptions import CalendarRenderingError, NotFoundError
from domain.mappers import CalendarMapper
from domain.models import NoMealsAvailable
from domain.schemas.calendar_schemas import (
    CalendarGenerationResponse,
    DispatchResponse,
    GenerateCalendarRequest,
    SendCalendarRequest,
)
from repositories import MealRepository, ProfileRepository
from services.assignment_service import MealAssignmentEngine
from services.calendar_state import StatusDurations, status_for_dispatch
from services.dispatch_service import DispatchService
from services.render_service import period_label

router = APIRouter(prefix="/calendars", tags=["Meal Calendars"])
logger = logging.getLogger("cookcourse.api.calendars")


@router.post("/generate", response_model=CalendarGenerationResponse)
def generate_calendar(
    body: GenerateCalendarRequest,
    meals: MealRepository = Depends(get_meal_repository),
    engine: MealAssignmentEngine = Depends(get_assignment_engine),
    today: Callable[[], date] = Depends(get_clock),
    settings: Settings = Depends(get_settings),
):
    """
    Generate a meal calendar from the user's usual dishes.

    - daily: breakfast, lunch, dinner and snack for the anchor date
    - weekly: breakfast, lunch and dinner, Monday to Sunday of the anchor's week
    - monthly: lunch and dinner for 4 weeks from the 1st of the anchor's month

    Each call draws a new calendar. When the user has no dish, the response
    has ``available: false`` and no calendar.
    """
    anchor = body.anchor_date or today()
    locale = body.locale or settings.default_locale

    logger.info(
        "Generating %s calendar for user %s anchored on %s",
        body.period.value,
        body.user_id,
        anchor,
    )

    pool = meals.list_candidates(body.user_id)
    result = engine.generate(body.period, anchor, pool)

    if isinstance(result, NoMealsAvailable):
        return CalendarGenerationResponse(available=False, message=result.message)

    try:
        label = period_label(result.period, anchor, locale)
    except CalendarRenderingError as e:
        logger.warning("No period label for locale %r: %s", locale, e)
        label = None

    return CalendarGenerationResponse(
        available=True,
        calendar=CalendarMapper.to_schema(result, label=label),
    )


@router.post("/send", response_model=DispatchResponse)
async def send_calendar(
    body: SendCalendarRequest,
    profiles: ProfileRepository = Depends(get_profile_repository),
    dispatcher: DispatchService = Depends(get_dispatch_service),
    settings: Settings = Depends(get_settings),
):
    """
    E-mail a generated calendar to the user and every family member.

    Invalid family addresses are skipped. With no valid address at all the
    request fails with NO_VALID_RECIPIENTS before anything is sent. Otherwise
    the response reports full success, partial success or total failure with
    one entry per recipient.
    """
    profile = profiles.get_profile(body.user_id)
    if profile is None:
        raise NotFoundError(f"User {body.user_id} not found")

    calendar = CalendarMapper.from_schema(body.calendar)
    locale = body.locale or settings.default_locale

    aggregate = await dispatcher.send_calendar(
        calendar,
        primary=profile.email,
        family_addresses=profile.family_addresses,
        locale=locale,
        sender_name=profile.name,
    )

    status = status_for_dispatch(
        aggregate,
        locale,
        StatusDurations(short=settings.status_display_sec, long=settings.status_failure_display_sec),
    )
    return CalendarMapper.to_dispatch_response(aggregate, status)
