"""
Calendar domain mappers.
Handles transformation between immutable calendar models and API schemas.
"""

from typing import Optional

from app.exceptions import ServiceValidationError
from domain.models import (
    AggregateDispatchResult,
    DispatchResult,
    GeneratedCalendar,
    MealCandidate,
    SlotAssignment,
)
from domain.schemas.calendar_schemas import (
    CalendarSchema,
    DispatchResponse,
    MealCandidateSchema,
    RecipientResultSchema,
    RoleMealSchema,
    SlotSchema,
)
from services.calendar_state import StatusMessage
from services.layout_service import build_layout


class CalendarMapper:
    """Mapper for calendar and dispatch transformations."""

    @staticmethod
    def to_schema(calendar: GeneratedCalendar, label: Optional[str] = None) -> CalendarSchema:
        return CalendarSchema(
            period=calendar.period,
            anchor_date=calendar.anchor_date,
            label=label,
            slots=[
                SlotSchema(
                    date=assignment.date,
                    meals=[
                        RoleMealSchema(
                            role=role,
                            meal=MealCandidateSchema.model_validate(meal) if meal is not None else None,
                        )
                        for role, meal in assignment.meals
                    ],
                )
                for assignment in calendar.slots
            ],
        )

    @staticmethod
    def from_schema(schema: CalendarSchema) -> GeneratedCalendar:
        """
        Rebuild a calendar sent back by a client.

        The slot dates and role sets must match the layout of the declared
        period and anchor date exactly; a calendar whose shape was altered is
        rejected rather than rendered.

        Raises:
            ServiceValidationError: the payload does not match the period layout
        """
        expected = build_layout(schema.period, schema.anchor_date)
        if len(expected) != len(schema.slots):
            raise ServiceValidationError(
                f"A {schema.period.value} calendar has {len(expected)} slot(s), got {len(schema.slots)}",
                code="CALENDAR_LAYOUT_MISMATCH",
            )

        assignments = []
        for slot, slot_schema in zip(expected, schema.slots):
            roles = tuple(m.role for m in slot_schema.meals)
            if slot_schema.date != slot.date or roles != slot.roles:
                raise ServiceValidationError(
                    f"Slot {slot_schema.date} does not match the {schema.period.value} layout",
                    details={
                        "expected_date": slot.date.isoformat(),
                        "expected_roles": [r.value for r in slot.roles],
                    },
                    code="CALENDAR_LAYOUT_MISMATCH",
                )
            assignments.append(
                SlotAssignment(
                    slot=slot,
                    meals=tuple(
                        (
                            m.role,
                            MealCandidate(**m.meal.model_dump()) if m.meal is not None else None,
                        )
                        for m in slot_schema.meals
                    ),
                )
            )

        return GeneratedCalendar(
            period=schema.period,
            anchor_date=schema.anchor_date,
            slots=tuple(assignments),
        )

    @staticmethod
    def to_recipient_result(result: DispatchResult) -> RecipientResultSchema:
        failure = result.failure
        return RecipientResultSchema(
            recipient=result.recipient,
            state=result.state,
            status_code=failure.status_code if failure else None,
            category=failure.category if failure else None,
            error=failure.message if failure else None,
        )

    @staticmethod
    def to_dispatch_response(aggregate: AggregateDispatchResult, status: StatusMessage) -> DispatchResponse:
        return DispatchResponse(
            outcome=aggregate.outcome,
            total_requested=aggregate.total_requested,
            succeeded=len(aggregate.succeeded),
            failed=[CalendarMapper.to_recipient_result(r) for r in aggregate.failed],
            results=[CalendarMapper.to_recipient_result(r) for r in aggregate.results],
            message=status.text,
            display_seconds=status.display_seconds,
        )
