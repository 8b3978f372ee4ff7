from __future__ import annotations

import logging
import math
import random
from datetime import date
from typing import Optional, Sequence, Union

from app.exceptions import ServiceValidationError
from domain.models import (
    GeneratedCalendar,
    MealCandidate,
    NO_MEALS_AVAILABLE,
    NoMealsAvailable,
    Slot,
    SlotAssignment,
)
from domain.enums import PeriodKind
from services.layout_service import build_layout, infer_period

logger = logging.getLogger("cookcourse.assignment")

GenerationResult = Union[GeneratedCalendar, NoMealsAvailable]


class MealAssignmentEngine:
    """
    Fills calendar slots with meals drawn from a pool:
    - one uniform draw with replacement per (slot, role), in role order
    - no anti-repetition: the same dish may land on adjacent slots
    - an empty pool yields NoMealsAvailable, never a partial calendar

    The random source is injected; by default every engine gets its own
    unseeded ``random.Random`` so consecutive generations are independent.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def _draw(self, pool: Sequence[MealCandidate]) -> MealCandidate:
        size = len(pool)
        index = math.floor(self.rng.random() * size)
        if index >= size:
            index = size - 1
        return pool[index]

    def assign(
        self,
        slots: Sequence[Slot],
        pool: Sequence[MealCandidate],
        period=None,
        anchor_date: Optional[date] = None,
    ) -> GenerationResult:
        """
        Fill every role of every slot.

        Without ``period`` the kind is read back from the slots (slot count and
        role set); without ``anchor_date`` the first slot date is used.

        Raises:
            ServiceValidationError: no period given and the slots match no layout
        """
        if not pool:
            logger.info("Meal pool is empty, no calendar generated")
            return NO_MEALS_AVAILABLE

        kind = PeriodKind.parse(period) if period is not None else infer_period(slots)
        if kind is None:
            raise ServiceValidationError(
                f"{len(slots)} slot(s) do not match any period layout",
                code="CALENDAR_LAYOUT_MISMATCH",
            )
        anchor = anchor_date if anchor_date is not None else slots[0].date

        pool = list(pool)
        assignments = tuple(
            SlotAssignment(
                slot=slot,
                meals=tuple((role, self._draw(pool)) for role in slot.roles),
            )
            for slot in slots
        )

        calendar = GeneratedCalendar(period=kind, anchor_date=anchor, slots=assignments)
        logger.info(
            "Generated %s calendar: %d slots from a pool of %d meals",
            kind.value,
            len(assignments),
            len(pool),
        )
        return calendar

    def generate(
        self, period, anchor_date: date, pool: Sequence[MealCandidate]
    ) -> GenerationResult:
        """Lay out the period and fill it. The pool is checked before any layout work."""
        if not pool:
            logger.info("Meal pool is empty, skipping %s layout", PeriodKind.parse(period).value)
            return NO_MEALS_AVAILABLE
        slots = build_layout(period, anchor_date)
        return self.assign(slots, pool, period=period, anchor_date=anchor_date)
