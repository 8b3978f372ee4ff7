"""
Meal calendar models.

A calendar is built fresh on each generation request and is never persisted.
All types here are immutable; the meal catalog owns MealCandidate records and
the calendar only references them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Tuple

from domain.enums import PeriodKind, RoleKind

DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class MealCandidate:
    """A dish that may be assigned to a calendar slot"""

    id: str
    name: str
    category: str = ""
    image_ref: Optional[str] = None


@dataclass(frozen=True)
class Slot:
    """A single date and the meal roles to fill on it"""

    date: date
    roles: Tuple[RoleKind, ...]


@dataclass(frozen=True)
class SlotAssignment:
    """The meals chosen for every role of a slot, in role order"""

    slot: Slot
    meals: Tuple[Tuple[RoleKind, Optional[MealCandidate]], ...]

    @property
    def date(self) -> date:
        return self.slot.date

    def meal_for(self, role: RoleKind) -> Optional[MealCandidate]:
        for assigned_role, meal in self.meals:
            if assigned_role == role:
                return meal
        return None

    def is_complete(self) -> bool:
        return all(meal is not None for _, meal in self.meals)


@dataclass(frozen=True)
class GeneratedCalendar:
    period: PeriodKind
    anchor_date: date
    slots: Tuple[SlotAssignment, ...]

    @property
    def start_date(self) -> date:
        return self.slots[0].date

    @property
    def end_date(self) -> date:
        return self.slots[-1].date

    @property
    def weeks(self) -> List[Tuple[SlotAssignment, ...]]:
        """Slots grouped in consecutive buckets of seven days (monthly display)."""
        return [self.slots[i:i + DAYS_PER_WEEK] for i in range(0, len(self.slots), DAYS_PER_WEEK)]

    def is_complete(self) -> bool:
        return all(s.is_complete() for s in self.slots)


@dataclass(frozen=True)
class NoMealsAvailable:
    """Generation result when the meal pool was empty: no calendar at all."""

    message: str = field(
        default="No dish available. Add dishes to your usual meals first."
    )


NO_MEALS_AVAILABLE = NoMealsAvailable()
