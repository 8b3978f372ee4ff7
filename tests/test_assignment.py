"""
Tests for the meal assignment engine.

Verifies:
- every (slot, role) pair gets a meal from the pool
- an empty pool yields NoMealsAvailable and no calendar
- draws are independent and the random source is injectable
"""

import random
from datetime import date

import pytest

from app.exceptions import ServiceValidationError
from domain.enums import PeriodKind
from domain.mappers import CalendarMapper
from domain.models import GeneratedCalendar, MealCandidate, NoMealsAvailable
from services.assignment_service import MealAssignmentEngine
from services.layout_service import build_layout
from services.render_service import render_subject
from test_fixtures import ANCHOR_THURSDAY, make_pool


class FixedRandom(random.Random):
    """Random source returning a scripted sequence of values."""

    def __init__(self, values):
        super().__init__()
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


@pytest.mark.parametrize("period", list(PeriodKind))
def test_assignment_is_total_and_drawn_from_pool(period, pool, seeded_rng):
    engine = MealAssignmentEngine(seeded_rng)
    slots = build_layout(period, ANCHOR_THURSDAY)

    calendar = engine.assign(slots, pool, period=period, anchor_date=ANCHOR_THURSDAY)

    assert isinstance(calendar, GeneratedCalendar)
    assert calendar.period == period
    assert [a.slot for a in calendar.slots] == slots
    for assignment in calendar.slots:
        assert tuple(role for role, _ in assignment.meals) == assignment.slot.roles
        for _, meal in assignment.meals:
            assert meal in pool
    assert calendar.is_complete()


@pytest.mark.parametrize("period", list(PeriodKind))
def test_empty_pool_yields_no_calendar(period):
    engine = MealAssignmentEngine(random.Random(3))

    assert isinstance(engine.generate(period, ANCHOR_THURSDAY, []), NoMealsAvailable)
    assert isinstance(engine.assign(build_layout(period, ANCHOR_THURSDAY), []), NoMealsAvailable)


@pytest.mark.parametrize("period", list(PeriodKind))
def test_assign_reads_period_from_slots(period, pool, seeded_rng):
    slots = build_layout(period, ANCHOR_THURSDAY)

    calendar = MealAssignmentEngine(seeded_rng).assign(slots, pool)

    assert calendar.period == period
    assert calendar.anchor_date == slots[0].date
    assert CalendarMapper.from_schema(CalendarMapper.to_schema(calendar)) == calendar


def test_assign_without_period_renders_its_own_kind(pool, seeded_rng):
    calendar = MealAssignmentEngine(seeded_rng).assign(build_layout(PeriodKind.DAILY, ANCHOR_THURSDAY), pool)

    assert render_subject(calendar, "en") == "Daily meal plan - 14 March 2024"


def test_assign_rejects_slots_matching_no_layout(pool, seeded_rng):
    slots = build_layout(PeriodKind.WEEKLY, ANCHOR_THURSDAY)[:5]

    with pytest.raises(ServiceValidationError) as exc_info:
        MealAssignmentEngine(seeded_rng).assign(slots, pool)

    assert exc_info.value.code == "CALENDAR_LAYOUT_MISMATCH"


def test_generate_keeps_anchor_date(pool, seeded_rng):
    calendar = MealAssignmentEngine(seeded_rng).generate(PeriodKind.WEEKLY, ANCHOR_THURSDAY, pool)

    assert calendar.anchor_date == ANCHOR_THURSDAY
    assert calendar.start_date == date(2024, 3, 11)
    assert calendar.end_date == date(2024, 3, 17)


def test_single_meal_pool_fills_every_slot():
    only = MealCandidate(id="dish-9", name="Couscous")
    calendar = MealAssignmentEngine(random.Random(0)).generate(PeriodKind.MONTHLY, ANCHOR_THURSDAY, [only])

    assert all(meal == only for a in calendar.slots for _, meal in a.meals)


def test_draw_index_maps_uniform_value_to_pool():
    pool = make_pool(4)
    engine = MealAssignmentEngine(FixedRandom([0.0, 0.26, 0.5, 0.99]))

    calendar = engine.generate(PeriodKind.DAILY, ANCHOR_THURSDAY, pool)

    assert [meal for _, meal in calendar.slots[0].meals] == [pool[0], pool[1], pool[2], pool[3]]


def test_draw_guards_upper_bound():
    """A source returning 1.0 must still land on the last candidate."""
    pool = make_pool(3)
    engine = MealAssignmentEngine(FixedRandom([1.0] * 4))

    calendar = engine.generate(PeriodKind.DAILY, ANCHOR_THURSDAY, pool)

    assert all(meal == pool[-1] for _, meal in calendar.slots[0].meals)


def test_same_seed_reproduces_calendar(pool):
    first = MealAssignmentEngine(random.Random(42)).generate(PeriodKind.MONTHLY, ANCHOR_THURSDAY, pool)
    second = MealAssignmentEngine(random.Random(42)).generate(PeriodKind.MONTHLY, ANCHOR_THURSDAY, pool)

    assert first == second


def test_consecutive_generations_are_independent_draws(pool):
    """Regeneration draws again; nothing is cached between calls."""
    engine = MealAssignmentEngine(random.Random(7))

    calendars = [engine.generate(PeriodKind.MONTHLY, ANCHOR_THURSDAY, pool) for _ in range(5)]

    # 56 draws over 5 meals: identical calendars would mean the draws are reused
    assert len({c.slots for c in calendars}) > 1


def test_repeats_are_allowed(pool):
    """No anti-repetition rule: over a month, some meal must repeat."""
    calendar = MealAssignmentEngine(random.Random(11)).generate(PeriodKind.MONTHLY, ANCHOR_THURSDAY, pool)

    meals = [meal for a in calendar.slots for _, meal in a.meals]
    assert len(meals) == 56
    assert len(set(meals)) < len(meals)


def test_pool_is_not_modified(pool, seeded_rng):
    before = list(pool)

    MealAssignmentEngine(seeded_rng).generate(PeriodKind.WEEKLY, ANCHOR_THURSDAY, pool)

    assert pool == before


def test_monthly_calendar_weeks():
    calendar = MealAssignmentEngine(random.Random(5)).generate(PeriodKind.MONTHLY, ANCHOR_THURSDAY, make_pool())

    assert len(calendar.weeks) == 4
    assert [len(w) for w in calendar.weeks] == [7, 7, 7, 7]
    assert calendar.weeks[1][0].date == date(2024, 3, 8)
