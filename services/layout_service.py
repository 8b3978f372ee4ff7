"""
Period layout: which dates a calendar covers and which meals each date needs.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date, timedelta
from typing import List, Optional, Sequence

from domain.enums import PeriodKind, RoleKind
from domain.models import DAYS_PER_WEEK, Slot

logger = logging.getLogger("cookcourse.layout")

ROLES_BY_PERIOD = {
    PeriodKind.DAILY: (RoleKind.BREAKFAST, RoleKind.LUNCH, RoleKind.DINNER, RoleKind.SNACK),
    PeriodKind.WEEKLY: (RoleKind.BREAKFAST, RoleKind.LUNCH, RoleKind.DINNER),
    PeriodKind.MONTHLY: (RoleKind.LUNCH, RoleKind.DINNER),
}

# Monthly calendars are four fixed weeks, not the true month length.
WEEKS_PER_MONTH = 4


def slot_count(kind: PeriodKind) -> int:
    if kind == PeriodKind.DAILY:
        return 1
    if kind == PeriodKind.MONTHLY:
        return WEEKS_PER_MONTH * DAYS_PER_WEEK
    return DAYS_PER_WEEK


def week_start(d: date) -> date:
    """Monday on or before ``d``."""
    return d - timedelta(days=d.weekday())


def month_start(d: date) -> date:
    return d.replace(day=1)


def build_layout(period, anchor_date: date) -> List[Slot]:
    """
    Ordered slots for a period anchored on ``anchor_date``.

    - daily: the anchor date alone, breakfast/lunch/dinner/snack
    - weekly: Monday..Sunday of the anchor's week, breakfast/lunch/dinner
    - monthly: 28 days from the 1st of the anchor's month, lunch/dinner

    Unrecognized period kinds are laid out as weekly.
    """
    kind = PeriodKind.parse(period)
    roles = ROLES_BY_PERIOD[kind]

    if kind == PeriodKind.DAILY:
        start = anchor_date
    elif kind == PeriodKind.MONTHLY:
        start = month_start(anchor_date)
    else:
        start = week_start(anchor_date)
    days = slot_count(kind)

    slots = [Slot(date=start + timedelta(days=i), roles=roles) for i in range(days)]
    logger.debug("Built %s layout from %s: %d slots", kind.value, start, len(slots))
    return slots


def infer_period(slots: Sequence[Slot]) -> Optional[PeriodKind]:
    """Period kind whose layout has the same slot count and role set, or None."""
    if not slots:
        return None
    roles = slots[0].roles
    for kind in PeriodKind:
        if roles == ROLES_BY_PERIOD[kind] and len(slots) == slot_count(kind):
            return kind
    return None


def add_months(d: date, months: int) -> date:
    """Shift by whole calendar months, clamping the day to the target month's end."""
    month_index = d.month - 1 + months
    year = d.year + month_index // 12
    month = month_index % 12 + 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def shift_anchor(period, anchor_date: date, step: int) -> date:
    """Move the anchor ``step`` periods forward (negative: backward)."""
    kind = PeriodKind.parse(period)
    if kind == PeriodKind.DAILY:
        return anchor_date + timedelta(days=step)
    if kind == PeriodKind.MONTHLY:
        return add_months(anchor_date, step)
    return anchor_date + timedelta(weeks=step)
