"""
Plain-text rendering of generated calendars.

The output is recipient agnostic: the same body is sent to every address.
Only date formatting and fixed labels depend on the locale; supported locales
are listed in ``LOCALES``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Tuple

from app.exceptions import CalendarRenderingError
from domain.enums import PeriodKind, RoleKind
from domain.models import GeneratedCalendar
from services.layout_service import week_start


@dataclass(frozen=True)
class LocaleStrings:
    day_names: Tuple[str, ...]  # Monday first
    month_names: Tuple[str, ...]  # January first
    period_names: Dict[PeriodKind, str]
    role_names: Dict[RoleKind, str]
    no_dish: str
    greeting: str
    intro: str
    week_heading: str
    week_of: str
    subject: str
    closing: str
    signature: str


LOCALES: Dict[str, LocaleStrings] = {
    "fr": LocaleStrings(
        day_names=("lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche"),
        month_names=(
            "janvier", "février", "mars", "avril", "mai", "juin",
            "juillet", "août", "septembre", "octobre", "novembre", "décembre",
        ),
        period_names={
            PeriodKind.DAILY: "Journalier",
            PeriodKind.WEEKLY: "Hebdomadaire",
            PeriodKind.MONTHLY: "Mensuel",
        },
        role_names={
            RoleKind.BREAKFAST: "Petit-déjeuner",
            RoleKind.LUNCH: "Déjeuner",
            RoleKind.DINNER: "Dîner",
            RoleKind.SNACK: "Collation",
        },
        no_dish="Aucun plat",
        greeting="Bonjour,",
        intro="Voici le planning de repas {period} pour {date}.",
        week_heading="Semaine {number}",
        week_of="Semaine du {date}",
        subject="Planning de repas {period} - {date}",
        closing="Bon appétit !",
        signature="L'équipe {team}",
    ),
    "en": LocaleStrings(
        day_names=("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
        month_names=(
            "January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December",
        ),
        period_names={
            PeriodKind.DAILY: "Daily",
            PeriodKind.WEEKLY: "Weekly",
            PeriodKind.MONTHLY: "Monthly",
        },
        role_names={
            RoleKind.BREAKFAST: "Breakfast",
            RoleKind.LUNCH: "Lunch",
            RoleKind.DINNER: "Dinner",
            RoleKind.SNACK: "Snack",
        },
        no_dish="No dish",
        greeting="Hello,",
        intro="Here is the {period} meal plan for {date}.",
        week_heading="Week {number}",
        week_of="Week of {date}",
        subject="{period} meal plan - {date}",
        closing="Enjoy your meals!",
        signature="The {team} team",
    ),
}


def get_locale(code: Optional[str]) -> LocaleStrings:
    """Resolve ``fr``, ``fr-FR`` or ``fr_FR`` style codes to their strings."""
    language = (code or "").replace("_", "-").split("-")[0].strip().lower()
    try:
        return LOCALES[language]
    except KeyError:
        raise CalendarRenderingError(
            f"Unsupported locale: {code!r}",
            details={"supported": sorted(LOCALES)},
        )


# ---------- date formatting ----------


def format_long_date(d: date, strings: LocaleStrings) -> str:
    """14 mars 2024"""
    return f"{d.day} {strings.month_names[d.month - 1]} {d.year}"


def format_day_heading(d: date, strings: LocaleStrings) -> str:
    """jeudi 14 mars"""
    return f"{strings.day_names[d.weekday()]} {d.day} {strings.month_names[d.month - 1]}"


def format_month(d: date, strings: LocaleStrings) -> str:
    """mars 2024"""
    return f"{strings.month_names[d.month - 1]} {d.year}"


def period_label(period, anchor_date: date, locale: Optional[str] = "fr") -> str:
    """Short label of the displayed period, used by navigation controls."""
    strings = get_locale(locale)
    kind = PeriodKind.parse(period)
    if kind == PeriodKind.DAILY:
        return format_long_date(anchor_date, strings)
    if kind == PeriodKind.MONTHLY:
        return format_month(anchor_date, strings)
    monday = week_start(anchor_date)
    return strings.week_of.format(date=f"{monday.day} {strings.month_names[monday.month - 1]}")


# ---------- documents ----------


def render_subject(calendar: GeneratedCalendar, locale: Optional[str] = "fr") -> str:
    strings = get_locale(locale)
    return strings.subject.format(
        period=strings.period_names[calendar.period],
        date=format_long_date(calendar.anchor_date, strings),
    )


def _role_lines(slot, strings: LocaleStrings, indent: str) -> List[str]:
    lines = []
    for role, meal in slot.meals:
        name = meal.name if meal is not None else strings.no_dish
        lines.append(f"{indent}{strings.role_names[role]}: {name}")
    return lines


def render_calendar_text(
    calendar: Optional[GeneratedCalendar],
    locale: Optional[str] = "fr",
    team_name: str = "CookCourse",
) -> str:
    """
    Render a calendar to the e-mail body.

    Layout by period:
    - daily: one line per role
    - weekly: a day heading followed by indented role lines
    - monthly: "week N" headings, then day headings and role lines
    Roles without a meal show the locale's "no dish" placeholder.
    """
    strings = get_locale(locale)
    if calendar is None:
        raise CalendarRenderingError("No calendar to render")

    lines = [
        strings.greeting,
        "",
        strings.intro.format(
            period=strings.period_names[calendar.period],
            date=format_long_date(calendar.anchor_date, strings),
        ),
        "",
    ]

    if calendar.period == PeriodKind.DAILY:
        for slot in calendar.slots:
            lines.extend(_role_lines(slot, strings, ""))
    elif calendar.period == PeriodKind.MONTHLY:
        for number, week in enumerate(calendar.weeks, start=1):
            lines.append("")
            lines.append(strings.week_heading.format(number=number) + ":")
            for slot in week:
                lines.append(f"  {format_day_heading(slot.date, strings)}:")
                lines.extend(_role_lines(slot, strings, "    "))
    else:
        for slot in calendar.slots:
            lines.append("")
            lines.append(f"{format_day_heading(slot.date, strings)}:")
            lines.extend(_role_lines(slot, strings, "  "))

    lines.append("")
    lines.append(strings.closing)
    lines.append(strings.signature.format(team=team_name))
    return "\n".join(lines)
