"""
Tests for plain-text calendar rendering.
"""

from datetime import date

import pytest

from app.exceptions import CalendarRenderingError
from domain.enums import PeriodKind, RoleKind
from domain.models import GeneratedCalendar, MealCandidate, Slot, SlotAssignment
from services.render_service import (
    format_day_heading,
    format_long_date,
    get_locale,
    period_label,
    render_calendar_text,
    render_subject,
)
from test_fixtures import ANCHOR_THURSDAY, build_calendar


def test_french_date_formats():
    fr = get_locale("fr")

    assert format_long_date(date(2024, 3, 14), fr) == "14 mars 2024"
    assert format_day_heading(date(2024, 3, 14), fr) == "jeudi 14 mars"
    assert format_day_heading(date(2024, 8, 4), fr) == "dimanche 4 août"


@pytest.mark.parametrize("code", ("fr", "fr-FR", "fr_FR", "FR"))
def test_locale_codes_resolve_to_language(code):
    assert get_locale(code) is get_locale("fr")


def test_unsupported_locale_is_a_rendering_error():
    with pytest.raises(CalendarRenderingError) as exc_info:
        get_locale("de")

    assert exc_info.value.code == "RENDERING_FAILED"


def test_weekly_rendering_in_french():
    calendar = build_calendar(PeriodKind.WEEKLY)

    text = render_calendar_text(calendar, "fr")

    assert text.startswith("Bonjour,\n\nVoici le planning de repas Hebdomadaire pour 14 mars 2024.\n")
    assert "\nlundi 11 mars:\n" in text
    assert "\ndimanche 17 mars:\n" in text
    first = calendar.slots[0]
    assert f"  Petit-déjeuner: {first.meal_for(RoleKind.BREAKFAST).name}\n" in text
    assert f"  Dîner: {first.meal_for(RoleKind.DINNER).name}\n" in text
    assert "Collation" not in text
    assert text.endswith("\nBon appétit !\nL'équipe CookCourse")


def test_daily_rendering_lists_four_roles_without_day_heading():
    calendar = build_calendar(PeriodKind.DAILY)

    text = render_calendar_text(calendar, "fr")

    for label in ("Petit-déjeuner: ", "Déjeuner: ", "Dîner: ", "Collation: "):
        assert f"\n{label}" in text
    assert "jeudi 14 mars:" not in text
    assert "Voici le planning de repas Journalier pour 14 mars 2024." in text


def test_monthly_rendering_groups_weeks():
    calendar = build_calendar(PeriodKind.MONTHLY)

    text = render_calendar_text(calendar, "fr")

    for n in range(1, 5):
        assert f"\nSemaine {n}:\n" in text
    assert "Semaine 5" not in text
    assert "\n  vendredi 1 mars:\n    Déjeuner: " in text
    assert "jeudi 28 mars:" in text
    assert "29 mars" not in text
    assert "Petit-déjeuner" not in text


def test_absent_meal_renders_placeholder():
    slot = Slot(date=ANCHOR_THURSDAY, roles=(RoleKind.BREAKFAST, RoleKind.LUNCH, RoleKind.DINNER, RoleKind.SNACK))
    meal = MealCandidate(id="dish-1", name="Poulet yassa")
    calendar = GeneratedCalendar(
        period=PeriodKind.DAILY,
        anchor_date=ANCHOR_THURSDAY,
        slots=(
            SlotAssignment(
                slot=slot,
                meals=(
                    (RoleKind.BREAKFAST, None),
                    (RoleKind.LUNCH, meal),
                    (RoleKind.DINNER, meal),
                    (RoleKind.SNACK, None),
                ),
            ),
        ),
    )

    text = render_calendar_text(calendar, "fr")

    assert "Petit-déjeuner: Aucun plat" in text
    assert "Déjeuner: Poulet yassa" in text
    assert "Collation: Aucun plat" in text
    assert "Breakfast: No dish" in render_calendar_text(calendar, "en")


def test_english_rendering_and_team_name():
    calendar = build_calendar(PeriodKind.WEEKLY)

    text = render_calendar_text(calendar, "en-GB", team_name="CookCourse")

    assert "Here is the Weekly meal plan for 14 March 2024." in text
    assert "\nMonday 11 March:\n" in text
    assert text.endswith("Enjoy your meals!\nThe CookCourse team")


def test_subject_line():
    calendar = build_calendar(PeriodKind.WEEKLY)

    assert render_subject(calendar, "fr") == "Planning de repas Hebdomadaire - 14 mars 2024"
    assert render_subject(calendar, "en") == "Weekly meal plan - 14 March 2024"


def test_period_labels():
    assert period_label(PeriodKind.DAILY, ANCHOR_THURSDAY, "fr") == "14 mars 2024"
    assert period_label(PeriodKind.WEEKLY, ANCHOR_THURSDAY, "fr") == "Semaine du 11 mars"
    assert period_label(PeriodKind.MONTHLY, ANCHOR_THURSDAY, "fr") == "mars 2024"
    assert period_label("unknown", ANCHOR_THURSDAY, "en") == "Week of 11 March"


def test_rendering_is_pure():
    calendar = build_calendar(PeriodKind.MONTHLY)

    assert render_calendar_text(calendar, "fr") == render_calendar_text(calendar, "fr")
