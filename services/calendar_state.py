"""
Calendar page state as an explicit reducer.

A UI layer keeps one ``CalendarState`` per session and replaces it with
``reduce(state, event)`` on every user action or completed operation. The
reducer is pure: generation and dispatch run elsewhere and report back
through ``CalendarGenerated`` and ``DispatchCompleted``/``DispatchRejected``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from datetime import date
from typing import Optional, Union

from domain.enums import DispatchOutcome, PeriodKind
from domain.models import AggregateDispatchResult, GeneratedCalendar, NoMealsAvailable
from services.assignment_service import GenerationResult
from services.layout_service import shift_anchor


class StatusKind(str, enum.Enum):
    SUCCESS = "success"
    PARTIAL = "partial"
    FAILURE = "failure"
    ERROR = "error"


@dataclass(frozen=True)
class StatusDurations:
    """Seconds a status message stays visible before it is dismissed."""

    short: float = 3.0
    long: float = 5.0


DEFAULT_DURATIONS = StatusDurations()

STATUS_TEXT = {
    "fr": {
        StatusKind.SUCCESS: "Calendrier envoyé avec succès à {succeeded} destinataire(s) !",
        StatusKind.PARTIAL: (
            "Calendrier envoyé à {succeeded}/{total} destinataire(s). "
            "Échec pour {failed}. Vérifiez les journaux pour plus de détails."
        ),
        StatusKind.FAILURE: "Échec de l'envoi des emails. Vérifiez les journaux pour plus de détails.",
    },
    "en": {
        StatusKind.SUCCESS: "Calendar sent to {succeeded} recipient(s)!",
        StatusKind.PARTIAL: (
            "Calendar sent to {succeeded}/{total} recipient(s). "
            "{failed} failed. Check the logs for details."
        ),
        StatusKind.FAILURE: "Sending the e-mails failed. Check the logs for details.",
    },
}


@dataclass(frozen=True)
class StatusMessage:
    kind: StatusKind
    text: str
    display_seconds: float


def _status_texts(locale: Optional[str]) -> dict:
    language = (locale or "").replace("_", "-").split("-")[0].lower()
    return STATUS_TEXT.get(language, STATUS_TEXT["fr"])


def status_for_dispatch(
    aggregate: AggregateDispatchResult,
    locale: Optional[str] = "fr",
    durations: StatusDurations = DEFAULT_DURATIONS,
) -> StatusMessage:
    """User-facing summary of a dispatch run; per-recipient detail stays in the logs."""
    texts = _status_texts(locale)
    counts = {
        "succeeded": len(aggregate.succeeded),
        "failed": len(aggregate.failed),
        "total": aggregate.total_requested,
    }
    outcome = aggregate.outcome
    if outcome == DispatchOutcome.FULL_SUCCESS:
        return StatusMessage(StatusKind.SUCCESS, texts[StatusKind.SUCCESS].format(**counts), durations.short)
    if outcome == DispatchOutcome.PARTIAL_SUCCESS:
        return StatusMessage(StatusKind.PARTIAL, texts[StatusKind.PARTIAL].format(**counts), durations.long)
    return StatusMessage(StatusKind.FAILURE, texts[StatusKind.FAILURE].format(**counts), durations.long)


# ---------- state ----------


@dataclass(frozen=True)
class CalendarState:
    period: PeriodKind
    current_date: date
    locale: str = "fr"
    result: Optional[GenerationResult] = None
    status: Optional[StatusMessage] = None

    @property
    def calendar(self) -> Optional[GeneratedCalendar]:
        return self.result if isinstance(self.result, GeneratedCalendar) else None

    @property
    def no_meals_available(self) -> bool:
        return isinstance(self.result, NoMealsAvailable)


def initial_state(period, today: date, locale: str = "fr") -> CalendarState:
    return CalendarState(period=PeriodKind.parse(period), current_date=today, locale=locale)


# ---------- events ----------


@dataclass(frozen=True)
class NavigatePrevious:
    pass


@dataclass(frozen=True)
class NavigateNext:
    pass


@dataclass(frozen=True)
class PeriodSelected:
    period: PeriodKind


@dataclass(frozen=True)
class CalendarGenerated:
    result: GenerationResult


@dataclass(frozen=True)
class DispatchCompleted:
    aggregate: AggregateDispatchResult


@dataclass(frozen=True)
class DispatchRejected:
    """Dispatch stopped before any send (no recipients, rendering error...)."""

    reason: str


@dataclass(frozen=True)
class StatusDismissed:
    pass


Event = Union[
    NavigatePrevious,
    NavigateNext,
    PeriodSelected,
    CalendarGenerated,
    DispatchCompleted,
    DispatchRejected,
    StatusDismissed,
]


def reduce(
    state: CalendarState,
    event: Event,
    durations: StatusDurations = DEFAULT_DURATIONS,
) -> CalendarState:
    """Next state for ``event``. Navigation discards the displayed calendar."""
    if isinstance(event, NavigatePrevious):
        return replace(state, current_date=shift_anchor(state.period, state.current_date, -1), result=None)
    if isinstance(event, NavigateNext):
        return replace(state, current_date=shift_anchor(state.period, state.current_date, 1), result=None)
    if isinstance(event, PeriodSelected):
        return replace(state, period=PeriodKind.parse(event.period), result=None)
    if isinstance(event, CalendarGenerated):
        return replace(state, result=event.result)
    if isinstance(event, DispatchCompleted):
        return replace(state, status=status_for_dispatch(event.aggregate, state.locale, durations))
    if isinstance(event, DispatchRejected):
        return replace(state, status=StatusMessage(StatusKind.ERROR, event.reason, durations.short))
    if isinstance(event, StatusDismissed):
        return replace(state, status=None)
    raise TypeError(f"Unknown calendar event: {event!r}")
