from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

import anyio

from adapters.email_adapter import EmailSender
from app.exceptions import CalendarRenderingError, EmailSendError, NoValidRecipientsError
from domain.enums import DispatchOutcome, FailureCategory
from domain.models import (
    AggregateDispatchResult,
    DispatchFailure,
    DispatchResult,
    GeneratedCalendar,
    SendPayload,
)
from services.recipient_service import resolve_recipients
from services.render_service import render_calendar_text, render_subject

logger = logging.getLogger("cookcourse.dispatch")

HTTP_TOO_MANY_REQUESTS = 429


def classify_failure(exc: Exception) -> DispatchFailure:
    """Turn a send error into a recorded failure. The status code is diagnostic only."""
    if isinstance(exc, EmailSendError):
        if exc.status_code == HTTP_TOO_MANY_REQUESTS:
            category = FailureCategory.RATE_LIMITED
        elif exc.status_code is not None:
            category = FailureCategory.PROVIDER_ERROR
        else:
            category = FailureCategory.TRANSPORT_ERROR
        message = exc.text or exc.message
        return DispatchFailure(message=message, status_code=exc.status_code, category=category)

    status_code = getattr(exc, "status_code", None) or getattr(exc, "status", None)
    if not isinstance(status_code, int):
        status_code = None
    category = FailureCategory.RATE_LIMITED if status_code == HTTP_TOO_MANY_REQUESTS else FailureCategory.UNKNOWN
    return DispatchFailure(message=str(exc) or exc.__class__.__name__, status_code=status_code, category=category)


class DispatchService:
    """
    Distribution of a generated calendar by e-mail:
    - renders the body and subject once, before any send
    - one send attempt per recipient, all issued concurrently
    - waits for every attempt to settle, then classifies the run
    A failed send is recorded for its recipient and never cancels the others.
    """

    def __init__(
        self,
        sender: EmailSender,
        team_name: str = "CookCourse",
        default_sender_name: str = "CookCourse",
    ):
        self.sender = sender
        self.team_name = team_name
        self.default_sender_name = default_sender_name

    # ---------- rendering ----------

    def _render(self, calendar: GeneratedCalendar, locale: Optional[str]) -> tuple[str, str]:
        try:
            return (
                render_subject(calendar, locale),
                render_calendar_text(calendar, locale, team_name=self.team_name),
            )
        except CalendarRenderingError:
            raise
        except Exception as exc:
            raise CalendarRenderingError(f"Calendar rendering failed: {exc}") from exc

    # ---------- fan-out ----------

    async def _send_one(self, payload: SendPayload, results: List[Optional[DispatchResult]], index: int) -> None:
        try:
            response = await self.sender.send(payload)
        except Exception as exc:
            failure = classify_failure(exc)
            if failure.category == FailureCategory.RATE_LIMITED:
                logger.error(
                    "Send to %s rate limited (HTTP 429): the e-mail provider quota may be exhausted",
                    payload.to,
                )
            else:
                logger.error("Send to %s failed: %s", payload.to, failure.message)
            results[index] = DispatchResult.failed(payload.to, failure)
        else:
            logger.info("Calendar sent to %s", payload.to)
            results[index] = DispatchResult.sent(payload.to, response)

    async def dispatch(
        self,
        calendar: GeneratedCalendar,
        recipients: Sequence[str],
        locale: Optional[str] = "fr",
        sender_name: Optional[str] = None,
    ) -> AggregateDispatchResult:
        """
        Send ``calendar`` to every recipient and aggregate the outcomes.

        Raises:
            NoValidRecipientsError: ``recipients`` is empty; nothing was sent
            CalendarRenderingError: the calendar could not be rendered; nothing was sent
        """
        unique = list(dict.fromkeys(r for r in recipients if r))
        if not unique:
            raise NoValidRecipientsError()

        subject, body = self._render(calendar, locale)
        display_name = sender_name or self.default_sender_name
        payloads = [
            SendPayload(to=r, subject=subject, body=body, sender_display_name=display_name)
            for r in unique
        ]

        logger.info("Dispatching %s calendar to %d recipient(s)", calendar.period.value, len(payloads))
        results: List[Optional[DispatchResult]] = [None] * len(payloads)
        async with anyio.create_task_group() as tg:
            for index, payload in enumerate(payloads):
                tg.start_soon(self._send_one, payload, results, index)

        aggregate = AggregateDispatchResult(results=tuple(results))
        self._log_outcome(aggregate, body)
        return aggregate

    async def send_calendar(
        self,
        calendar: GeneratedCalendar,
        primary: Optional[str],
        family_addresses: Iterable[Optional[str]],
        locale: Optional[str] = "fr",
        sender_name: Optional[str] = None,
    ) -> AggregateDispatchResult:
        """Resolve recipients from a user's own and family addresses, then dispatch."""
        recipients = resolve_recipients(primary, family_addresses)
        return await self.dispatch(calendar, recipients, locale=locale, sender_name=sender_name)

    def _log_outcome(self, aggregate: AggregateDispatchResult, body: str) -> None:
        outcome = aggregate.outcome
        succeeded = len(aggregate.succeeded)
        if outcome == DispatchOutcome.FULL_SUCCESS:
            logger.info("Calendar delivered to all %d recipient(s)", succeeded)
        elif outcome == DispatchOutcome.PARTIAL_SUCCESS:
            logger.warning(
                "Calendar delivered to %d/%d recipient(s); failed: %s",
                succeeded,
                aggregate.total_requested,
                ", ".join(r.recipient for r in aggregate.failed),
            )
        else:
            logger.error("Calendar delivery failed for all %d recipient(s)", aggregate.total_requested)
            # Kept in the logs so the calendar can still be forwarded by hand.
            logger.info("Undelivered calendar body:\n%s", body)
