"""
Tests for calendar distribution.

Verifies:
- one send per recipient, concurrently, joined before aggregation
- full / partial / total classification with an exact partition of recipients
- precondition failures (no recipients, rendering) stop before any send
- provider errors are classified for diagnostics only
"""

import logging

import anyio
import pytest

from app.exceptions import CalendarRenderingError, EmailSendError, NoValidRecipientsError
from domain.enums import DispatchOutcome, FailureCategory, PeriodKind, SendState
from services.dispatch_service import DispatchService, classify_failure
from test_fixtures import FakeSender, build_calendar

pytestmark = pytest.mark.anyio

RECIPIENTS = ["sarah@example.com", "leo@example.com", "ines@example.com", "noah@example.com"]


@pytest.mark.parametrize(
    "failing,expected",
    (
        (set(), DispatchOutcome.FULL_SUCCESS),
        ({"leo@example.com"}, DispatchOutcome.PARTIAL_SUCCESS),
        ({"sarah@example.com", "noah@example.com", "ines@example.com"}, DispatchOutcome.PARTIAL_SUCCESS),
        (set(RECIPIENTS), DispatchOutcome.TOTAL_FAILURE),
    ),
)
async def test_aggregate_partitions_recipients(failing, expected):
    sender = FakeSender(failing=failing)
    service = DispatchService(sender)

    result = await service.dispatch(build_calendar(), RECIPIENTS, locale="fr")

    assert result.outcome == expected
    assert result.total_requested == len(RECIPIENTS)
    assert len(result.succeeded) == len(RECIPIENTS) - len(failing)
    assert {r.recipient for r in result.failed} == failing
    assert [r.recipient for r in result.results] == RECIPIENTS
    assert sorted(p.to for p in sender.sent) == sorted(RECIPIENTS)


async def test_payload_fields():
    sender = FakeSender()
    calendar = build_calendar(PeriodKind.WEEKLY)

    await DispatchService(sender, team_name="CookCourse").dispatch(
        calendar, ["sarah@example.com"], locale="fr", sender_name="Sarah Martinez"
    )

    (payload,) = sender.sent
    assert payload.to == "sarah@example.com"
    assert payload.subject == "Planning de repas Hebdomadaire - 14 mars 2024"
    assert payload.body.startswith("Bonjour,")
    assert payload.sender_display_name == "Sarah Martinez"


async def test_sender_name_defaults():
    sender = FakeSender()

    await DispatchService(sender, default_sender_name="CookCourse").dispatch(build_calendar(), ["a@b.com"])

    assert sender.sent[0].sender_display_name == "CookCourse"


async def test_every_recipient_gets_the_same_body():
    sender = FakeSender()

    await DispatchService(sender).dispatch(build_calendar(PeriodKind.MONTHLY), RECIPIENTS)

    assert len({p.body for p in sender.sent}) == 1


async def test_sends_run_concurrently():
    """Each send waits for all others to start: only a concurrent fan-out completes."""
    started = []
    all_started = anyio.Event()

    class BarrierSender:
        async def send(self, payload):
            started.append(payload.to)
            if len(started) == len(RECIPIENTS):
                all_started.set()
            await all_started.wait()
            return "OK"

    with anyio.fail_after(2):
        result = await DispatchService(BarrierSender()).dispatch(build_calendar(), RECIPIENTS)

    assert result.outcome == DispatchOutcome.FULL_SUCCESS


async def test_failure_does_not_abort_slower_siblings():
    class MixedSender:
        async def send(self, payload):
            if payload.to == "sarah@example.com":
                raise RuntimeError("boom")
            await anyio.sleep(0.01)
            return {"status": 200}

    result = await DispatchService(MixedSender()).dispatch(build_calendar(), RECIPIENTS)

    assert result.outcome == DispatchOutcome.PARTIAL_SUCCESS
    assert len(result.succeeded) == 3
    (failed,) = result.failed
    assert failed.state == SendState.FAILED
    assert failed.failure.message == "boom"
    assert failed.failure.category == FailureCategory.UNKNOWN


async def test_successful_response_is_kept():
    result = await DispatchService(FakeSender()).dispatch(build_calendar(), ["a@b.com"])

    assert result.results[0].state == SendState.SENT
    assert result.results[0].response == {"status": 200, "text": "OK"}


async def test_duplicate_recipients_are_sent_once():
    sender = FakeSender()

    result = await DispatchService(sender).dispatch(build_calendar(), ["a@b.com", "a@b.com", "c@d.com"])

    assert result.total_requested == 2
    assert [p.to for p in sender.sent].count("a@b.com") == 1


async def test_no_recipients_raises_before_any_send():
    sender = FakeSender()

    with pytest.raises(NoValidRecipientsError):
        await DispatchService(sender).dispatch(build_calendar(), [])

    assert sender.sent == []


async def test_send_calendar_resolves_recipients_first():
    """["ok@x.com", "bad@@x"]: the invalid address is dropped, one send is made."""
    sender = FakeSender()
    calendar = build_calendar(PeriodKind.WEEKLY)

    result = await DispatchService(sender).send_calendar(calendar, None, ["ok@x.com", "bad@@x"])

    assert [p.to for p in sender.sent] == ["ok@x.com"]
    assert result.outcome == DispatchOutcome.FULL_SUCCESS


async def test_send_calendar_without_valid_address():
    sender = FakeSender()

    with pytest.raises(NoValidRecipientsError):
        await DispatchService(sender).send_calendar(build_calendar(), "", ["noatsign"])

    assert sender.sent == []


async def test_rendering_failure_aborts_dispatch():
    sender = FakeSender()

    with pytest.raises(CalendarRenderingError):
        await DispatchService(sender).dispatch(build_calendar(), RECIPIENTS, locale="xx")

    assert sender.sent == []


async def test_rate_limit_is_logged(caplog):
    sender = FakeSender(failing={"leo@example.com"}, status_code=429, text="Too Many Requests")

    with caplog.at_level(logging.ERROR, logger="cookcourse.dispatch"):
        result = await DispatchService(sender).dispatch(build_calendar(), ["sarah@example.com", "leo@example.com"])

    (failed,) = result.failed
    assert failed.failure.category == FailureCategory.RATE_LIMITED
    assert failed.failure.status_code == 429
    assert "rate limited" in caplog.text


async def test_total_failure_logs_body_for_manual_forwarding(caplog):
    sender = FakeSender(failing=set(RECIPIENTS))

    with caplog.at_level(logging.INFO, logger="cookcourse.dispatch"):
        result = await DispatchService(sender).dispatch(build_calendar(), RECIPIENTS)

    assert result.outcome == DispatchOutcome.TOTAL_FAILURE
    assert "Undelivered calendar body" in caplog.text
    assert "Bonjour," in caplog.text


# =============================================================================
# FAILURE CLASSIFICATION
# =============================================================================


@pytest.mark.parametrize(
    "exc,category,status",
    (
        (EmailSendError("quota", status_code=429), FailureCategory.RATE_LIMITED, 429),
        (EmailSendError("bad template", status_code=400, text="The template ID is invalid"), FailureCategory.PROVIDER_ERROR, 400),
        (EmailSendError("connection reset"), FailureCategory.TRANSPORT_ERROR, None),
        (ValueError("weird"), FailureCategory.UNKNOWN, None),
    ),
)
async def test_classify_failure(exc, category, status):
    failure = classify_failure(exc)

    assert failure.category == category
    assert failure.status_code == status


async def test_classify_failure_prefers_provider_text():
    failure = classify_failure(EmailSendError("rejected", status_code=400, text="The template ID is invalid"))

    assert failure.message == "The template ID is invalid"
