"""
Calendar distribution models: send payloads and per-recipient outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from domain.enums import DispatchOutcome, FailureCategory, SendState


@dataclass(frozen=True)
class SendPayload:
    """Everything the e-mail provider needs for one recipient"""

    to: str
    subject: str
    body: str
    sender_display_name: str


@dataclass(frozen=True)
class DispatchFailure:
    message: str
    status_code: Optional[int] = None
    category: FailureCategory = FailureCategory.UNKNOWN


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of the single send attempt made for a recipient"""

    recipient: str
    state: SendState
    response: Any = None
    failure: Optional[DispatchFailure] = None

    @property
    def ok(self) -> bool:
        return self.state == SendState.SENT

    @classmethod
    def sent(cls, recipient: str, response: Any) -> "DispatchResult":
        return cls(recipient=recipient, state=SendState.SENT, response=response)

    @classmethod
    def failed(cls, recipient: str, failure: DispatchFailure) -> "DispatchResult":
        return cls(recipient=recipient, state=SendState.FAILED, failure=failure)


@dataclass(frozen=True)
class AggregateDispatchResult:
    """Join of every per-recipient result of one dispatch run.

    ``results`` holds exactly one entry per requested recipient, in request
    order, so succeeded and failed partition the requested set.
    """

    results: Tuple[DispatchResult, ...]

    @property
    def total_requested(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> List[DispatchResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> List[DispatchResult]:
        return [r for r in self.results if not r.ok]

    @property
    def outcome(self) -> DispatchOutcome:
        succeeded = len(self.succeeded)
        if succeeded == self.total_requested:
            return DispatchOutcome.FULL_SUCCESS
        if succeeded > 0:
            return DispatchOutcome.PARTIAL_SUCCESS
        return DispatchOutcome.TOTAL_FAILURE
