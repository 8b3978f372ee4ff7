"""EmailJS adapter for calendar e-mail delivery.
"""

from typing import Any, Dict, Optional, Protocol
import logging

import httpx

from app.config import Settings
from app.exceptions import EmailSendError
from domain.models import SendPayload

logger = logging.getLogger("cookcourse.email")


class EmailSender(Protocol):
    """Anything that can deliver one payload. Raising means the send failed."""

    async def send(self, payload: SendPayload) -> Any: ...


def build_template_params(payload: SendPayload) -> Dict[str, str]:
    """Map a payload to the parameter names used by the e-mail template."""
    return {
        "to_email": payload.to,
        "subject": payload.subject,
        "message": payload.body,
        "from_name": payload.sender_display_name,
    }


class EmailJSSender:
    """
    Sends one e-mail per call through the EmailJS REST API.

    Any 2xx response is a success and is returned as ``{"status", "text"}``.
    Non-2xx responses and transport errors raise EmailSendError; the HTTP
    status is kept on the error for diagnostics.
    """

    def __init__(self, client: httpx.AsyncClient, settings: Settings):
        self.client = client
        self.settings = settings

    def is_configured(self) -> bool:
        s = self.settings
        return bool(s.emailjs_service_id and s.emailjs_template_id and s.emailjs_public_key)

    def _body(self, payload: SendPayload) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "service_id": self.settings.emailjs_service_id,
            "template_id": self.settings.emailjs_template_id,
            "user_id": self.settings.emailjs_public_key,
            "template_params": build_template_params(payload),
        }
        if self.settings.emailjs_private_key:
            body["accessToken"] = self.settings.emailjs_private_key
        return body

    async def send(self, payload: SendPayload) -> Dict[str, Any]:
        if not self.is_configured():
            raise EmailSendError("EmailJS is not configured (service, template or public key missing)")

        try:
            response = await self.client.post(
                self.settings.emailjs_api_url,
                json=self._body(payload),
                timeout=self.settings.email_timeout_sec,
            )
        except httpx.HTTPError as exc:
            raise EmailSendError(f"Transport error while sending to {payload.to}: {exc}") from exc

        if not response.is_success:
            raise EmailSendError(
                f"EmailJS rejected the message for {payload.to} (HTTP {response.status_code})",
                status_code=response.status_code,
                text=response.text,
            )

        logger.debug("EmailJS accepted message for %s", payload.to)
        return {"status": response.status_code, "text": response.text}


def create_client(timeout: Optional[float] = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=timeout)
