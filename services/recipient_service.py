"""Recipient resolution for calendar e-mails."""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

from app.exceptions import NoValidRecipientsError

logger = logging.getLogger("cookcourse.recipients")

# local@domain.tld with no whitespace and a "." somewhere after the "@"
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(address: Optional[str]) -> bool:
    if not address or not isinstance(address, str):
        return False
    return EMAIL_PATTERN.fullmatch(address) is not None


def resolve_recipients(
    primary: Optional[str],
    family_addresses: Iterable[Optional[str]] = (),
    *,
    require_any: bool = True,
) -> List[str]:
    """
    Collect the addresses a calendar is sent to.

    The primary user's address is kept whenever it is present and non-empty.
    Family addresses are kept only when they pass ``is_valid_email``; the
    others are dropped with a warning. Duplicates keep their first position.

    Raises:
        NoValidRecipientsError: nothing usable remains and ``require_any`` is set
    """
    recipients: List[str] = []
    dropped: List[str] = []

    if primary and primary.strip():
        recipients.append(primary.strip())
    else:
        logger.warning("No e-mail address found for the current user")

    for address in family_addresses:
        if not address:
            continue
        if is_valid_email(address):
            if address not in recipients:
                recipients.append(address)
        else:
            logger.warning("Invalid family member e-mail address dropped: %r", address)
            dropped.append(address)

    if not recipients and require_any:
        raise NoValidRecipientsError(details={"dropped": dropped} if dropped else None)

    logger.info("Resolved %d recipient(s), dropped %d", len(recipients), len(dropped))
    return recipients
