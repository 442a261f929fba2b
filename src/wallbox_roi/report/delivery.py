"""Report delivery by e-mail — stub.

No mail is sent.  The coroutine waits for a configurable delay to mimic a
remote call, logs the would-be delivery and reports success.
"""

from __future__ import annotations

import asyncio
import logging

logger = logging.getLogger(__name__)


async def send_report_via_email(
    email: str,
    pdf_bytes: bytes,
    *,
    delay_seconds: float = 1.5,
) -> bool:
    """Pretend to send ``pdf_bytes`` to ``email``.

    Raises ``ValueError`` for an empty address or an empty document.
    """
    if not email:
        raise ValueError("E-mail address is empty")
    if not pdf_bytes:
        raise ValueError("Report document is empty")

    await asyncio.sleep(delay_seconds)
    logger.info("Simulated delivery of %d-byte report to %s", len(pdf_bytes), email)
    return True
