"""
Logging redaction helpers.
Redacts bridge credentials and group invite codes from log messages.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable


_PATTERNS: Iterable[tuple[re.Pattern, str]] = (
    # WhatsApp group invite link: chat.whatsapp.com/<code>
    (re.compile(r"(chat\.whatsapp\.com/)([A-Za-z0-9]{6,})"), r"\1[REDACTED]"),
    # Bridge API key header or config output
    (re.compile(r"(?i)(x-api-key|api[_-]?key)\s*[:=]\s*([A-Za-z0-9\-\._]+)"), r"\1=[REDACTED]"),
    # Invite code passed as query parameter
    (re.compile(r"(?i)([?&]code=)([A-Za-z0-9]+)"), r"\1[REDACTED]"),
)


def redact_message(message: str) -> str:
    redacted = message
    for pattern, replacement in _PATTERNS:
        redacted = pattern.sub(replacement, redacted)
    return redacted


class RedactingFilter(logging.Filter):
    """Filter that redacts sensitive data from log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # Malformed format args; let the handler report it
            return True
        record.msg = redact_message(message)
        record.args = ()
        return True


def install_redaction_filter() -> None:
    """Attach the filter to the root handlers so propagated records are covered."""
    root = logging.getLogger()
    for handler in root.handlers:
        if not any(isinstance(f, RedactingFilter) for f in handler.filters):
            handler.addFilter(RedactingFilter())
