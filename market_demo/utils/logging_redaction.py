"""
Logging redaction helpers.
Keeps the Telegram bot token out of log output.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable


_PATTERNS: Iterable[tuple[re.Pattern, str]] = (
    # Bot token inside the Bot API URL: /bot<token>/
    (re.compile(r"bot\d+:[A-Za-z0-9_-]{20,}"), "bot[REDACTED]"),
    # TELEGRAM_BOT_TOKEN=<token> echoed from settings
    (re.compile(r"(?i)(bot_token|token)\s*[:=]\s*([A-Za-z0-9:\-\._]+)"), r"\1=[REDACTED]"),
)


def redact_message(message: str) -> str:
    redacted = message
    for pattern, replacement in _PATTERNS:
        redacted = pattern.sub(replacement, redacted)
    return redacted


class RedactingFilter(logging.Filter):
    """Filter that redacts the bot token from log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        redacted = redact_message(record.getMessage())
        record.msg = redacted
        record.args = ()
        return True


def install_redaction_filter() -> None:
    # Filters on the root logger only see records logged there directly,
    # so attach to the root handlers as well.
    root = logging.getLogger()
    targets = [root, *root.handlers]
    for target in targets:
        if any(isinstance(existing, RedactingFilter) for existing in target.filters):
            continue
        target.addFilter(RedactingFilter())
