"""Formatting helpers for timestamps and text display."""

from __future__ import annotations

import re
from datetime import datetime

_WORD_BOUNDARY = re.compile(r"[\s_\-]+|(?<=[a-z0-9])(?=[A-Z])")


def format_datetime(dt: datetime) -> str:
    """Format an aware datetime in local time as 'Mar 04 2024 09:15:02 pm'."""
    local = dt.astimezone()
    return local.strftime("%b %d %Y %I:%M:%S ") + local.strftime("%p").lower()


def title_case(text: str) -> str:
    """Turn 'fix-login_pageTimeout' into 'Fix Login Page Timeout'."""
    words = [w for w in _WORD_BOUNDARY.split(text) if w]
    return " ".join(w[0].upper() + w[1:].lower() for w in words)


def truncate(text: str, max_length: int) -> str:
    """Truncate text to max_length, appending '…' if truncated."""
    if max_length <= 0:
        return ""
    if len(text) <= max_length:
        return text
    return text[: max_length - 1] + "…"
