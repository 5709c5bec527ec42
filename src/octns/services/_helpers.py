"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import UTC, datetime


def now_ms() -> int:
    """Current UTC time as integer milliseconds since the Unix epoch."""
    return int(datetime.now(UTC).timestamp() * 1000)


def mask(value: str, *, keep: int = 6) -> str:
    """Shorten an address or hash for log output.

    Examples:
        >>> mask("oct1234567890abcdef")
        'oct123…'
        >>> mask("abc")
        'abc'
    """
    if len(value) <= keep:
        return value
    return f"{value[:keep]}…"
