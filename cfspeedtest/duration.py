"""Parsing of short human-written durations such as ``45``, ``45s`` or ``1m30s``."""

from __future__ import annotations

import re
from datetime import timedelta

__all__ = ["DurationError", "parse_duration"]

_INT64_MAX = 2**63 - 1

_SECONDS = re.compile(r"\s*(\d+)\s*[sS]?\s*", re.ASCII)
_MINUTES_SECONDS = re.compile(r"\s*(\d+)\s*[mM]\s*(\d+)\s*[sS]\s*", re.ASCII)


class DurationError(ValueError):
    """Raised when a string is not a duration in a supported form."""


def _to_int(digits: str) -> int:
    value = int(digits)
    if value > _INT64_MAX:
        raise DurationError(f"value out of range: {digits}")
    return value


def _build(minutes: int, seconds: int) -> timedelta:
    try:
        return timedelta(minutes=minutes, seconds=seconds)
    except OverflowError as exc:
        raise DurationError("duration out of range") from exc


def parse_duration(text: str) -> timedelta:
    """Parse ``<n>``, ``<n>s`` or ``<n>m<n>s`` (case-insensitive, spaces allowed)."""
    match = _SECONDS.fullmatch(text)
    if match:
        return _build(0, _to_int(match.group(1)))

    match = _MINUTES_SECONDS.fullmatch(text)
    if match:
        return _build(_to_int(match.group(1)), _to_int(match.group(2)))

    raise DurationError(
        "string does not match any of duration patterns: `<n>s`, `<n>m<n>s`"
    )