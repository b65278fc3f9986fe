"""Utility helpers for name normalization and channel parsing."""

from __future__ import annotations

import re

from .errors import InvalidDigitsError, NumericOverflowError

PAREN_PATTERN = re.compile(r"[()]")
NON_ALNUM_PATTERN = re.compile(r"[^A-Za-z0-9]")

CHANNEL_MAX = 255


def normalize_name(value: str) -> str:
    """Drop parentheses, map every other non-ASCII-alphanumeric to ``_``, lowercase."""
    normalized = PAREN_PATTERN.sub("", value)
    normalized = NON_ALNUM_PATTERN.sub("_", normalized)
    return normalized.lower()


def parse_channel(value: str) -> int:
    """Parse a captured digit run as an 8-bit unsigned integer."""
    if not value or not (value.isascii() and value.isdigit()):
        raise InvalidDigitsError(f"Invalid digits in channel value {value!r}")
    channel = int(value)
    if channel > CHANNEL_MAX:
        raise NumericOverflowError(
            f"Channel value {value} exceeds {CHANNEL_MAX}"
        )
    return channel
