"""Pure input validators for the console entry flow.

All functions are total: they never raise, whatever string they receive.

``is_numeric`` is deliberately lenient.  It checks the character class only,
so ``"1.2.3"`` and ``"."`` pass; :func:`parse_amount` then converts by
longest valid prefix and returns None when there is nothing to convert.
"""

from __future__ import annotations

import math
import re

_DIGITS = frozenset("0123456789")
_AMOUNT_PREFIX = re.compile(r"\d*(?:\.\d*)?", re.ASCII)


def is_numeric(text: str) -> bool:
    """True iff *text* is non-empty and made only of digits and dots."""
    return bool(text) and all(ch in _DIGITS or ch == "." for ch in text)


def is_non_empty_trimmed(text: str) -> bool:
    """True iff *text* still has characters after stripping surrounding spaces."""
    return bool(text.strip(" "))


def is_menu_choice(text: str) -> bool:
    """True iff *text*, trimmed of surrounding whitespace, is all decimal digits."""
    stripped = text.strip()
    return bool(stripped) and all(ch in _DIGITS for ch in stripped)


def first_token(line: str) -> str:
    """Return the first whitespace-delimited token of *line*, or ``""``."""
    parts = line.split(maxsplit=1)
    return parts[0] if parts else ""


def parse_amount(text: str) -> float | None:
    """Convert a numeric token to a float using its longest decimal prefix.

    Returns None when *text* fails :func:`is_numeric`, holds no digit, or is
    too long to be a finite float.
    """
    if not is_numeric(text):
        return None
    prefix = _AMOUNT_PREFIX.match(text)
    if prefix is None or not any(ch in _DIGITS for ch in prefix.group()):
        return None
    value = float(prefix.group())
    if not math.isfinite(value):
        return None
    return value


def parse_count(text: str) -> int | None:
    """Parse a non-negative integer token; None for anything else."""
    token = text.strip()
    if not token or not all(ch in "0123456789+-" for ch in token):
        return None
    try:
        value = int(token)
    except ValueError:
        return None
    if value < 0:
        return None
    return value
