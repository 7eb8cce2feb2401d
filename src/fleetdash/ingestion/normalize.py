"""Normalization helpers.

Centralizes defensive parsing of values received from external providers.
"""

from __future__ import annotations

import math
from typing import Any


def safe_float(value: Any) -> float | None:
    if value is None or value == "" or value == "--":
        return None
    if isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text if text else None


def time_of_day(stamp: str) -> str | None:
    """Return the ``HH:MM`` part of a ``"<date> <HH:MM>"`` stamp.

    Returns ``None`` when the stamp has no time component.
    """
    _date, sep, clock = stamp.strip().partition(" ")
    clock = clock.strip()
    if not sep or not clock:
        return None
    return clock
