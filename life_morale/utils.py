"""Numeric helpers shared by the scoring stages."""

from __future__ import annotations

import math
from typing import Iterable, Optional


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def is_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def mean(values: Iterable[Optional[float]]) -> Optional[float]:
    """Arithmetic mean of the numeric entries, ``None`` when there are none."""
    filled = [value for value in values if is_number(value)]
    if not filled:
        return None
    return sum(filled) / len(filled)
