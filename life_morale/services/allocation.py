"""Resolution of caller time rows into the canonical weekly allocation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable

from ..models import (
    DEFAULT_SLEEP_HOURS,
    HOURS_PER_WEEK,
    NEUTRAL_RI,
    TimeCategory,
    TimeRow,
    ValidationError,
)

LOGGER = logging.getLogger("life_morale.scoring")

_TRACKED_AWAKE = (
    TimeCategory.WORK,
    TimeCategory.COMMUTE,
    TimeCategory.GYM,
    TimeCategory.RELATIONSHIPS,
    TimeCategory.LEISURE,
)


def default_row(category: TimeCategory) -> TimeRow:
    hours = DEFAULT_SLEEP_HOURS if category is TimeCategory.SLEEP else 0.0
    return TimeRow(category=category.value, hours=hours, ri=NEUTRAL_RI)


@dataclass(frozen=True, slots=True)
class TimeAllocation:
    rows: Dict[TimeCategory, TimeRow]
    awake_hours: float
    other_awake: float

    def hours(self, category: TimeCategory) -> float:
        return self.rows[category].hours

    def ri(self, category: TimeCategory):
        return self.rows[category].ri

    def bucket_hours(self, category: TimeCategory) -> float:
        """Hours attributed to an awake bucket; Other is the residual."""
        if category is TimeCategory.OTHER:
            return self.other_awake
        return self.hours(category)


def resolve_allocation(rows: Iterable[TimeRow], duplicate_policy: str = "first") -> TimeAllocation:
    """Build the nine-category allocation.

    The first row for a category wins; with ``duplicate_policy="reject"`` a
    second row for the same category raises :class:`ValidationError`.
    Rows with unknown labels are ignored. Hours are not required to sum to a
    full week: awake totals are clamped at zero when allocations overrun it.
    """
    by_label = {category.value: category for category in TimeCategory}
    resolved: Dict[TimeCategory, TimeRow] = {}
    for row in rows:
        category = by_label.get(row.category)
        if category is None:
            LOGGER.debug("Ignoring time row with unknown category %r", row.category)
            continue
        if category in resolved:
            if duplicate_policy == "reject":
                raise ValidationError(f"Duplicate time row for category {category.value}")
            continue
        resolved[category] = row
    for category in TimeCategory:
        resolved.setdefault(category, default_row(category))

    awake_hours = max(0.0, HOURS_PER_WEEK - resolved[TimeCategory.SLEEP].hours)
    tracked = sum(resolved[category].hours for category in _TRACKED_AWAKE)
    other_awake = max(0.0, awake_hours - tracked)
    return TimeAllocation(rows=resolved, awake_hours=awake_hours, other_awake=other_awake)
