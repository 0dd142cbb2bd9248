"""Projection of dimension averages onto awake time buckets."""

from __future__ import annotations

from typing import Dict, Optional

from ..config import CrossLiftConfig
from ..models import AWAKE_BUCKETS, Dimension, SectionAverages, TimeCategory
from ..scoring import ri_to_internal
from ..utils import clamp
from .allocation import TimeAllocation

Qualities = Dict[TimeCategory, float]

# Fixed domain mapping: each bucket borrows the quality of one dimension.
QUALITY_SOURCES: Dict[TimeCategory, Optional[Dimension]] = {
    TimeCategory.WORK: Dimension.AUTONOMY,
    TimeCategory.COMMUTE: Dimension.PEACE,
    TimeCategory.GYM: Dimension.VITALITY,
    TimeCategory.RELATIONSHIPS: Dimension.CONNECTION,
    TimeCategory.LEISURE: Dimension.FULFILLMENT,
    TimeCategory.OTHER: None,
}

LIFT_SOURCES = (TimeCategory.RELATIONSHIPS, TimeCategory.GYM, TimeCategory.LEISURE)
QUALITY_FLOOR = 1.0
QUALITY_CEILING = 10.0


def map_qualities(sections: SectionAverages, overall: Optional[float]) -> Qualities:
    """Bucket qualities for the current run.

    A bucket whose dimension has no data takes the overall mean of all
    calibrated answers, and 0 when nothing was answered at all.
    """
    fallback = overall if overall is not None else 0.0
    qualities: Qualities = {}
    for bucket in AWAKE_BUCKETS:
        source = QUALITY_SOURCES[bucket]
        value = sections[source] if source is not None else None
        qualities[bucket] = value if value is not None else fallback
    return qualities


def map_scenario_qualities(
    sections: SectionAverages,
    overall: Optional[float],
    current: Qualities,
) -> Qualities:
    """Bucket qualities for the scenario run.

    Missing scenario data falls back to the current run's bucket quality, so
    a scenario with no re-answered items reproduces the current run.
    """
    qualities: Qualities = {}
    for bucket in AWAKE_BUCKETS:
        source = QUALITY_SOURCES[bucket]
        value = sections[source] if source is not None else overall
        qualities[bucket] = value if value is not None else current[bucket]
    return qualities


def cross_lift_uplift(work_quality: float, allocation: TimeAllocation, config: CrossLiftConfig) -> float:
    if not config.enabled:
        return 0.0
    awake = allocation.awake_hours
    spillover = 0.0
    for category in LIFT_SOURCES:
        fraction = allocation.hours(category) / awake if awake else 0.0
        spillover += fraction * max(0.0, ri_to_internal(allocation.ri(category)))
    headroom = (QUALITY_CEILING - work_quality) / QUALITY_CEILING
    return config.alpha * spillover * headroom


def apply_cross_lift(qualities: Qualities, allocation: TimeAllocation, config: CrossLiftConfig) -> Qualities:
    """Return qualities with Work lifted by positive-RI leisure-type time."""
    if not config.enabled:
        return dict(qualities)
    work = qualities[TimeCategory.WORK]
    lifted = work + cross_lift_uplift(work, allocation, config)
    result = dict(qualities)
    result[TimeCategory.WORK] = clamp(lifted, QUALITY_FLOOR, QUALITY_CEILING)
    return result
