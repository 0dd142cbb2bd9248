"""Time-weighted morale score, relative-impact correction and life condition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..config import RiskConfig
from ..models import AWAKE_BUCKETS, HOURS_PER_WEEK, TimeCategory
from ..scoring import ri_to_internal
from .allocation import TimeAllocation
from .quality import QUALITY_CEILING, Qualities


@dataclass(frozen=True, slots=True)
class MoraleRun:
    qualities: Qualities
    awake_weighted: float
    sleep_quality: float
    raw_lms: float
    ri_adjusted: float
    final_lmi: float

    def diagnostics(self) -> Dict[str, Any]:
        buckets = {bucket.value: value for bucket, value in self.qualities.items()}
        buckets[TimeCategory.SLEEP.value] = self.sleep_quality
        return {"qualities": buckets, "awakeWeightedQuality": self.awake_weighted}


def net_relative_impact(allocation: TimeAllocation) -> float:
    """Hour-weighted internal RI over the whole week, sleep excluded."""
    return sum(
        (allocation.bucket_hours(bucket) / HOURS_PER_WEEK) * ri_to_internal(allocation.ri(bucket))
        for bucket in AWAKE_BUCKETS
    )


def score_week(
    qualities: Qualities,
    allocation: TimeAllocation,
    net_ri: float,
    risk: RiskConfig,
    life_condition: float,
) -> MoraleRun:
    awake_total = sum(allocation.bucket_hours(bucket) * qualities[bucket] for bucket in AWAKE_BUCKETS)
    awake_weighted = awake_total / (allocation.awake_hours or 1)
    # Sleep sits halfway between a perfect night and how the awake week goes.
    sleep_quality = (QUALITY_CEILING + awake_weighted) / 2
    sleep_hours = allocation.hours(TimeCategory.SLEEP)

    raw_lms = (awake_total + sleep_hours * sleep_quality) / HOURS_PER_WEEK
    ri_adjusted = raw_lms * (1 + risk.global_multiplier * net_ri)
    final_lmi = ri_adjusted * (life_condition / 10)
    return MoraleRun(
        qualities=qualities,
        awake_weighted=awake_weighted,
        sleep_quality=sleep_quality,
        raw_lms=raw_lms,
        ri_adjusted=ri_adjusted,
        final_lmi=final_lmi,
    )
