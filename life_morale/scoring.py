"""Scalar transforms used by the Life Morale pipeline.

* :func:`calibrate` maps a raw 1-10 rating onto an exponential saturation
  curve that reaches ``max_value`` exactly at 10.
* :func:`ri_to_internal` converts a 1-10 relative-impact rating (5 is
  neutral) into a signed multiplier contribution; penalties are steeper
  than rewards.
* :func:`life_condition_multiplier` turns the external life-event load
  (ELI) into the dampening factor applied to the final index.
"""

from __future__ import annotations

import math
from typing import Optional

from .config import CalibrationConfig
from .models import NEUTRAL_RI
from .utils import clamp

RATING_MIN = 1.0
RATING_MAX = 10.0
RI_PENALTY_SLOPE = 0.075
RI_REWARD_SLOPE = 0.06
ELI_WEIGHT = 0.2


def calibrate(score: Optional[float], config: CalibrationConfig | None = None) -> Optional[float]:
    if score is None:
        return None
    cfg = config or CalibrationConfig()
    x = clamp(score, RATING_MIN, RATING_MAX)
    numerator = 1 - math.exp(-cfg.k * (x / 10))
    denominator = 1 - math.exp(-cfg.k)
    return cfg.max_value * (numerator / denominator)


def ri_to_internal(ri: Optional[float]) -> float:
    if ri is None:
        return 0.0
    if ri < NEUTRAL_RI:
        return (ri - NEUTRAL_RI) * RI_PENALTY_SLOPE
    if ri == NEUTRAL_RI:
        return 0.0
    return (ri - NEUTRAL_RI) * RI_REWARD_SLOPE


def life_condition_multiplier(eli: float) -> float:
    """LMC on a 0-10 scale: 9.8 at ELI 1, 8.0 at ELI 10."""
    return 10 - ELI_WEIGHT * eli
