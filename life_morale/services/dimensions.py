"""Grouping of calibrated answers into psychological dimensions."""

from __future__ import annotations

from typing import Optional, Sequence

from ..models import DIMENSION_INDICES, SectionAverages
from ..utils import mean


def _pick(values: Sequence[Optional[float]], indices: Sequence[int]) -> list[Optional[float]]:
    return [values[index] for index in indices if index < len(values)]


def section_averages(calibrated: Sequence[Optional[float]]) -> SectionAverages:
    """Mean per dimension; ``None`` when a dimension has no answered items."""
    return {
        dimension: mean(_pick(calibrated, indices))
        for dimension, indices in DIMENSION_INDICES.items()
    }
