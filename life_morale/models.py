"""Domain records for Life Morale Index scoring."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

ANSWER_COUNT = 24
HOURS_PER_WEEK = 168.0
NEUTRAL_RI = 5.0
DEFAULT_SLEEP_HOURS = 49.0
DEFAULT_ELI = 1.0


class ValidationError(ValueError):
    """Raised when a payload cannot be scored."""

    def __init__(self, message: str, problems: Optional[List[str]] = None):
        super().__init__(message)
        self.problems = problems or [message]


class TimeCategory(str, Enum):
    SLEEP = "Sleep"
    WORK = "Work"
    COMMUTE = "Commute"
    RELATIONSHIPS = "Relationships"
    LEISURE = "Leisure"
    GYM = "Gym"
    CHORES = "Chores"
    GROWTH = "Growth"
    OTHER = "Other"


class Dimension(str, Enum):
    FULFILLMENT = "Fulfillment"
    CONNECTION = "Connection"
    AUTONOMY = "Autonomy"
    VITALITY = "Vitality"
    PEACE = "Peace"


DIMENSION_INDICES: Dict[Dimension, tuple[int, ...]] = {
    Dimension.FULFILLMENT: (0, 1, 2, 3, 4),
    Dimension.CONNECTION: (5, 6, 7, 8, 9),
    Dimension.AUTONOMY: (10, 11, 12, 13, 14),
    Dimension.VITALITY: (15, 16, 17, 18, 19),
    Dimension.PEACE: (20, 21, 22, 23),
}

# Awake buckets that carry a quality value. "Other" is the residual of awake
# time not spent in the five tracked categories (Chores, Growth, Other).
AWAKE_BUCKETS = (
    TimeCategory.WORK,
    TimeCategory.COMMUTE,
    TimeCategory.GYM,
    TimeCategory.RELATIONSHIPS,
    TimeCategory.LEISURE,
    TimeCategory.OTHER,
)


@dataclass(frozen=True, slots=True)
class Answer:
    score: Optional[float] = None
    scenario_score: Optional[float] = None
    note: Optional[str] = None


@dataclass(frozen=True, slots=True)
class TimeRow:
    category: str
    hours: float = 0.0
    ri: Optional[float] = NEUTRAL_RI


@dataclass(slots=True)
class ScoreInput:
    answers: List[Answer]
    time_map: List[TimeRow] = field(default_factory=list)
    eli: float = DEFAULT_ELI
    config: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class Contributor:
    index: int
    score: float
    note: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"index": self.index, "score": self.score, "note": self.note}


SectionAverages = Dict[Dimension, Optional[float]]


def _sections_to_wire(sections: SectionAverages) -> Dict[str, Optional[float]]:
    return {dimension.value: value for dimension, value in sections.items()}


@dataclass(slots=True)
class ScoreOutput:
    calibrated_current: List[Optional[float]]
    calibrated_scenario: List[Optional[float]]
    sections_current: SectionAverages
    sections_scenario: SectionAverages
    raw_lms: float
    ri_adjusted: float
    final_lmi: float
    raw_lms_scn: float
    ri_adjusted_scn: float
    final_lmi_scn: float
    top_drainers: List[Contributor]
    top_uplifters: List[Contributor]
    diagnostics: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "calibrated": {
                "current": list(self.calibrated_current),
                "scenario": list(self.calibrated_scenario),
            },
            "sectionAverages": {
                "current": _sections_to_wire(self.sections_current),
                "scenario": _sections_to_wire(self.sections_scenario),
            },
            "rawLMS": self.raw_lms,
            "riAdjusted": self.ri_adjusted,
            "finalLMI": self.final_lmi,
            "rawLMS_scn": self.raw_lms_scn,
            "riAdjusted_scn": self.ri_adjusted_scn,
            "finalLMI_scn": self.final_lmi_scn,
            "topDrainers": [item.to_dict() for item in self.top_drainers],
            "topUplifters": [item.to_dict() for item in self.top_uplifters],
            "diagnostics": self.diagnostics,
        }
