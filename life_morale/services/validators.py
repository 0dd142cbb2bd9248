"""Payload parsing and optional strict validation."""

from __future__ import annotations

import math
from collections import Counter
from typing import Any, Dict, List, Optional

from ..config import DUPLICATE_POLICIES, ScoringConfig
from ..models import (
    ANSWER_COUNT,
    DEFAULT_ELI,
    NEUTRAL_RI,
    Answer,
    ScoreInput,
    TimeCategory,
    TimeRow,
    ValidationError,
)

_RATING_RANGE = (1.0, 10.0)
_CONFIG_NUMBERS = {
    "calibration": ("k", "max"),
    "ri": ("globalMultiplier",),
    "crossLift": ("alpha",),
    "validation": (),
}
_CONFIG_FLAGS = {
    "crossLift": ("enabled",),
    "validation": ("strict",),
}


def _number(value: Any, label: str, *, nan_is_absent: bool = False) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{label} must be a number")
    try:
        number = float(value)
    except OverflowError:
        raise ValidationError(f"{label} is too large") from None
    if math.isnan(number):
        if nan_is_absent:
            return None
        raise ValidationError(f"{label} must be a finite number")
    return number


def _parse_answer(raw: Any, index: int) -> Answer:
    if not isinstance(raw, dict):
        raise ValidationError(f"answers[{index}] must be an object")
    note = raw.get("note")
    if note is not None and not isinstance(note, str):
        raise ValidationError(f"answers[{index}].note must be a string")
    return Answer(
        score=_number(raw.get("score"), f"answers[{index}].score", nan_is_absent=True),
        scenario_score=_number(
            raw.get("scenarioScore"), f"answers[{index}].scenarioScore", nan_is_absent=True
        ),
        note=note,
    )


def _parse_row(raw: Any, index: int) -> TimeRow:
    if not isinstance(raw, dict):
        raise ValidationError(f"timeMap[{index}] must be an object")
    category = raw.get("category")
    if not isinstance(category, str):
        raise ValidationError(f"timeMap[{index}].category must be a string")
    hours = _number(raw.get("hours"), f"timeMap[{index}].hours")
    ri = raw.get("ri", NEUTRAL_RI)
    return TimeRow(
        category=category,
        hours=hours if hours is not None else 0.0,
        ri=_number(ri, f"timeMap[{index}].ri"),
    )


def parse_config_overrides(raw: Any) -> Dict[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValidationError("config must be an object")
    for group, numbers in _CONFIG_NUMBERS.items():
        section = raw.get(group)
        if section is None:
            continue
        if not isinstance(section, dict):
            raise ValidationError(f"config.{group} must be an object")
        for key in numbers:
            value = _number(section.get(key), f"config.{group}.{key}")
            if value is not None and math.isinf(value):
                raise ValidationError(f"config.{group}.{key} must be a finite number")
        for key in _CONFIG_FLAGS.get(group, ()):
            if section.get(key) is not None and not isinstance(section[key], bool):
                raise ValidationError(f"config.{group}.{key} must be a boolean")
    k = (raw.get("calibration") or {}).get("k")
    if k is not None and k == 0:
        # The saturation curve is undefined without steepness.
        raise ValidationError("config.calibration.k must not be zero")
    policy = (raw.get("validation") or {}).get("duplicateRows")
    if policy is not None and policy not in DUPLICATE_POLICIES:
        raise ValidationError(
            f"config.validation.duplicateRows must be one of: {', '.join(DUPLICATE_POLICIES)}"
        )
    return raw


def parse_input(payload: Any) -> ScoreInput:
    """Turn a decoded JSON payload into a :class:`ScoreInput`.

    Only structural problems raise; absent optional fields get defaults.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Payload must be a JSON object")
    answers = payload.get("answers")
    if not isinstance(answers, list):
        raise ValidationError("answers must be a list")
    time_map = payload.get("timeMap")
    if time_map is None:
        time_map = []
    if not isinstance(time_map, list):
        raise ValidationError("timeMap must be a list")
    eli = _number(payload.get("ELI"), "ELI")
    return ScoreInput(
        answers=[_parse_answer(item, index) for index, item in enumerate(answers)],
        time_map=[_parse_row(item, index) for index, item in enumerate(time_map)],
        eli=eli if eli is not None else DEFAULT_ELI,
        config=parse_config_overrides(payload.get("config")),
    )


def _out_of_range(value: Optional[float]) -> bool:
    low, high = _RATING_RANGE
    return value is not None and not (low <= value <= high)


def strict_problems(data: ScoreInput) -> List[str]:
    problems: List[str] = []
    if len(data.answers) != ANSWER_COUNT:
        problems.append(f"expected {ANSWER_COUNT} answers, got {len(data.answers)}")
    for index, answer in enumerate(data.answers):
        if _out_of_range(answer.score):
            problems.append(f"answers[{index}].score outside 1-10")
        if _out_of_range(answer.scenario_score):
            problems.append(f"answers[{index}].scenarioScore outside 1-10")

    known = {category.value for category in TimeCategory}
    for index, row in enumerate(data.time_map):
        if row.category not in known:
            problems.append(f"timeMap[{index}].category {row.category!r} is unknown")
        if row.hours < 0:
            problems.append(f"timeMap[{index}].hours must not be negative")
        if _out_of_range(row.ri):
            problems.append(f"timeMap[{index}].ri outside 1-10")
    counts = Counter(row.category for row in data.time_map)
    for category, count in counts.items():
        if count > 1:
            problems.append(f"duplicate time rows for {category}")
    if _out_of_range(data.eli):
        problems.append("ELI outside 1-10")
    return problems


def enforce(data: ScoreInput, config: ScoringConfig) -> None:
    if not config.validation.strict:
        return
    problems = strict_problems(data)
    if problems:
        raise ValidationError("Invalid input: " + "; ".join(problems), problems)
