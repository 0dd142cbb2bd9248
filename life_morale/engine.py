"""Life Morale Index scoring pipeline and its application facade."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from .config import DEFAULT_SCORING_CONFIG, AppConfig, ScoringConfig
from .models import ScoreInput, ScoreOutput, ValidationError
from .scoring import calibrate, life_condition_multiplier
from .services.allocation import resolve_allocation
from .services.contributors import rank_contributors
from .services.dimensions import section_averages
from .services.morale import net_relative_impact, score_week
from .services.quality import apply_cross_lift, map_qualities, map_scenario_qualities
from .services.validators import enforce, parse_input
from .utils import mean

LOGGER = logging.getLogger("life_morale.engine")


def score_lmi(data: ScoreInput | Mapping[str, Any], base: ScoringConfig = DEFAULT_SCORING_CONFIG) -> ScoreOutput:
    """Score one request.

    ``data`` is either a parsed :class:`ScoreInput` or the raw payload dict.
    Per-request ``config`` overrides are layered on top of ``base``. The
    function is pure: identical input and config give identical output.
    """
    if not isinstance(data, ScoreInput):
        data = parse_input(data)
    config = base.with_overrides(data.config)
    enforce(data, config)

    current = [calibrate(answer.score, config.calibration) for answer in data.answers]
    scenario = [calibrate(answer.scenario_score, config.calibration) for answer in data.answers]
    sections = section_averages(current)
    sections_scn = section_averages(scenario)
    overall = mean(current)
    overall_scn = mean(scenario)

    allocation = resolve_allocation(data.time_map, config.validation.duplicate_rows)
    net_ri = net_relative_impact(allocation)
    lmc = life_condition_multiplier(data.eli)
    LOGGER.debug(
        "Allocation resolved: awake=%.2f other=%.2f netRI=%.4f LMC=%.2f",
        allocation.awake_hours,
        allocation.other_awake,
        net_ri,
        lmc,
    )

    mapped = map_qualities(sections, overall)
    mapped_scn = map_scenario_qualities(sections_scn, overall_scn, mapped)
    run = score_week(
        apply_cross_lift(mapped, allocation, config.cross_lift), allocation, net_ri, config.ri, lmc
    )
    run_scn = score_week(
        apply_cross_lift(mapped_scn, allocation, config.cross_lift), allocation, net_ri, config.ri, lmc
    )

    drainers, uplifters = rank_contributors(data.answers)
    LOGGER.info("Scored LMI final=%.4f scenario=%.4f", run.final_lmi, run_scn.final_lmi)
    return ScoreOutput(
        calibrated_current=current,
        calibrated_scenario=scenario,
        sections_current=sections,
        sections_scenario=sections_scn,
        raw_lms=run.raw_lms,
        ri_adjusted=run.ri_adjusted,
        final_lmi=run.final_lmi,
        raw_lms_scn=run_scn.raw_lms,
        ri_adjusted_scn=run_scn.ri_adjusted,
        final_lmi_scn=run_scn.final_lmi,
        top_drainers=drainers,
        top_uplifters=uplifters,
        diagnostics={
            "awakeHours": allocation.awake_hours,
            "otherAwakeHours": allocation.other_awake,
            "netRI": net_ri,
            "lifeConditionMultiplier": lmc,
            "current": run.diagnostics(),
            "scenario": run_scn.diagnostics(),
        },
    )


@dataclass
class EngineResult:
    ok: bool
    payload: Dict[str, Any]
    error: str | None = None


class LifeMoraleEngine:
    def __init__(self, config: AppConfig):
        self.config = config

    def score(self, payload: Any) -> EngineResult:
        try:
            output = score_lmi(payload, self.config.scoring)
        except ValidationError as exc:
            LOGGER.warning("Rejected scoring request: %s", exc)
            return EngineResult(False, {}, str(exc))
        return EngineResult(True, output.to_dict())

    def defaults(self) -> EngineResult:
        return EngineResult(True, self.config.scoring.to_wire())
