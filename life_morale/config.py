"""Configuration primitives for the Life Morale Index service."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv

DUPLICATE_POLICIES = ("first", "reject")


def _env(key: str, default: str) -> str:
    value = os.getenv(key)
    return value if value is not None else default


def _env_int(key: str, default: int) -> int:
    try:
        return int(_env(key, str(default)))
    except ValueError:
        return default


def _env_float(key: str, default: float) -> float:
    try:
        return float(_env(key, str(default)))
    except ValueError:
        return default


def _env_bool(key: str, default: bool) -> bool:
    raw = _env(key, str(default)).lower()
    if raw in {"1", "true", "yes", "y"}:
        return True
    if raw in {"0", "false", "no", "n"}:
        return False
    return default


def _override(group: Dict[str, Any], key: str, fallback: Any) -> Any:
    value = group.get(key)
    return fallback if value is None else value


@dataclass(frozen=True, slots=True)
class CalibrationConfig:
    k: float = 1.936428228
    max_value: float = 8.75


@dataclass(frozen=True, slots=True)
class RiskConfig:
    global_multiplier: float = 1.0


@dataclass(frozen=True, slots=True)
class CrossLiftConfig:
    enabled: bool = False
    alpha: float = 20.0


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    strict: bool = False
    duplicate_rows: str = "first"


@dataclass(frozen=True, slots=True)
class ScoringConfig:
    """Immutable parameter set for one scoring call.

    Every group can be replaced on its own; see :meth:`with_overrides` for the
    wire shape accepted from request payloads.
    """

    calibration: CalibrationConfig = field(default_factory=CalibrationConfig)
    ri: RiskConfig = field(default_factory=RiskConfig)
    cross_lift: CrossLiftConfig = field(default_factory=CrossLiftConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)

    def with_overrides(self, overrides: Dict[str, Any] | None) -> "ScoringConfig":
        """Return a copy with wire-named overrides applied group by group.

        A field missing from a supplied group, or sent as null, keeps this
        config's value. Values are taken as-is; callers are expected to have
        checked types (see ``services.validators.parse_config_overrides``).
        """
        if not overrides:
            return self
        calibration = overrides.get("calibration") or {}
        ri = overrides.get("ri") or {}
        cross_lift = overrides.get("crossLift") or {}
        validation = overrides.get("validation") or {}
        return ScoringConfig(
            calibration=CalibrationConfig(
                k=float(_override(calibration, "k", self.calibration.k)),
                max_value=float(_override(calibration, "max", self.calibration.max_value)),
            ),
            ri=RiskConfig(
                global_multiplier=float(_override(ri, "globalMultiplier", self.ri.global_multiplier)),
            ),
            cross_lift=CrossLiftConfig(
                enabled=bool(_override(cross_lift, "enabled", self.cross_lift.enabled)),
                alpha=float(_override(cross_lift, "alpha", self.cross_lift.alpha)),
            ),
            validation=ValidationConfig(
                strict=bool(_override(validation, "strict", self.validation.strict)),
                duplicate_rows=str(_override(validation, "duplicateRows", self.validation.duplicate_rows)),
            ),
        )

    def to_wire(self) -> Dict[str, Any]:
        return {
            "calibration": {"k": self.calibration.k, "max": self.calibration.max_value},
            "ri": {"globalMultiplier": self.ri.global_multiplier},
            "crossLift": {"enabled": self.cross_lift.enabled, "alpha": self.cross_lift.alpha},
            "validation": {
                "strict": self.validation.strict,
                "duplicateRows": self.validation.duplicate_rows,
            },
        }


DEFAULT_SCORING_CONFIG = ScoringConfig()


@dataclass(slots=True)
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8160


@dataclass(slots=True)
class AppConfig:
    base_dir: Path
    profile: str
    log_level: str = "INFO"
    log_json: bool = False
    server: ServerConfig = field(default_factory=ServerConfig)
    scoring: ScoringConfig = DEFAULT_SCORING_CONFIG
    extras: Dict[str, Any] = field(default_factory=dict)


def _load_dotenv(base_dir: Path) -> None:
    env_path = base_dir / ".env"
    if env_path.exists():
        load_dotenv(env_path)


def load_config(base_dir: Path | None = None) -> AppConfig:
    root = base_dir or Path(os.getenv("LMI_HOME", Path.cwd()))
    _load_dotenv(root)

    defaults = DEFAULT_SCORING_CONFIG
    scoring = replace(
        defaults,
        calibration=CalibrationConfig(
            k=_env_float("LMI_CALIBRATION_K", defaults.calibration.k) or defaults.calibration.k,
            max_value=_env_float("LMI_CALIBRATION_MAX", defaults.calibration.max_value),
        ),
        ri=RiskConfig(
            global_multiplier=_env_float("LMI_RI_MULTIPLIER", defaults.ri.global_multiplier),
        ),
        cross_lift=CrossLiftConfig(
            enabled=_env_bool("LMI_CROSSLIFT_ENABLED", defaults.cross_lift.enabled),
            alpha=_env_float("LMI_CROSSLIFT_ALPHA", defaults.cross_lift.alpha),
        ),
        validation=ValidationConfig(
            strict=_env_bool("LMI_STRICT_VALIDATION", defaults.validation.strict),
            duplicate_rows=defaults.validation.duplicate_rows,
        ),
    )
    server = ServerConfig(
        host=_env("LMI_HOST", "0.0.0.0"),
        port=_env_int("LMI_PORT", 8160),
    )
    extras = {
        "instance_id": _env("LMI_INSTANCE_ID", "lmi-local"),
        "environment": _env("LMI_ENV", "development"),
    }
    return AppConfig(
        base_dir=root,
        profile=_env("LMI_PROFILE", "default"),
        log_level=_env("LMI_LOG_LEVEL", "INFO").upper(),
        log_json=_env_bool("LMI_LOG_JSON", False),
        server=server,
        scoring=scoring,
        extras=extras,
    )
