"""Bootstrap utilities for the Life Morale Index service."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import AppConfig, load_config
from .engine import LifeMoraleEngine
from .logging_setup import LoggingConfig, setup_logging


@dataclass
class LifeMoraleContext:
    config: AppConfig
    engine: LifeMoraleEngine


def build_context(base_dir: Path | None = None) -> LifeMoraleContext:
    config = load_config(base_dir)
    setup_logging(LoggingConfig(level=config.log_level, json_output=config.log_json))
    engine = LifeMoraleEngine(config)
    return LifeMoraleContext(config=config, engine=engine)
