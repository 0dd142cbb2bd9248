"""Logging utilities for the Life Morale Index service."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict

DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


@dataclass(slots=True)
class LoggingConfig:
    level: int | str = logging.INFO
    fmt: str = DEFAULT_FORMAT
    json_output: bool = False


class JsonFormatter(logging.Formatter):
    """Formatter emitting one JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        data = {
            "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False)


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if isinstance(resolved, str):  # unknown name returns string
        return logging.INFO
    return resolved


def setup_logging(config: LoggingConfig | None = None) -> Dict[str, logging.Logger]:
    cfg = config or LoggingConfig()
    level = _resolve_level(cfg.level)
    logging.basicConfig(level=level, format=cfg.fmt)
    root = logging.getLogger()
    root.setLevel(level)
    if cfg.json_output:
        for handler in root.handlers:
            handler.setFormatter(JsonFormatter())
    return {
        "lmi": logging.getLogger("life_morale"),
        "engine": logging.getLogger("life_morale.engine"),
        "scoring": logging.getLogger("life_morale.scoring"),
        "api": logging.getLogger("life_morale.api"),
    }
