"""Response envelopes for the Life Morale Index API."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict

from flask import jsonify


def iso(dt: datetime | None = None) -> str:
    dt = dt or datetime.now(timezone.utc)
    return dt.replace(microsecond=0, tzinfo=None).isoformat() + "Z"


def round_floats(value: Any, digits: int | None) -> Any:
    """Presentation rounding for nested payloads; ``None`` leaves values intact."""
    if digits is None:
        return value
    if isinstance(value, float):
        return round(value, digits)
    if isinstance(value, dict):
        return {key: round_floats(item, digits) for key, item in value.items()}
    if isinstance(value, list):
        return [round_floats(item, digits) for item in value]
    return value


@dataclass
class Envelope:
    """JSON body shared by every /lmi endpoint, plus the status it is sent with."""

    ok: bool
    payload: Dict[str, Any]
    error: str | None = None
    status: int = 200

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "payload": self.payload,
            "error": self.error,
            "timestamp": iso(),
        }

    def to_response(self):
        return jsonify(self.to_dict()), self.status


def success(payload: Dict[str, Any], digits: int | None = None) -> Envelope:
    return Envelope(ok=True, payload=round_floats(payload, digits))


def failure(message: str, status: int = 400) -> Envelope:
    return Envelope(ok=False, payload={}, error=message, status=status)
