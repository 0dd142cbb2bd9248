"""Flask blueprint exposing the scoring engine."""

from __future__ import annotations

import logging

from flask import Blueprint, request

from ..engine import LifeMoraleEngine
from . import schemas

LOGGER = logging.getLogger("life_morale.api")


def _precision():
    raw = request.args.get("precision")
    if raw is None or raw == "":
        return None
    try:
        return max(0, int(raw))
    except ValueError:
        return None


def create_blueprint(engine: LifeMoraleEngine) -> Blueprint:
    bp = Blueprint("lmi_api", __name__)

    @bp.route("/health", methods=["GET"])
    def health():
        return schemas.success({"status": "ok"}).to_response()

    @bp.route("/defaults", methods=["GET"])
    def defaults():
        result = engine.defaults()
        return schemas.success(result.payload).to_response()

    @bp.route("/score", methods=["POST"])
    def score():
        payload = request.get_json(force=True, silent=True)
        if payload is None:
            LOGGER.warning("Score request with unreadable JSON body")
            return schemas.failure("Invalid request").to_response()
        result = engine.score(payload)
        if not result.ok:
            return schemas.failure(result.error or "Invalid request").to_response()
        return schemas.success(result.payload, _precision()).to_response()

    return bp
