"""Integration tests for the /lmi HTTP endpoints."""

from __future__ import annotations

import pytest

from life_morale.api import schemas


class TestScoreAPI:
    """Tests for POST /lmi/score."""

    def test_score_success_envelope(self, client, wire_answers, full_week):
        resp = client.post("/lmi/score", json={"answers": wire_answers(9), "timeMap": full_week, "ELI": 1})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["ok"] is True
        assert data["error"] is None
        assert data["timestamp"].endswith("Z")
        payload = data["payload"]
        assert payload["riAdjusted"] == pytest.approx(payload["rawLMS"])
        assert payload["finalLMI"] == pytest.approx(payload["riAdjusted"] * 0.98)
        assert len(payload["topDrainers"]) == 3

    def test_score_invalid_json(self, client):
        resp = client.post("/lmi/score", data="{not json", content_type="application/json")
        assert resp.status_code == 400
        data = resp.get_json()
        assert data["ok"] is False
        assert data["error"] == "Invalid request"

    def test_score_validation_error_message(self, client):
        resp = client.post("/lmi/score", json={"answers": [{"score": "ten"}]})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "answers[0].score must be a number"

    def test_score_strict_mode_from_payload(self, client, wire_answers):
        resp = client.post(
            "/lmi/score",
            json={"answers": wire_answers(5)[:20], "config": {"validation": {"strict": True}}},
        )
        assert resp.status_code == 400
        assert "expected 24 answers" in resp.get_json()["error"]

    def test_score_precision_rounds_floats(self, client, wire_answers):
        resp = client.post("/lmi/score?precision=2", json={"answers": wire_answers(6)})
        assert resp.status_code == 200
        payload = resp.get_json()["payload"]
        assert payload["finalLMI"] == round(payload["finalLMI"], 2)
        assert all(value == round(value, 2) for value in payload["calibrated"]["current"])

    def test_score_rejects_get(self, client):
        resp = client.get("/lmi/score")
        assert resp.status_code == 405

    def test_score_null_config_fields_use_defaults(self, client, wire_answers):
        resp = client.post(
            "/lmi/score",
            json={"answers": wire_answers(10), "config": {"calibration": {"k": None, "max": None}, "crossLift": {"alpha": None}}},
        )
        assert resp.status_code == 200
        payload = resp.get_json()["payload"]
        assert payload["calibrated"]["current"][0] == pytest.approx(8.75)

    def test_score_zero_steepness_is_rejected(self, client, wire_answers):
        resp = client.post("/lmi/score", json={"answers": wire_answers(7), "config": {"calibration": {"k": 0}}})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "config.calibration.k must not be zero"

    def test_score_oversized_number_is_rejected(self, client):
        resp = client.post("/lmi/score", json={"answers": [{"score": 10**400}]})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "answers[0].score is too large"


class TestServiceEndpoints:
    def test_health(self, client):
        resp = client.get("/lmi/health")
        assert resp.status_code == 200
        assert resp.get_json()["payload"] == {"status": "ok"}

    def test_defaults(self, client):
        resp = client.get("/lmi/defaults")
        assert resp.status_code == 200
        payload = resp.get_json()["payload"]
        assert payload["calibration"]["max"] == 8.75
        assert payload["ri"]["globalMultiplier"] == 1.0
        assert payload["crossLift"]["enabled"] is False


class TestEnvelope:
    def test_success_rounds_payload_when_digits_given(self):
        env = schemas.success({"finalLMI": 7.123456, "calibrated": {"current": [1.98765]}}, 2)
        assert env.ok is True
        assert env.status == 200
        assert env.payload == {"finalLMI": 7.12, "calibrated": {"current": [1.99]}}

    def test_failure_defaults_to_bad_request(self, app):
        env = schemas.failure("answers must be a list")
        with app.app_context():
            resp, status = env.to_response()
        assert status == 400
        body = resp.get_json()
        assert body["ok"] is False
        assert body["payload"] == {}
        assert body["error"] == "answers must be a list"
