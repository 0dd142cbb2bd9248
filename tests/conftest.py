"""Shared pytest fixtures for the Life Morale Index test suite.

Provides answer and time-map factories plus a Flask test application so
test modules can focus on behaviour rather than payload boilerplate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List

import pytest

from life_morale.models import Answer


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_lmi_env(monkeypatch):
    """Drop service env overrides so every test starts from built-in defaults."""
    for key in list(os.environ):
        if key.startswith("LMI_"):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Payload factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_answers():
    """Factory for 24 answers with every item scored ``score``.

    Usage:
        answers = make_answers(10, overrides={0: Answer(score=1, note="job")})
    """

    def _factory(score: float | None = 10, scenario: float | None = None, overrides: Dict[int, Answer] | None = None,
                 count: int = 24) -> List[Answer]:
        answers = [Answer(score=score, scenario_score=scenario) for _ in range(count)]
        for index, answer in (overrides or {}).items():
            answers[index] = answer
        return answers

    return _factory


@pytest.fixture
def wire_answers():
    """Same as ``make_answers`` but in request-payload shape."""

    def _factory(score: float | None = 10, **extra: Any) -> List[Dict[str, Any]]:
        item: Dict[str, Any] = {"score": score}
        item.update(extra)
        return [dict(item) for _ in range(24)]

    return _factory


@pytest.fixture
def full_week() -> List[Dict[str, Any]]:
    """All nine categories, 168 hours in total, every RI neutral."""
    return [
        {"category": "Sleep", "hours": 56, "ri": 5},
        {"category": "Work", "hours": 40, "ri": 5},
        {"category": "Commute", "hours": 5, "ri": 5},
        {"category": "Relationships", "hours": 20, "ri": 5},
        {"category": "Leisure", "hours": 15, "ri": 5},
        {"category": "Gym", "hours": 5, "ri": 5},
        {"category": "Chores", "hours": 10, "ri": 5},
        {"category": "Growth", "hours": 7, "ri": 5},
        {"category": "Other", "hours": 10, "ri": 5},
    ]


# ---------------------------------------------------------------------------
# Flask
# ---------------------------------------------------------------------------


@pytest.fixture
def app(tmp_path: Path):
    """Flask application wired through the regular bootstrap path."""
    from life_morale.app import create_app

    flask_app = create_app(tmp_path)
    flask_app.config.update({"TESTING": True})
    return flask_app


@pytest.fixture
def client(app):
    """Flask test client for issuing HTTP requests."""
    return app.test_client()
