"""Life Morale Index scoring service."""

from .app import create_app
from .bootstrap import build_context
from .engine import score_lmi

__all__ = ["build_context", "create_app", "score_lmi"]
