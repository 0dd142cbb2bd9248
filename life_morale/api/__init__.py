"""HTTP surface for the Life Morale Index service."""

from .routes import create_blueprint

__all__ = ["create_blueprint"]
