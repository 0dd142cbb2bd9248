"""Flask app entry point for the Life Morale Index service."""

from __future__ import annotations

from pathlib import Path

from flask import Flask

from .api.routes import create_blueprint
from .bootstrap import build_context


def create_app(base_dir: Path | None = None) -> Flask:
    ctx = build_context(base_dir)
    app = Flask(__name__)
    app.config["LMI_CONFIG"] = ctx.config
    app.register_blueprint(create_blueprint(ctx.engine), url_prefix="/lmi")
    return app


if __name__ == "__main__":
    app = create_app()
    cfg = app.config["LMI_CONFIG"]
    app.run(host=cfg.server.host, port=cfg.server.port)
