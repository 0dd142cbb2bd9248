"""CLI for the Life Morale Index service."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from .api.schemas import round_floats
from .bootstrap import build_context


def _print(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _read_payload(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    with open(source, "r", encoding="utf-8") as fh:
        return json.load(fh)


def with_context(func):
    def wrapper(args):
        ctx = build_context(Path(args.base_dir) if getattr(args, "base_dir", None) else None)
        return func(ctx, args)

    return wrapper


@with_context
def cmd_score(ctx, args) -> int:
    try:
        payload = _read_payload(args.input)
    except json.JSONDecodeError as exc:
        _print({"error": f"Invalid JSON: {exc}"})
        return 1
    result = ctx.engine.score(payload)
    if not result.ok:
        _print({"error": result.error})
        return 1
    _print(round_floats(result.payload, args.precision))
    return 0


@with_context
def cmd_defaults(ctx, args) -> int:
    _print(ctx.engine.defaults().payload)
    return 0


@with_context
def cmd_runserver(ctx, args) -> int:
    from .app import create_app

    app = create_app(ctx.config.base_dir)
    app.run(
        host=args.host or ctx.config.server.host,
        port=args.port or ctx.config.server.port,
    )
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Life Morale Index CLI")
    sub = parser.add_subparsers(dest="cmd", required=True)

    score = sub.add_parser("score", help="Score an input JSON file ('-' for stdin)")
    score.add_argument("input")
    score.add_argument("--precision", type=int, default=None)
    score.add_argument("--base-dir")
    score.set_defaults(func=cmd_score)

    defaults = sub.add_parser("defaults", help="Show effective scoring defaults")
    defaults.add_argument("--base-dir")
    defaults.set_defaults(func=cmd_defaults)

    runserver = sub.add_parser("runserver", help="Start HTTP server")
    runserver.add_argument("--host")
    runserver.add_argument("--port", type=int)
    runserver.add_argument("--base-dir")
    runserver.set_defaults(func=cmd_runserver)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
