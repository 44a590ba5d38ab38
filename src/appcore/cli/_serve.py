"""``appcore serve``: run an AppCore under the pounce ASGI server."""

import argparse
import sys

from appcore.cli._resolve import resolve_app


def run_serve(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and start the server."""
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    from appcore.server.dev import run_server

    run_server(
        app,
        args.host or app.config.host,
        args.port or app.config.port,
        reload=app.config.debug,
        log_level=app.config.log_level,
        app_path=args.app,
    )
