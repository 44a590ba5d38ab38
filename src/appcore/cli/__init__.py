"""AppCore CLI — resolve resources, render the bootstrap page, serve an app.

Entry point registered as ``appcore`` in ``pyproject.toml``::

    [project.scripts]
    appcore = "appcore.cli:main"
"""

import argparse
import logging
import sys

_LOG_LEVELS = ("debug", "info", "warning", "error")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``appcore`` command."""
    parser = argparse.ArgumentParser(
        prog="appcore",
        description="AppCore — resource resolution and request dispatch for browser apps.",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="warning",
        help="Logging verbosity (default: warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- appcore fetch ----------------------------------------------------
    fetch_parser = subparsers.add_parser("fetch", help="Resolve a resource and print it")
    fetch_parser.add_argument("file", help="Resource name (e.g. index or lib_ClientCore.html)")
    fetch_parser.add_argument(
        "--raw",
        action="store_true",
        help="Print the raw content instead of gzip + base64",
    )
    fetch_parser.add_argument(
        "--user-dir",
        default=None,
        help="Directory searched after the built-in resources",
    )

    # -- appcore render ---------------------------------------------------
    render_parser = subparsers.add_parser("render", help="Render the bootstrap page")
    render_parser.add_argument("page", help="Main page the bootstrap loads")
    render_parser.add_argument("--title", default=None, help="Application title")
    render_parser.add_argument("--version", default=None, help="Application version")
    render_parser.add_argument(
        "--dep",
        action="append",
        default=[],
        help="Dependency resource to load before the page (repeatable)",
    )
    render_parser.add_argument(
        "--template-dir",
        default=None,
        help="Directory with templates overriding the built-ins",
    )

    # -- appcore serve ----------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Serve an AppCore over ASGI")
    serve_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    serve_parser.add_argument("--host", default=None, help="Bind host address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port number")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "fetch":
        from appcore.cli._fetch import run_fetch

        run_fetch(args)
    elif args.command == "render":
        from appcore.cli._render import run_render

        run_render(args)
    elif args.command == "serve":
        from appcore.cli._serve import run_serve

        run_serve(args)
