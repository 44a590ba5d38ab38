"""``appcore fetch`` — resolve one resource through the search path."""

import argparse
import sys

from appcore.app import AppCore
from appcore.config import AppConfig
from appcore.errors import ConfigurationError


def run_fetch(args: argparse.Namespace) -> None:
    """Print the resolved resource, or exit 1 when no provider has it."""
    try:
        app = AppCore(AppConfig(user_dir=args.user_dir))
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    content = app.fetch_resource(args.file, compress=not args.raw)
    if content is None:
        print(f"Error: resource {args.file!r} not found", file=sys.stderr)
        raise SystemExit(1)

    sys.stdout.write(content)
    if not args.raw:
        sys.stdout.write("\n")
