"""``appcore render`` — print the bootstrap page for a main page."""

import argparse
import sys

from appcore.app import AppCore
from appcore.config import AppConfig


def run_render(args: argparse.Namespace) -> None:
    """Render the bootstrap page and write the HTML to stdout."""
    app = AppCore(AppConfig(template_dir=args.template_dir))
    options = {
        "version": args.version,
        "appTitle": args.title,
        "dependencies": args.dep,
    }
    sys.stdout.write(app.render(args.page, options).content())
