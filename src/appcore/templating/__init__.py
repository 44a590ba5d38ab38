"""Kida templating for the bootstrap page."""

from appcore.templating.bootstrap import (
    BOOTSTRAP_TEMPLATE,
    HtmlOutput,
    bootstrap_context,
    render_bootstrap,
)
from appcore.templating.integration import create_environment

__all__ = [
    "BOOTSTRAP_TEMPLATE",
    "HtmlOutput",
    "bootstrap_context",
    "create_environment",
    "render_bootstrap",
]
