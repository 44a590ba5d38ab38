"""Bootstrap page rendering.

The bootstrap page is the first HTML the browser receives. It carries the
client loader plus the configuration the loader needs to fetch the real
application page (``target_main``) and its dependencies through the
``source`` mode.

``bootstrap_context()`` shapes the configuration; kida renders it;
``HtmlOutput`` holds the page-level settings (title, meta tags, frame
policy) and turns the result into a ``Response``.
"""

from __future__ import annotations

import html
import re
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from kida import Environment

from appcore.config import FrameOptions
from appcore.http.response import Response

BOOTSTRAP_TEMPLATE = "AppCoreTemplate.html"

DEFAULT_VERSION = "v1.0"
DEFAULT_APP_TITLE = "GBS App"
DEFAULT_VIEWPORT = "width=device-width, initial-scale=1"

_HEAD_OPEN = re.compile(r"<head(\s[^>]*)?>", re.IGNORECASE)


def bootstrap_context(page_name: str, config: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Build the template slots for the bootstrap page.

    Recognized options: ``version``, ``initialData``, ``appTitle``,
    ``dependencies``. Missing or empty options fall back to defaults.
    Dependencies are deduplicated, keeping first-seen order.
    """
    config = config or {}
    dependencies = config.get("dependencies") or []
    return {
        "target_main": page_name,
        "version": config.get("version") or DEFAULT_VERSION,
        "initial_data": config.get("initialData") or {},
        "app_title": config.get("appTitle") or DEFAULT_APP_TITLE,
        "dependency_list": list(dict.fromkeys(dependencies)),
    }


@dataclass(frozen=True, slots=True)
class HtmlOutput:
    """A rendered HTML page plus its page-level settings.

    Chain ``.with_*()`` calls, then call ``to_response()``::

        page = (
            HtmlOutput(body)
            .with_title("Inventory")
            .with_meta_tag("viewport", "width=device-width, initial-scale=1")
            .with_frame_options(FrameOptions.ALLOWALL)
        )
    """

    body: str
    title: str | None = None
    meta_tags: tuple[tuple[str, str], ...] = ()
    frame_options: FrameOptions = FrameOptions.SAMEORIGIN

    def with_title(self, title: str) -> HtmlOutput:
        """Return a new HtmlOutput with the page title set."""
        return replace(self, title=title)

    def with_meta_tag(self, name: str, content: str) -> HtmlOutput:
        """Return a new HtmlOutput with an additional ``<meta name=...>`` tag."""
        return replace(self, meta_tags=(*self.meta_tags, (name, content)))

    def with_frame_options(self, mode: FrameOptions) -> HtmlOutput:
        """Return a new HtmlOutput with a different frame-embedding policy."""
        return replace(self, frame_options=mode)

    def head_html(self) -> str:
        """The ``<title>`` and ``<meta>`` elements for the document head."""
        parts: list[str] = []
        if self.title is not None:
            parts.append(f"<title>{html.escape(self.title)}</title>")
        parts.extend(
            f'<meta name="{html.escape(name, quote=True)}" content="{html.escape(content, quote=True)}">'
            for name, content in self.meta_tags
        )
        return "".join(parts)

    def content(self) -> str:
        """The final document, with head elements inserted after ``<head>``."""
        head = self.head_html()
        if not head:
            return self.body
        match = _HEAD_OPEN.search(self.body)
        if match is None:
            return head + self.body
        return self.body[: match.end()] + head + self.body[match.end() :]

    def to_response(self) -> Response:
        """Build the HTML response, applying the frame-embedding policy."""
        response = Response(body=self.content())
        if self.frame_options is FrameOptions.ALLOWALL:
            return response.with_header("Content-Security-Policy", "frame-ancestors *")
        return response.with_header("X-Frame-Options", str(self.frame_options))


def render_bootstrap(
    env: Environment,
    page_name: str,
    config: Mapping[str, Any] | None = None,
    *,
    viewport: str = DEFAULT_VIEWPORT,
    frame_options: FrameOptions = FrameOptions.ALLOWALL,
) -> HtmlOutput:
    """Render the bootstrap page that loads *page_name* on the client."""
    context = bootstrap_context(page_name, config)
    template = env.get_template(BOOTSTRAP_TEMPLATE)
    body = template.render(context)
    return (
        HtmlOutput(body)
        .with_title(context["app_title"])
        .with_meta_tag("viewport", viewport)
        .with_frame_options(frame_options)
    )
