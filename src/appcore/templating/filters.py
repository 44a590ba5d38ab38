"""Template filters registered on the appcore kida environment."""

import json
from typing import Any

from kida.template import Markup


def json_data(value: Any) -> Markup:
    """Serialize *value* as JSON that is safe inside a ``<script>`` element.

    ``<``, ``>`` and ``&`` are emitted as unicode escapes, so a string
    containing ``</script>`` cannot close the element early::

        <script>window.__APPCORE__ = {{ config | json_data }};</script>
    """
    payload = json.dumps(value, separators=(",", ":"), ensure_ascii=True, default=str)
    payload = payload.replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")
    return Markup(payload)


BUILTIN_FILTERS: dict[str, Any] = {
    "json_data": json_data,
}
