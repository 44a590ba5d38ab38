"""Payload compression for resource delivery.

Resources travel to the browser loader as gzip-compressed, base64-encoded
text. The client inflates them; this side only ever compresses.
"""

import base64
import gzip


def compress(raw: str) -> str:
    """Gzip *raw* and return the compressed bytes as base64 text.

    The gzip header timestamp is pinned to zero so the same input always
    yields the same output.
    """
    payload = gzip.compress(raw.encode("utf-8"), mtime=0)
    return base64.b64encode(payload).decode("ascii")
