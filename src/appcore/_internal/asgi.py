"""Typed ASGI definitions.

Replaces the standard Scope = MutableMapping[str, Any] with typed
dataclasses for internal use. Users never see these.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from dataclasses import dataclass
from typing import Any, TypeAlias
from urllib.parse import parse_qs

# Raw ASGI types (per the ASGI 3.0 interface)
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class HTTPScope:
    """Typed HTTP scope parsed from raw ASGI scope dict."""

    method: str
    path: str
    query_string: bytes
    root_path: str
    headers: tuple[tuple[bytes, bytes], ...]

    @classmethod
    def from_scope(cls, scope: Scope) -> "HTTPScope":
        """Parse raw ASGI scope into typed object."""
        return cls(
            method=scope["method"],
            path=scope["path"],
            query_string=scope.get("query_string", b""),
            root_path=scope.get("root_path", ""),
            headers=tuple(scope.get("headers", ())),
        )

    @property
    def route(self) -> str:
        """Request path relative to the mount point, without a trailing slash."""
        path = self.path
        if self.root_path and path.startswith(self.root_path):
            path = path[len(self.root_path) :]
        return "/" + path.strip("/")

    def query(self) -> dict[str, str]:
        """Query parameters, first value wins."""
        parsed = parse_qs(self.query_string.decode("latin-1"), keep_blank_values=True)
        return {key: values[0] for key, values in parsed.items()}


async def read_body(receive: Receive) -> bytes:
    """Consume the full request body from *receive*."""
    chunks: list[bytes] = []
    while True:
        message = await receive()
        if message["type"] == "http.disconnect":
            break
        body = message.get("body", b"")
        if body:
            chunks.append(body)
        if not message.get("more_body", False):
            break
    return b"".join(chunks)
