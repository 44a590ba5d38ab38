"""AppCore exception hierarchy.

Shared across the resolver, dispatcher, and ASGI adapter so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class AppCoreError(Exception):
    """Base for all appcore-specific errors."""


class ConfigurationError(AppCoreError):
    """Raised when the core is wired with an invalid collaborator.

    Raised synchronously during construction, before any resource is
    resolved. There is no partially-built fallback.
    """


class DispatchError(AppCoreError):
    """A dispatched business function raised.

    Keeps the mode name and the original exception. The original is also
    chained as ``__cause__`` by the dispatcher.
    """

    def __init__(self, mode: str, original: BaseException) -> None:
        self.mode = mode
        self.original = original
        super().__init__(f"RPC Error ({mode}): {original}")


@dataclass(frozen=True, slots=True)
class HTTPError(AppCoreError):
    """An error that maps directly to an HTTP status code.

    Raised by the ASGI adapter for malformed requests. The handler
    catches these and renders a JSON error body with the status.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class BadRequest(HTTPError):  # noqa: N818
    """400 — the request body or arguments could not be decoded."""

    def __init__(self, detail: str = "Bad Request") -> None:
        super().__init__(status=400, detail=detail)


class NotFound(HTTPError):  # noqa: N818
    """404 — no endpoint matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405 — endpoint exists but not for this HTTP method."""

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )
