"""Request dispatcher — resource fetches and named function calls.

Every request carries a *mode*. Two modes exist:

- ``"source"``: fetch a resource through the ``ResourceResolver``
- any name found in the caller's function table: call that function

Anything else is a silent no-op that returns ``None``.

The function table is owned by the caller. It can be a mapping or any
object whose attributes are the business functions (a module, a class
instance)::

    import logic

    dispatcher = RequestDispatcher(resolver)
    request = DispatchRequest("saveItem", ["sku-1", 3], kind=RequestKind.RPC)
    dispatcher.run(request, logic)    # logic.saveItem("sku-1", 3)

The dispatcher trusts its caller: any callable the table exposes under
the requested name can be invoked.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from appcore.errors import DispatchError
from appcore.http.response import Response
from appcore.resolver import ResourceResolver

logger = logging.getLogger("appcore.dispatch")

SOURCE_MODE = "source"

# Caller-supplied table of business functions
type FunctionTable = Mapping[str, Callable[..., Any]] | object


class RequestKind(StrEnum):
    """How the caller wants the result framed."""

    STANDARD = "standard"  # Wrap resource fetches in a text Response
    RPC = "RPC"  # Return values as-is


@dataclass(frozen=True, slots=True)
class DispatchRequest:
    """An incoming request, already decoded by the transport."""

    mode: str | None
    args: Any = None
    kind: RequestKind = RequestKind.STANDARD


def parse_compress_flag(value: Any) -> bool:
    """Only ``"false"`` and ``False`` disable compression. Everything else enables it."""
    return value != "false" and value is not False


def lookup_function(functions: FunctionTable, name: str) -> Callable[..., Any] | None:
    """Return the callable registered under *name*, or ``None``.

    Raises:
        DispatchError: Reading *name* from the table raised something other
            than ``AttributeError`` (a property or ``__getattr__`` that fails).
    """
    try:
        if isinstance(functions, Mapping):
            candidate = functions.get(name)
        else:
            candidate = getattr(functions, name, None)
    except Exception as exc:
        logger.error("RPC Error (%s): lookup failed: %r", name, exc, exc_info=exc)
        raise DispatchError(name, exc) from exc
    return candidate if callable(candidate) else None


class RequestDispatcher:
    """Route a ``DispatchRequest`` to the resolver or the function table."""

    __slots__ = ("_resolver",)

    def __init__(self, resolver: ResourceResolver) -> None:
        self._resolver = resolver

    @property
    def resolver(self) -> ResourceResolver:
        return self._resolver

    def run(self, request: DispatchRequest, functions: FunctionTable) -> Any:
        """Dispatch *request*.

        Returns:
            For ``"source"``: the resource text (or ``None``) for RPC
            requests, otherwise a text ``Response`` whose body is empty
            when the resource was not found.
            For a function mode: the function's return value.
            For an unknown mode: ``None``.

        Raises:
            DispatchError: The dispatched function raised, or reading it
                from the function table did.
        """
        if request.mode == SOURCE_MODE:
            return self._fetch_source(request)

        if request.mode:
            handler = lookup_function(functions, request.mode)
            if handler is not None:
                return self._invoke(request.mode, handler, request.args)

        logger.debug("No handler for mode %r", request.mode)
        return None

    def _fetch_source(self, request: DispatchRequest) -> str | Response | None:
        args = request.args if isinstance(request.args, Mapping) else {}
        compress = parse_compress_flag(args.get("compress"))
        content = self._resolver.fetch_resource(args.get("file"), compress)

        if request.kind is RequestKind.RPC:
            return content
        return Response.text_output(content or "")

    def _invoke(self, mode: str, handler: Callable[..., Any], args: Any) -> Any:
        # Only lists and tuples are spread into positional arguments
        positional = list(args) if isinstance(args, (list, tuple)) else []
        try:
            return handler(*positional)
        except Exception as exc:
            logger.error("RPC Error (%s): %r", mode, exc, exc_info=exc)
            raise DispatchError(mode, exc) from exc
