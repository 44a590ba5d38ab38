"""ASGI request handling — the transport side of AppCore.

Endpoints::

    GET  /                          bootstrap page (``?page=`` overrides main page)
    GET  /?mode=source&file=NAME    resource text (gzip + base64 unless compress=false)
    GET  /?mode=NAME&args=[...]     call a business function, JSON result
    POST /rpc  {"mode", "args"}     RPC call, JSON ``{"result": ...}``

HEAD is accepted for the page and ``source`` requests only.

Dispatch failures become a 500 JSON body; malformed requests map to
``HTTPError`` statuses. Everything else is decided by the core.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from appcore._internal.asgi import HTTPScope, Receive, Scope, Send, read_body
from appcore.dispatch import SOURCE_MODE, DispatchRequest, RequestKind
from appcore.errors import BadRequest, DispatchError, HTTPError, MethodNotAllowed, NotFound
from appcore.http.response import Response
from appcore.server.sender import send_response

if TYPE_CHECKING:
    from appcore.app import AppCore

logger = logging.getLogger("appcore.server")

_PAGE_METHODS = frozenset({"GET", "HEAD"})
_RPC_METHODS = frozenset({"POST"})
_CALL_METHODS = frozenset({"GET"})


async def handle_request(app: AppCore, scope: Scope, receive: Receive, send: Send) -> None:
    """Entry point for one ASGI connection."""
    if scope["type"] == "lifespan":
        await _handle_lifespan(receive, send)
        return
    if scope["type"] != "http":
        return

    http = HTTPScope.from_scope(scope)
    try:
        response = await _route(app, http, receive)
    except DispatchError as exc:
        response = Response.json({"error": str(exc), "mode": exc.mode}, status=500)
    except HTTPError as exc:
        response = Response.json({"error": exc.detail}, status=exc.status)
        if exc.headers:
            response = response.with_headers(dict(exc.headers))
    except Exception:
        logger.exception("Unhandled error for %s %s", http.method, http.path)
        response = Response.json({"error": "Internal Server Error"}, status=500)

    await send_response(response, send, head=http.method == "HEAD")


async def _route(app: AppCore, http: HTTPScope, receive: Receive) -> Response:
    route = http.route
    if route == "/":
        if http.method not in _PAGE_METHODS:
            raise MethodNotAllowed(_PAGE_METHODS)
        query = http.query()
        if http.method == "HEAD" and query.get("mode", SOURCE_MODE) != SOURCE_MODE:
            # HEAD never invokes business functions
            raise MethodNotAllowed(_CALL_METHODS)
        return _handle_query(app, query)
    if route == "/rpc":
        if http.method not in _RPC_METHODS:
            raise MethodNotAllowed(_RPC_METHODS)
        payload = _decode_json(await read_body(receive))
        return _handle_rpc(app, payload)
    raise NotFound()


def _handle_query(app: AppCore, query: dict[str, str]) -> Response:
    mode = query.get("mode")
    if mode is None:
        return app.render(query.get("page") or app.config.main_page).to_response()

    if mode == SOURCE_MODE:
        args: Any = {"file": query.get("file"), "compress": query.get("compress")}
    else:
        args = _decode_json(query["args"].encode("utf-8")) if "args" in query else []

    result = app.run(DispatchRequest(mode, args, RequestKind.STANDARD))
    if isinstance(result, Response):
        return result
    return Response.json({"result": result})


def _handle_rpc(app: AppCore, payload: Any) -> Response:
    if not isinstance(payload, dict):
        raise BadRequest("RPC body must be a JSON object")
    mode = payload.get("mode")
    if mode is not None and not isinstance(mode, str):
        raise BadRequest("'mode' must be a string")
    result = app.run(DispatchRequest(mode, payload.get("args"), RequestKind.RPC))
    return Response.json({"result": result})


def _decode_json(raw: bytes) -> Any:
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise BadRequest(f"Malformed JSON: {exc}") from exc


async def _handle_lifespan(receive: Receive, send: Send) -> None:
    # Nothing to set up: acknowledge startup and shutdown
    while True:
        message = await receive()
        if message["type"] == "lifespan.startup":
            await send({"type": "lifespan.startup.complete"})
        elif message["type"] == "lifespan.shutdown":
            await send({"type": "lifespan.shutdown.complete"})
            return
