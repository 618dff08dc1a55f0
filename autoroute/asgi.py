"""
ASGI adapter - Bridges the ASGI protocol to a Router.

Each HTTP request becomes a Context, is dispatched through the router,
and the Context's response fields are written back. Routing faults map
to their HTTP status codes:

    RouteNotFoundFault          404
    MethodNotAllowedFault       405 (with Allow header)
    TrailingSlashRedirectFault  301 for GET, 307 otherwise
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, List, Tuple
import logging

from .context import Context
from .faults import (
    MethodNotAllowedFault,
    RouteNotFoundFault,
    TrailingSlashRedirectFault,
)
from .router import Router

Scope = Dict[str, Any]
Receive = Callable[[], Awaitable[Dict[str, Any]]]
Send = Callable[[Dict[str, Any]], Awaitable[None]]

NOT_FOUND_BODY = "404 page not found"
METHOD_NOT_ALLOWED_BODY = "405 method not allowed"
INTERNAL_ERROR_BODY = "500 internal server error"


class ASGIAdapter:
    """
    ASGI application wrapping a Router.

    Usage::

        router = Router()
        attach_controller(router, ControllerUsers())
        app = ASGIAdapter(router)     # uvicorn module:app
    """

    __slots__ = ("router", "logger")

    def __init__(self, router: Router):
        self.router = router
        self.logger = logging.getLogger("autoroute.asgi")

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        scope_type = scope["type"]

        if scope_type == "http":
            await self.handle_http(scope, receive, send)
        elif scope_type == "lifespan":
            await self.handle_lifespan(scope, receive, send)
        else:
            self.logger.warning(f"Unsupported ASGI scope type: {scope_type}")

    async def handle_lifespan(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Acknowledge startup and shutdown; registration happens before serving."""
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                self.logger.info(f"Serving {len(self.router.routes)} route(s)")
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    async def handle_http(self, scope: Scope, receive: Receive, send: Send) -> None:
        ctx = Context(
            method=scope["method"].upper(),
            path=scope.get("path") or "/",
            query_string=scope.get("query_string", b"").decode("latin-1"),
            headers=_decode_headers(scope.get("headers", [])),
            body=await _read_body(receive),
        )

        try:
            await self.router.dispatch(ctx)
        except TrailingSlashRedirectFault as fault:
            location = fault.location
            if ctx.query_string:
                location = f"{location}?{ctx.query_string}"
            self._redirect(ctx, location)
        except MethodNotAllowedFault as fault:
            ctx.string(405, METHOD_NOT_ALLOWED_BODY)
            ctx.response_headers["allow"] = ", ".join(fault.allowed)
        except RouteNotFoundFault:
            ctx.string(404, NOT_FOUND_BODY)
        except Exception:
            self.logger.exception(f"Unhandled error in {ctx.method} {ctx.path}")
            ctx.response_headers.clear()
            ctx.string(500, INTERNAL_ERROR_BODY)

        try:
            headers = _encode_headers(ctx)
        except UnicodeEncodeError:
            self.logger.exception(f"Unencodable response header in {ctx.method} {ctx.path}")
            ctx.response_headers.clear()
            ctx.string(500, INTERNAL_ERROR_BODY)
            headers = _encode_headers(ctx)

        if ctx.status >= 500:
            self.logger.warning(f"{ctx.method} {ctx.path} -> {ctx.status}")

        await self._send_response(ctx, headers, send)

    @staticmethod
    def _redirect(ctx: Context, location: str) -> None:
        ctx.response_headers["location"] = location
        if ctx.method == "GET":
            ctx.status = 301
            ctx.response_headers["content-type"] = "text/html; charset=utf-8"
            ctx.response_body = f'<a href="{location}">Moved Permanently</a>.\n\n'.encode("utf-8")
        else:
            ctx.status = 307
            ctx.response_body = b""

    @staticmethod
    async def _send_response(ctx: Context, headers: List[Tuple[bytes, bytes]], send: Send) -> None:
        body = ctx.response_body if ctx.method != "HEAD" else b""
        await send({
            "type": "http.response.start",
            "status": ctx.status,
            "headers": headers,
        })
        await send({
            "type": "http.response.body",
            "body": body,
        })


def _encode_headers(ctx: Context) -> List[Tuple[bytes, bytes]]:
    headers = [
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in ctx.response_headers.items()
        if name.lower() != "content-length"
    ]
    headers.append((b"content-length", str(len(ctx.response_body)).encode("latin-1")))
    return headers


def _decode_headers(raw: List[Tuple[bytes, bytes]]) -> Dict[str, str]:
    headers: Dict[str, str] = {}
    for name, value in raw:
        key = name.decode("latin-1").lower()
        val = value.decode("latin-1")
        headers[key] = f"{headers[key]}, {val}" if key in headers else val
    return headers


async def _read_body(receive: Receive) -> bytes:
    chunks = []
    while True:
        message = await receive()
        if message["type"] != "http.request":
            break
        chunks.append(message.get("body", b""))
        if not message.get("more_body", False):
            break
    return b"".join(chunks)
