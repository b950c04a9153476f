from __future__ import annotations

import logging
import typing as t

from fresh._fresh import is_fresh
from fresh._headers import Headers

# Configure logger for this module
logger = logging.getLogger(__name__)

# RFC 9110 Section 15.4.5: a 304 carries no content, so fields describing it are dropped
NOT_MODIFIED_STRIPPED_HEADERS = frozenset(
    [
        b"content-type",
        b"content-length",
        b"content-encoding",
        b"transfer-encoding",
    ]
)


class _ASGIScope(t.TypedDict, total=False):
    """ASGI HTTP scope type."""

    type: str
    asgi: dict[str, str]
    http_version: str
    method: str
    scheme: str
    path: str
    query_string: bytes
    root_path: str
    headers: list[tuple[bytes, bytes]]
    server: tuple[str, int | None] | None
    client: tuple[str, int] | None
    state: dict[str, t.Any]
    extensions: dict[str, t.Any]


_Scope = _ASGIScope
_Receive = t.Callable[[], t.Awaitable[dict[str, t.Any]]]
_Send = t.Callable[[dict[str, t.Any]], t.Awaitable[None]]
_ASGIApp = t.Callable[[_Scope, _Receive, _Send], t.Awaitable[None]]


def _is_candidate_status(status: int) -> bool:
    return 200 <= status < 300 or status == 304


class ConditionalGetMiddleware:
    """
    ASGI middleware that answers conditional requests with 304 Not Modified.

    The wrapped application keeps producing full responses. When the
    response carries an ETag or Last-Modified validator that satisfies the
    request's If-None-Match or If-Modified-Since header, the middleware
    replaces it with a bodiless 304 response.

    This implementation is thread-safe: all per-request state lives in
    closures created for each call.

    Args:
        app: The ASGI application to wrap.
        methods: Request methods eligible for a 304 response. Defaults to GET and HEAD.

    Example:
        ```python
        from fresh.asgi import ConditionalGetMiddleware

        app = ConditionalGetMiddleware(app=my_asgi_app)
        ```
    """

    def __init__(
        self,
        app: _ASGIApp,
        *,
        methods: t.Iterable[str] = ("GET", "HEAD"),
    ) -> None:
        self.app = app
        self.methods = frozenset(method.upper() for method in methods)

        logger.info(
            "Initialized ConditionalGetMiddleware with methods=%s",
            ", ".join(sorted(self.methods)),
        )

    async def __call__(self, scope: _Scope, receive: _Receive, send: _Send) -> None:
        """
        Handle an ASGI request.

        Args:
            scope: The ASGI scope dictionary.
            receive: The ASGI receive callable.
            send: The ASGI send callable.
        """
        if scope["type"] != "http":
            logger.debug("Skipping non-HTTP request: type=%s", scope["type"])
            await self.app(scope, receive, send)
            return

        method = scope.get("method", "GET").upper()
        path = scope.get("path", "/")

        if method not in self.methods:
            logger.debug("Skipping request with method=%s path=%s", method, path)
            await self.app(scope, receive, send)
            return

        request_headers = Headers.from_raw(scope.get("headers", []))
        not_modified = False

        async def inner_send(message: dict[str, t.Any]) -> None:
            nonlocal not_modified

            if message["type"] == "http.response.start":
                status = message["status"]
                raw_headers = message.get("headers", [])

                if _is_candidate_status(status) and is_fresh(request_headers, Headers.from_raw(raw_headers)):
                    not_modified = True
                    logger.info("Responding 304 Not Modified: method=%s path=%s status=%d", method, path, status)
                    await send(
                        {
                            "type": "http.response.start",
                            "status": 304,
                            "headers": [
                                (key, value)
                                for key, value in raw_headers
                                if key.lower() not in NOT_MODIFIED_STRIPPED_HEADERS
                            ],
                        }
                    )
                    return

                logger.debug("Passing response through: method=%s path=%s status=%d", method, path, status)
                await send(message)
            elif message["type"] == "http.response.body" and not_modified:
                if not message.get("more_body", False):
                    await send({"type": "http.response.body", "body": b"", "more_body": False})
            else:
                await send(message)

        try:
            await self.app(scope, receive, inner_send)
        except Exception as e:
            logger.error(
                "Error calling wrapped application: method=%s path=%s error=%s",
                method,
                path,
                str(e),
                exc_info=True,
            )
            raise
