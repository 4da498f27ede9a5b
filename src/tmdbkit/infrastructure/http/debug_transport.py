"""httpx transport that logs full request and response bodies."""

from __future__ import annotations

import time

import httpx

from tmdbkit.infrastructure.logging.setup import get_logger

from .auth_transport import PARAM_API_KEY

log = get_logger(__name__)

_REDACTED = "***"


def redact_url(url: httpx.URL, param_name: str = PARAM_API_KEY) -> str:
    """Render *url* with the API key masked."""
    if param_name not in url.params:
        return str(url)
    return str(url.copy_set_param(param_name, _REDACTED))


def _request_body(request: httpx.Request) -> str:
    if isinstance(request.stream, httpx.ByteStream):
        return request.read().decode("utf-8", errors="replace")
    return "<streaming>"


class DebugLoggingTransport(httpx.AsyncBaseTransport):
    """Wraps an httpx transport and logs every exchange at DEBUG level.

    Only attached when debug mode is enabled.  The response body is read
    eagerly so it can be logged; the client sees the buffered content.
    """

    def __init__(self, wrapped: httpx.AsyncBaseTransport) -> None:
        self._wrapped = wrapped

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        url = redact_url(request.url)
        log.debug(
            "tmdb_http_request",
            method=request.method,
            url=url,
            body=_request_body(request),
        )

        started = time.perf_counter()
        response = await self._wrapped.handle_async_request(request)
        content = await response.aread()

        log.debug(
            "tmdb_http_response",
            method=request.method,
            url=url,
            status=response.status_code,
            elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
            body=content.decode("utf-8", errors="replace"),
        )
        return response

    async def aclose(self) -> None:
        """Close the wrapped transport."""
        await self._wrapped.aclose()
