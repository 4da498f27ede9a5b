"""httpx transport that authenticates every request with the API key."""

from __future__ import annotations

import httpx

PARAM_API_KEY = "api_key"


class ApiKeyTransport(httpx.AsyncBaseTransport):
    """Wraps an httpx transport and appends ``api_key`` to every request.

    The key is added to a copy of the request right before it is handed to
    the wrapped transport, after all parameters the caller set.  The
    caller's request is left untouched, so a layer above that re-sends the
    same request (retries, redirects) gets exactly one key per attempt.

    A missing key is sent as an empty value; TMDB answers with 401 and the
    caller sees an ordinary failed response.
    """

    def __init__(
        self,
        wrapped: httpx.AsyncBaseTransport,
        api_key: str | None,
        *,
        param_name: str = PARAM_API_KEY,
    ) -> None:
        self._wrapped = wrapped
        self._api_key = api_key
        self._param_name = param_name

    @property
    def api_key(self) -> str | None:
        return self._api_key

    def authenticate(self, request: httpx.Request) -> httpx.Request:
        """Return a copy of *request* carrying the API key."""
        url = request.url.copy_add_param(self._param_name, self._api_key or "")
        return httpx.Request(
            method=request.method,
            url=url,
            headers=request.headers,
            stream=request.stream,
            extensions=request.extensions,
        )

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        return await self._wrapped.handle_async_request(self.authenticate(request))

    async def aclose(self) -> None:
        """Close the wrapped transport."""
        await self._wrapped.aclose()
