"""Shared test fixtures for the tmdbkit test suite."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import pytest

from tmdbkit import Tmdb

API_KEY = "test-api-key-123"

_NOT_FOUND = {
    "success": False,
    "status_code": 34,
    "status_message": "The resource you requested could not be found.",
}


class MockTransportTmdb(Tmdb):
    """Tmdb whose innermost transport is an ``httpx.MockTransport``.

    Counts client builds via ``transports`` so tests can observe rebuilds.
    """

    def __init__(
        self,
        handler: Callable[[httpx.Request], httpx.Response],
        *args: Any,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._handler = handler
        self.transports: list[httpx.MockTransport] = []

    def new_transport(self) -> httpx.AsyncBaseTransport:
        transport = httpx.MockTransport(self._handler)
        self.transports.append(transport)
        return transport


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def recorded() -> list[httpx.Request]:
    """Requests as they reached the network layer (after authentication)."""
    return []


@pytest.fixture()
async def make_tmdb(
    recorded: list[httpx.Request],
) -> AsyncIterator[Callable[..., MockTransportTmdb]]:
    """Factory for Tmdb instances answering from a ``{path: json}`` map.

    Paths are relative to the API root (``"search/movie"``).  Values may be
    a JSON-able object (served with 200) or a ready ``httpx.Response``.
    Unknown paths answer 404 with a TMDB status body.
    """
    created: list[MockTransportTmdb] = []

    def _make(
        routes: dict[str, Any] | None = None,
        *,
        api_key: str | None = API_KEY,
        **kwargs: Any,
    ) -> MockTransportTmdb:
        routes = routes or {}

        def handler(request: httpx.Request) -> httpx.Response:
            recorded.append(request)
            path = request.url.path.removeprefix("/3/")
            answer = routes.get(path)
            if answer is None:
                return httpx.Response(404, json=_NOT_FOUND)
            if isinstance(answer, httpx.Response):
                return answer
            return httpx.Response(200, json=answer)

        tmdb = MockTransportTmdb(handler, api_key, **kwargs)
        created.append(tmdb)
        return tmdb

    yield _make

    for tmdb in created:
        await tmdb.aclose()


@pytest.fixture()
def movie_page_json() -> dict[str, Any]:
    """Movie search result page as returned by /search/movie."""
    return {
        "page": 1,
        "total_pages": 1,
        "total_results": 1,
        "results": [{"id": 550, "title": "Fight Club"}],
    }
