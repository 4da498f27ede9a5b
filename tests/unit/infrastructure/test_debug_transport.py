"""Tests for DebugLoggingTransport (request/response body logging)."""

from __future__ import annotations

import httpx
import pytest
from structlog.testing import capture_logs

from tmdbkit.infrastructure.http.auth_transport import ApiKeyTransport
from tmdbkit.infrastructure.http.debug_transport import (
    DebugLoggingTransport,
    redact_url,
)


def _handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"id": 550, "title": "Fight Club"})


class TestRedactUrl:
    def test_masks_api_key(self) -> None:
        url = httpx.URL("https://api.themoviedb.org/3/movie/550?api_key=secret&language=de")
        rendered = redact_url(url)
        assert "secret" not in rendered
        assert "api_key=%2A%2A%2A" in rendered or "api_key=***" in rendered
        assert "language=de" in rendered

    def test_leaves_url_without_key_alone(self) -> None:
        url = httpx.URL("https://api.themoviedb.org/3/movie/550")
        assert redact_url(url) == "https://api.themoviedb.org/3/movie/550"


class TestDebugLoggingTransport:
    @pytest.mark.asyncio()
    async def test_logs_request_and_response(self) -> None:
        transport = ApiKeyTransport(
            DebugLoggingTransport(httpx.MockTransport(_handler)), "secret"
        )

        with capture_logs() as logs:
            async with httpx.AsyncClient(transport=transport) as client:
                resp = await client.get("https://api.themoviedb.org/3/movie/550")

        events = {entry["event"]: entry for entry in logs}
        assert "tmdb_http_request" in events
        assert "tmdb_http_response" in events

        response_log = events["tmdb_http_response"]
        assert response_log["status"] == 200
        assert "Fight Club" in response_log["body"]
        assert response_log["log_level"] == "debug"
        assert all("secret" not in entry["url"] for entry in logs if "url" in entry)

        # Body was buffered for logging but is still readable by the caller.
        assert resp.json()["title"] == "Fight Club"

    @pytest.mark.asyncio()
    async def test_logs_request_body(self) -> None:
        transport = DebugLoggingTransport(httpx.MockTransport(_handler))
        request = httpx.Request(
            "POST",
            "https://api.themoviedb.org/3/movie/550/rating",
            content=b'{"value": 9}',
        )

        with capture_logs() as logs:
            await transport.handle_async_request(request)

        request_log = next(e for e in logs if e["event"] == "tmdb_http_request")
        assert request_log["method"] == "POST"
        assert request_log["body"] == '{"value": 9}'
