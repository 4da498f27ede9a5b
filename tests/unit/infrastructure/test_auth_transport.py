"""Tests for ApiKeyTransport (API key injection)."""

from __future__ import annotations

from unittest.mock import AsyncMock

import httpx
import pytest

from tmdbkit.infrastructure.http.auth_transport import ApiKeyTransport


def _make_request(url: str = "https://api.themoviedb.org/3/search/movie") -> httpx.Request:
    return httpx.Request("GET", url)


def _make_transport(api_key: str | None = "secret") -> ApiKeyTransport:
    """Create an ApiKeyTransport with a mock inner transport."""
    mock_wrapped = AsyncMock(spec=httpx.AsyncBaseTransport)
    mock_wrapped.handle_async_request = AsyncMock(
        return_value=httpx.Response(200, json={}),
    )
    return ApiKeyTransport(wrapped=mock_wrapped, api_key=api_key)


def _sent(transport: ApiKeyTransport, call: int = -1) -> httpx.Request:
    return transport._wrapped.handle_async_request.call_args_list[call].args[0]


class TestApiKeyTransport:
    @pytest.mark.asyncio()
    async def test_adds_api_key(self) -> None:
        transport = _make_transport()

        await transport.handle_async_request(_make_request())

        assert _sent(transport).url.params["api_key"] == "secret"

    @pytest.mark.asyncio()
    async def test_keeps_existing_params_in_order(self) -> None:
        transport = _make_transport()
        request = _make_request(
            "https://api.themoviedb.org/3/search/movie?query=fight&page=2&year=1999"
        )

        await transport.handle_async_request(request)

        sent = _sent(transport)
        assert list(sent.url.params.multi_items()) == [
            ("query", "fight"),
            ("page", "2"),
            ("year", "1999"),
            ("api_key", "secret"),
        ]

    @pytest.mark.asyncio()
    async def test_does_not_mutate_caller_request(self) -> None:
        transport = _make_transport()
        request = _make_request()

        await transport.handle_async_request(request)

        assert "api_key" not in request.url.params
        assert _sent(transport) is not request

    @pytest.mark.asyncio()
    async def test_resent_request_carries_key_once(self) -> None:
        """A retrying layer above re-sends the same request object."""
        transport = _make_transport()
        request = _make_request()

        await transport.handle_async_request(request)
        await transport.handle_async_request(request)

        for call in (0, 1):
            assert _sent(transport, call).url.params.get_list("api_key") == ["secret"]

    @pytest.mark.asyncio()
    async def test_missing_key_sent_empty(self) -> None:
        transport = _make_transport(api_key=None)

        await transport.handle_async_request(_make_request())

        assert _sent(transport).url.params["api_key"] == ""

    @pytest.mark.asyncio()
    async def test_preserves_method_headers_and_body(self) -> None:
        transport = _make_transport()
        request = httpx.Request(
            "POST",
            "https://api.themoviedb.org/3/movie/550/rating",
            headers={"X-Test": "1", "Content-Type": "application/json"},
            content=b'{"value": 8.5}',
        )

        await transport.handle_async_request(request)

        sent = _sent(transport)
        assert sent.method == "POST"
        assert sent.headers["X-Test"] == "1"
        assert sent.read() == b'{"value": 8.5}'

    @pytest.mark.asyncio()
    async def test_returns_wrapped_response(self) -> None:
        transport = _make_transport()
        resp = await transport.handle_async_request(_make_request())
        assert resp.status_code == 200

    @pytest.mark.asyncio()
    async def test_aclose_closes_wrapped(self) -> None:
        transport = _make_transport()
        await transport.aclose()
        transport._wrapped.aclose.assert_awaited_once()
