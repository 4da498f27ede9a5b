"""Exceptions raised by the TMDB client."""

from __future__ import annotations

import httpx


class TmdbError(Exception):
    """Base class for all tmdbkit errors."""


class TmdbTransportError(TmdbError):
    """Raised when the request never produced an HTTP response.

    Wraps ``httpx.TransportError`` (DNS failure, connection refused,
    timeout).  The original exception is available as ``__cause__``.
    """


class TmdbDecodeError(TmdbError):
    """Raised when a response body does not match the expected shape."""

    def __init__(self, message: str, *, response: httpx.Response) -> None:
        super().__init__(message)
        self.response = response


class TmdbHttpError(TmdbError):
    """Raised by ``ApiResponse.unwrap()`` for non-2xx responses."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        status_message: str | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.status_message = status_message
        self.response = response
