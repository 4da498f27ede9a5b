"""Endpoint declarations and the shared service plumbing."""

from __future__ import annotations

import string
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from tmdbkit.entities.base import Status
from tmdbkit.exceptions import TmdbHttpError, TmdbTransportError
from tmdbkit.infrastructure.http.bundle import ClientBundle
from tmdbkit.infrastructure.logging.setup import get_logger

log = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class Endpoint(Generic[T]):
    """One remote endpoint: HTTP verb, path template and response model.

    ``path`` is relative to the API root and uses ``str.format`` placeholders,
    e.g. ``"movie/{movie_id}/credits"``.
    """

    method: str
    path: str
    response_model: type[T]

    @property
    def path_params(self) -> tuple[str, ...]:
        return tuple(
            name for _, name, _, _ in string.Formatter().parse(self.path) if name
        )

    def render_path(self, path_params: Mapping[str, Any] | None = None) -> str:
        values = dict(path_params or {})
        missing = [name for name in self.path_params if values.get(name) is None]
        if missing:
            raise ValueError(
                f"Missing path parameter(s) for {self.path!r}: {', '.join(missing)}"
            )
        return self.path.format(
            **{name: quote(str(value), safe="") for name, value in values.items()}
        )

    def build_request(
        self,
        bundle: ClientBundle,
        path_params: Mapping[str, Any] | None = None,
        query: Mapping[str, Any] | None = None,
    ) -> httpx.Request:
        """Build the ``httpx.Request`` for this endpoint on *bundle*'s client."""
        return bundle.http.build_request(
            self.method,
            self.render_path(path_params),
            params=bundle.codec.encode_query(query),
        )


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Outcome of one API call.

    Non-2xx answers are not raised: ``is_success`` is ``False``, ``body`` is
    ``None`` and ``error`` holds the decoded ``Status`` when TMDB sent one.
    The raw ``httpx.Response`` is always available.
    """

    response: httpx.Response
    body: T | None = None
    error: Status | None = None

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def is_success(self) -> bool:
        return self.response.is_success

    def unwrap(self) -> T:
        """Return ``body`` or raise ``TmdbHttpError`` for failed responses."""
        if self.is_success and self.body is not None:
            return self.body
        message = self.error.status_message if self.error else None
        raise TmdbHttpError(
            f"TMDB request failed with HTTP {self.status_code}: {message or self.response.reason_phrase}",
            status_code=self.status_code,
            status_message=message,
            response=self.response,
        )


class TmdbService:
    """Base for the service accessors.

    A service is a stateless proxy over one ``ClientBundle``; get a fresh one
    from ``Tmdb`` after changing the configuration.
    """

    def __init__(self, bundle: ClientBundle) -> None:
        self._bundle = bundle

    @property
    def bundle(self) -> ClientBundle:
        return self._bundle

    async def _call(
        self,
        endpoint: Endpoint[T],
        *,
        path_params: Mapping[str, Any] | None = None,
        query: Mapping[str, Any] | None = None,
    ) -> ApiResponse[T]:
        request = endpoint.build_request(self._bundle, path_params, query)
        try:
            response = await self._bundle.http.send(request)
        except httpx.TransportError as exc:
            log.warning(
                "tmdb_transport_error",
                method=endpoint.method,
                path=endpoint.path,
                error=str(exc),
            )
            raise TmdbTransportError(f"TMDB request failed: {exc}") from exc

        if not response.is_success:
            log.debug(
                "tmdb_http_error",
                method=endpoint.method,
                path=endpoint.path,
                status=response.status_code,
            )
            return ApiResponse(
                response=response, error=self._bundle.codec.decode_error(response)
            )

        body = self._bundle.codec.decode(response, endpoint.response_model)
        return ApiResponse(response=response, body=body)
