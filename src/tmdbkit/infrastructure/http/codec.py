"""JSON codec: query-parameter encoding and response decoding."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date
from enum import Enum
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from tmdbkit.entities.base import Status
from tmdbkit.exceptions import TmdbDecodeError
from tmdbkit.infrastructure.logging.setup import get_logger

from .debug_transport import redact_url

log = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _response_url(response: httpx.Response) -> str | None:
    try:
        return redact_url(response.request.url)
    except RuntimeError:
        # Response was built without a request.
        return None


class JsonCodec:
    """Maps Python values to TMDB query strings and JSON bodies to models.

    Response keys are snake_case like the model fields, so decoding needs
    no renaming.  Dates go out as ``YYYY-MM-DD`` and come back as
    ``datetime.date`` (empty strings become ``None``, see ``TmdbDate``).
    """

    def encode_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, Enum):
            return str(value.value)
        if isinstance(value, date):
            return value.isoformat()
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            return ",".join(self.encode_value(item) for item in value)
        return str(value)

    def encode_query(self, query: Mapping[str, Any] | None) -> dict[str, str]:
        """Encode query parameters, dropping ``None`` and empty values.

        Insertion order is preserved.
        """
        if not query:
            return {}
        params: dict[str, str] = {}
        for key, value in query.items():
            if value is None:
                continue
            encoded = self.encode_value(value)
            if encoded == "":
                continue
            params[key] = encoded
        return params

    def decode(self, response: httpx.Response, model: type[ModelT]) -> ModelT:
        """Decode *response* into *model*.

        Raises:
            TmdbDecodeError: body is not JSON or does not match *model*.
        """
        try:
            return model.model_validate_json(response.content)
        except ValidationError as exc:
            log.warning(
                "tmdb_decode_error",
                url=_response_url(response),
                status=response.status_code,
                model=model.__name__,
                errors=exc.error_count(),
            )
            raise TmdbDecodeError(
                f"Cannot decode TMDB response as {model.__name__}",
                response=response,
            ) from exc

    def decode_error(self, response: httpx.Response) -> Status | None:
        """Decode a non-2xx body as ``Status``; ``None`` if it is not one."""
        try:
            return Status.model_validate_json(response.content)
        except ValidationError:
            log.debug("tmdb_error_body_unparsed", status=response.status_code)
            return None
