"""Shared building blocks for response models."""

from __future__ import annotations

from datetime import date
from typing import Annotated, Any, Generic, Optional, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

T = TypeVar("T")


def _blank_to_none(value: Any) -> Any:
    # TMDB sends "" for unknown dates instead of null.
    if isinstance(value, str) and not value.strip():
        return None
    return value


TmdbDate = Annotated[Optional[date], BeforeValidator(_blank_to_none)]


class TmdbModel(BaseModel):
    """Base for every decoded response object.

    Unknown keys are ignored so new API fields never break decoding.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ResultsPage(TmdbModel, Generic[T]):
    """Paginated envelope common to all list-returning endpoints."""

    page: int | None = None
    total_pages: int | None = None
    total_results: int | None = None
    results: list[T] = Field(default_factory=list)


class Status(TmdbModel):
    """Error body sent with non-2xx responses."""

    status_code: int | None = None
    status_message: str | None = None
    success: bool | None = None
