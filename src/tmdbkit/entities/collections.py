"""Collection response models."""

from __future__ import annotations

from pydantic import Field

from .common import BaseCollection, Images
from .movies import BaseMovie


class Collection(BaseCollection):
    overview: str | None = None
    parts: list[BaseMovie] = Field(default_factory=list)

    # append_to_response
    images: Images | None = None
