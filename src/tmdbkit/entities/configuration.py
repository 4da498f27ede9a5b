"""API configuration (image base URLs and sizes)."""

from __future__ import annotations

from pydantic import Field

from .base import TmdbModel


class ImagesConfiguration(TmdbModel):
    base_url: str | None = None
    secure_base_url: str | None = None
    backdrop_sizes: list[str] = Field(default_factory=list)
    logo_sizes: list[str] = Field(default_factory=list)
    poster_sizes: list[str] = Field(default_factory=list)
    profile_sizes: list[str] = Field(default_factory=list)
    still_sizes: list[str] = Field(default_factory=list)

    def image_url(self, file_path: str, size: str = "original") -> str:
        """Build a full image URL, e.g. ``.../t/p/w500/abc.jpg``."""
        base = self.secure_base_url or self.base_url or ""
        return f"{base}{size}{file_path}"


class Configuration(TmdbModel):
    images: ImagesConfiguration | None = None
    change_keys: list[str] = Field(default_factory=list)
