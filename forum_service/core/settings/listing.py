"""Listing (pagination) settings.

Centralizes the page-size bounds used by every listing endpoint.

Environment variables use LISTING_ prefix.
Example: LISTING_DEFAULT_LIMIT=25, LISTING_MAX_LIMIT=100
"""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ListingSettings(BaseSettings):
    """Page-size configuration for cursor listings.

    Attributes:
        default_limit: Page size used when ``limit`` is absent or not a number.
        max_limit: Upper clamp for ``limit``.
        min_limit: Lower clamp for ``limit``.
    """

    default_limit: int = Field(
        default=25,
        ge=1,
        le=1000,
        description="Default page size when limit not specified",
    )
    max_limit: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Maximum allowed page size (hard limit)",
    )
    min_limit: int = Field(
        default=1,
        ge=1,
        description="Minimum page size (non-positive limits clamp here)",
    )

    model_config = SettingsConfigDict(
        env_prefix="LISTING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def _check_bounds(self) -> ListingSettings:
        if not self.min_limit <= self.default_limit <= self.max_limit:
            msg = "default_limit must lie within [min_limit, max_limit]"
            raise ValueError(msg)
        return self
