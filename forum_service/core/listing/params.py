"""Raw listing parameters and the vocabularies they are matched against."""

from __future__ import annotations

from enum import StrEnum
from pydantic import BaseModel, ConfigDict, Field


class Sort(StrEnum):
    """Recognized values of the ``sort`` query parameter."""

    BEST = "best"
    NEW = "new"
    OLD = "old"
    HOT = "hot"
    TOP = "top"


class TimeWindow(StrEnum):
    """Recognized values of the ``time`` query parameter (only read with ``sort=top``)."""

    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class ListingParams(BaseModel):
    """Untrusted pagination input as received from the transport layer.

    Nothing is validated here beyond the primitive types: unknown sort or time
    values, garbage limits and malformed anchors are all tolerated and resolved
    later by the query spec builder and cursor resolver.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    sort: str | None = Field(default=None, description="new|old|hot|top|best")
    time: str | None = Field(default=None, description="hour|day|week|month|year")
    before: str | None = Field(default=None, description="Anchor id of the page start")
    after: str | None = Field(default=None, description="Anchor id of the page end")
    limit: str | int | float | None = Field(default=None, description="Page size")
