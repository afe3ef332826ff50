"""Response schema of every listing endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ListingChild(BaseModel):
    """One listed item."""

    id: str = Field(description="Item id, usable as a before/after cursor")
    data: dict[str, Any] = Field(default_factory=dict, description="Kind-specific fields")


class ListingResponse(BaseModel):
    """A page of items plus the cursors of its first and last item.

    Example:
        {"after": "65a1...", "before": "65a0...", "children": [{"id": "65a0...", "data": {...}}]}
    """

    after: str = Field(default="", description="Id of the last item, empty when the page is empty")
    before: str = Field(default="", description="Id of the first item, empty when the page is empty")
    children: list[ListingChild] = Field(default_factory=list)
