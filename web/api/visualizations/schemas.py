"""Visualization API response schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class QuicklinksResponse(BaseModel):
    """Visualizations available in the quicklinks dialog."""

    form_id: int
    view_id: int
    vis_ids: list[int]


class CacheWriteResponse(BaseModel):
    """Cache write outcome."""

    vis_id: int
    ok: bool
    error: str | None = None


class CachedVisualizationResponse(BaseModel):
    """Cached visualization snapshot."""

    vis_id: int
    last_cached: datetime
    data: Any
