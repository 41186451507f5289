"""Visualization domain entities and value types."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from app.models.common import BaseEntity


class AccessType(StrEnum):
    PUBLIC = "public"
    PRIVATE = "private"
    ADMIN = "admin"


class AccountType(StrEnum):
    ADMIN = "admin"
    CLIENT = "client"


@dataclass
class Visualization(BaseEntity):
    """Visualization row as returned by the lister."""

    vis_id: int
    vis_name: str
    vis_type: str
    form_id: int
    view_id: int
    access_type: str
    export_group_id: int | None


@dataclass
class VisualizationCacheEntry(BaseEntity):
    """Cached visualization snapshot."""

    vis_id: int
    last_cached: datetime
    data: Any


@dataclass
class CacheWriteResult(BaseEntity):
    """Outcome of a best-effort cache write. Callers may ignore it."""

    vis_id: int
    ok: bool
    error: str | None = None
