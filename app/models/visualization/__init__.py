"""Visualization domain models - tables, entities and value types."""

from app.models.visualization.cache import CACHE_DDL
from app.models.visualization.client import CLIENT_DDL
from app.models.visualization.entities import (
    AccessType,
    AccountType,
    CacheWriteResult,
    Visualization,
    VisualizationCacheEntry,
)
from app.models.visualization.visualization import VISUALIZATION_DDL, VISUALIZATION_INDEXES

__all__ = [
    "VISUALIZATION_DDL",
    "VISUALIZATION_INDEXES",
    "CLIENT_DDL",
    "CACHE_DDL",
    "AccessType",
    "AccountType",
    "Visualization",
    "VisualizationCacheEntry",
    "CacheWriteResult",
]
