"""Models package - DDL and entities for all domains."""

from app.models.common import BaseEntity
from app.models.forms import (
    FORM_DDL,
    VIEW_DDL,
    VIEW_INDEXES,
    Form,
    View,
)
from app.models.visualization import (
    CACHE_DDL,
    CLIENT_DDL,
    VISUALIZATION_DDL,
    VISUALIZATION_INDEXES,
    AccessType,
    AccountType,
    CacheWriteResult,
    Visualization,
    VisualizationCacheEntry,
)

ALL_DDL = [
    # Host forms
    FORM_DDL,
    VIEW_DDL,
    *VIEW_INDEXES,
    # Visualizations
    VISUALIZATION_DDL,
    *VISUALIZATION_INDEXES,
    CLIENT_DDL,
    CACHE_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    # Host forms
    "FORM_DDL",
    "VIEW_DDL",
    "VIEW_INDEXES",
    "Form",
    "View",
    # Visualizations
    "VISUALIZATION_DDL",
    "VISUALIZATION_INDEXES",
    "CLIENT_DDL",
    "CACHE_DDL",
    "AccessType",
    "AccountType",
    "Visualization",
    "VisualizationCacheEntry",
    "CacheWriteResult",
    # All DDL
    "ALL_DDL",
]
