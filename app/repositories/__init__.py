"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.db import (
    close_db,
    connect,
    get_db,
    init_tables,
    transaction,
)
from app.repositories.forms import FormRepository, ViewRepository
from app.repositories.visualization import (
    ClientGrantRepository,
    VisualizationCacheRepository,
    VisualizationRepository,
)

__all__ = [
    # DB
    "get_db",
    "close_db",
    "connect",
    "init_tables",
    "transaction",
    # Base
    "BaseRepository",
    # Host forms
    "FormRepository",
    "ViewRepository",
    # Visualizations
    "VisualizationRepository",
    "ClientGrantRepository",
    "VisualizationCacheRepository",
]
