"""Visualization repositories."""

from app.repositories.visualization.cache import VisualizationCacheRepository
from app.repositories.visualization.client import ClientGrantRepository
from app.repositories.visualization.visualization import VisualizationRepository

__all__ = [
    "VisualizationRepository",
    "ClientGrantRepository",
    "VisualizationCacheRepository",
]
