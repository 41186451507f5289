"""Services package - service class exports."""

from app.services.visualization import VisualizationService

__all__ = [
    "VisualizationService",
]
