"""Visualization services."""

from app.services.visualization.messages import get_vis_messages
from app.services.visualization.script import FormViewIndex, js_literal, js_string
from app.services.visualization.service import VisualizationService, parse_positive_id

__all__ = [
    "VisualizationService",
    "FormViewIndex",
    "get_vis_messages",
    "js_literal",
    "js_string",
    "parse_positive_id",
]
