"""Visualizations API."""

from web.api.visualizations.views import (
    delete_form_hook,
    get_form_view_mapping_js,
    get_quicklink_visualizations,
    get_vis_messages,
    get_visualization_cache,
    update_visualization_cache,
)

__all__ = [
    "get_quicklink_visualizations",
    "get_form_view_mapping_js",
    "get_vis_messages",
    "delete_form_hook",
    "update_visualization_cache",
    "get_visualization_cache",
]
