"""Visualization API views - thin layer over services."""

from typing import Any

from loguru import logger

from app.container import container
from app.hooks import DELETE_FORM
from app.lang import LANGUAGES, get_strings
from app.services.visualization import get_vis_messages as build_vis_messages
from app.session import Session
from settings import DEFAULT_LANG
from web.api.errors import NotFoundError, ValidationError, validate_id

from .schemas import CachedVisualizationResponse, CacheWriteResponse, QuicklinksResponse


def get_quicklink_visualizations(form_id: int, view_id: int, session: Session) -> QuicklinksResponse:
    """Get visualizations the current account may open from a View."""
    validate_id("form_id", form_id)
    validate_id("view_id", view_id)
    vis_ids = container.visualizations.get_accessible_visualizations(form_id, view_id, session)

    return QuicklinksResponse(form_id=form_id, view_id=view_id, vis_ids=vis_ids)


def get_form_view_mapping_js() -> str:
    """Get the forms/Views lookup script for the visualization pages."""
    return container.visualizations.get_form_view_mapping_js()


def get_vis_messages(lang: str = DEFAULT_LANG) -> str:
    """Get the quicklinks dialog message script for a language."""
    if lang not in LANGUAGES:
        raise NotFoundError(f"Unknown language: {lang}")
    module_strings, core_strings = get_strings(lang)
    return build_vis_messages(module_strings, core_strings)


def delete_form_hook(info: dict) -> None:
    """Entry point for the host's form deletion event."""
    container.hooks.fire(DELETE_FORM, info)


def update_visualization_cache(vis_id: int, data: Any) -> CacheWriteResponse:
    """Replace a visualization's cached data. Never raises."""
    try:
        validate_id("vis_id", vis_id)
    except ValidationError as e:
        logger.warning("Cache write rejected: {}", e.message)
        return CacheWriteResponse(vis_id=vis_id if type(vis_id) is int else 0, ok=False, error=e.message)

    result = container.visualizations.update_visualization_cache(vis_id, data)

    return CacheWriteResponse(**result.to_dict())


def get_visualization_cache(vis_id: int) -> CachedVisualizationResponse:
    """Get a visualization's cached data."""
    validate_id("vis_id", vis_id)
    entry = container.visualizations.get_visualization_cache(vis_id)
    if entry is None:
        raise NotFoundError(f"No cached data for visualization {vis_id}")

    return CachedVisualizationResponse(**entry.to_dict())
