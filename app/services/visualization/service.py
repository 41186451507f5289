"""Visualization service - access filtering, page index, cascades and cache."""

from collections.abc import Callable
from datetime import datetime
from typing import Any

from loguru import logger

from app.models.visualization import AccessType, CacheWriteResult, VisualizationCacheEntry
from app.repositories.forms import FormRepository, ViewRepository
from app.repositories.visualization import (
    ClientGrantRepository,
    VisualizationCacheRepository,
    VisualizationRepository,
)
from app.services.visualization.script import FormViewIndex
from app.session import Session


def parse_positive_id(value: Any) -> int | None:
    """Return value as a positive int, or None if it isn't one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str):
        value = value.strip()
        if value.isascii() and value.isdigit() and int(value) > 0:
            return int(value)
    return None


class VisualizationService:
    """Visualization business logic."""

    def __init__(
        self,
        vis_repo: VisualizationRepository,
        client_repo: ClientGrantRepository,
        cache_repo: VisualizationCacheRepository,
        form_repo: FormRepository,
        view_repo: ViewRepository,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._vis = vis_repo
        self._clients = client_repo
        self._cache = cache_repo
        self._forms = form_repo
        self._views = view_repo
        self._clock = clock

    def get_accessible_visualizations(self, form_id: int, view_id: int, session: Session) -> list[int]:
        """IDs of the visualizations on a View that the session's account may open."""
        account_type = session.get_account_type()
        is_client = session.is_client

        granted_groups: set[int] = set()
        if is_client:
            granted_groups = self._clients.get_export_group_ids(session.get_account_id())

        accessible = []
        for vis in self._vis.search(form_id, view_id, account_type):
            if vis.access_type == AccessType.PUBLIC:
                accessible.append(vis.vis_id)
            elif is_client:
                if vis.access_type != AccessType.ADMIN and vis.export_group_id in granted_groups:
                    accessible.append(vis.vis_id)
            else:
                accessible.append(vis.vis_id)

        logger.debug("Accessible visualizations for {} on view {}: {}", session, view_id, accessible)
        return accessible

    def build_form_view_index(self) -> FormViewIndex:
        """Collect completed forms and their Views."""
        index = FormViewIndex()
        for form in self._forms.get_forms():
            # forms still being set up are left out entirely
            if not form.is_complete:
                continue
            views = [(v.view_id, v.view_name) for v in self._views.get_views(form.form_id)]
            index.add_form(form.form_id, form.form_name, views)
        return index

    def get_form_view_mapping_js(self) -> str:
        """Forms and Views as `page_ns` script statements."""
        return self.build_form_view_index().render()

    def on_form_deleted(self, info: dict) -> None:
        """Host hook: a form was deleted, drop everything attached to it."""
        raw_form_id = (info or {}).get("form_id")
        form_id = parse_positive_id(raw_form_id)
        if form_id is None:
            logger.debug("delete_form ignored: form_id={!r}", raw_form_id)
            return

        vis_ids = self._vis.get_ids_for_form(form_id)
        if not vis_ids:
            return

        with self._vis.transaction():
            self._clients.delete_for_visualizations(vis_ids)
            self._cache.delete_for_visualizations(vis_ids)
            self._vis.delete(vis_ids)
        logger.info("Form {} deleted: removed visualizations {}", form_id, vis_ids)

    def update_visualization_cache(self, vis_id: int, data: Any) -> CacheWriteResult:
        """Replace the cached snapshot of a visualization. Never raises."""
        try:
            with self._cache.transaction():
                self._cache.delete(vis_id)
                self._cache.insert(vis_id, self._clock(), data)
        except Exception as e:
            logger.warning("Cache write failed: vis={}: {}", vis_id, e)
            return CacheWriteResult(vis_id=vis_id, ok=False, error=str(e))

        logger.info("Cache updated: vis={}", vis_id)
        return CacheWriteResult(vis_id=vis_id, ok=True)

    def get_visualization_cache(self, vis_id: int) -> VisualizationCacheEntry | None:
        """Cached snapshot of a visualization, if any."""
        return self._cache.get(vis_id)
