"""Cache repository - rendered visualization snapshots."""

import json
from datetime import datetime
from typing import Any

from loguru import logger

from app.models.visualization import VisualizationCacheEntry
from app.repositories.base import BaseRepository, placeholders


class VisualizationCacheRepository(BaseRepository):
    """Repository for visualization cache rows."""

    def get(self, vis_id: int) -> VisualizationCacheEntry | None:
        """Load cached snapshot from DB."""
        row = self.fetchone(
            """
            SELECT vis_id, last_cached, data FROM module_data_visualization_cache
            WHERE vis_id = ?
            ORDER BY last_cached DESC
            LIMIT 1
            """,
            [vis_id],
        )
        if row:
            logger.debug("Cache hit: vis={}", vis_id)
            return VisualizationCacheEntry(vis_id=row[0], last_cached=row[1], data=json.loads(row[2]))
        return None

    def delete(self, vis_id: int) -> None:
        """Remove the cached snapshot for one visualization."""
        self._check_writable()
        self.execute("DELETE FROM module_data_visualization_cache WHERE vis_id = ?", [vis_id])

    def insert(self, vis_id: int, last_cached: datetime, data: Any) -> None:
        """Store a snapshot. Callers delete any existing row first."""
        self._check_writable()
        self.execute(
            "INSERT INTO module_data_visualization_cache (vis_id, last_cached, data) VALUES (?, ?, ?)",
            [vis_id, last_cached, json.dumps(data)],
        )
        logger.debug("Cache saved: vis={}", vis_id)

    def delete_for_visualizations(self, vis_ids: list[int]) -> None:
        """Remove cached snapshots for several visualizations."""
        self._check_writable()
        if not vis_ids:
            return
        self.execute(
            f"DELETE FROM module_data_visualization_cache WHERE vis_id IN ({placeholders(vis_ids)})",
            list(vis_ids),
        )
        logger.debug("Deleted cache rows for {}", vis_ids)

    def count(self, vis_id: int) -> int:
        """Number of cache rows held for a visualization."""
        row = self.fetchone(
            "SELECT COUNT(*) FROM module_data_visualization_cache WHERE vis_id = ?",
            [vis_id],
        )
        return row[0]
