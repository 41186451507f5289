"""Client grant repository - client account access to private visualizations."""

from loguru import logger

from app.repositories.base import BaseRepository, placeholders


class ClientGrantRepository(BaseRepository):
    """Repository for client visualization grants."""

    def get_export_group_ids(self, account_id: int) -> set[int]:
        """Get export groups granted to a client account through its grants."""
        rows = self.fetchcol(
            """
            SELECT DISTINCT v.export_group_id
            FROM module_data_visualization_clients c
            JOIN module_data_visualizations v ON v.vis_id = c.vis_id
            WHERE c.account_id = ? AND v.export_group_id IS NOT NULL
            """,
            [account_id],
        )
        logger.debug("get_export_group_ids({}): {}", account_id, rows)
        return set(rows)

    def delete_for_visualizations(self, vis_ids: list[int]) -> None:
        """Delete all grants referencing the given visualizations."""
        self._check_writable()
        if not vis_ids:
            return
        self.execute(
            f"DELETE FROM module_data_visualization_clients WHERE vis_id IN ({placeholders(vis_ids)})",
            list(vis_ids),
        )
        logger.debug("Deleted client grants for {}", vis_ids)
