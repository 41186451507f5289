"""Visualization repository - lister and cascade deletes for visualizations."""

from loguru import logger

from app.models.visualization import AccessType, AccountType, Visualization
from app.repositories.base import BaseRepository, placeholders


class VisualizationRepository(BaseRepository):
    """Repository for visualization definitions."""

    def search(self, form_id: int, view_id: int, account_type: str) -> list[Visualization]:
        """List visualizations attached to a form View.

        Client accounts never receive admin-only visualizations from here;
        finer, grant-based filtering is left to the caller.
        """
        query = """
            SELECT vis_id, vis_name, vis_type, form_id, view_id, access_type, export_group_id
            FROM module_data_visualizations
            WHERE form_id = ? AND view_id = ?
        """
        params = [form_id, view_id]
        if account_type == AccountType.CLIENT:
            query += " AND access_type != ?"
            params.append(AccessType.ADMIN.value)
        query += " ORDER BY list_order, vis_id"

        result = [Visualization.from_row(r) for r in self.fetchall(query, params)]
        logger.debug("search(form={}, view={}, {}): {} visualizations", form_id, view_id, account_type, len(result))
        return result

    def get_ids_for_form(self, form_id: int) -> list[int]:
        """Get IDs of all visualizations owned by a form."""
        return self.fetchcol(
            "SELECT vis_id FROM module_data_visualizations WHERE form_id = ? ORDER BY vis_id",
            [form_id],
        )

    def delete(self, vis_ids: list[int]) -> None:
        """Delete visualization rows."""
        self._check_writable()
        if not vis_ids:
            return
        self.execute(
            f"DELETE FROM module_data_visualizations WHERE vis_id IN ({placeholders(vis_ids)})",
            list(vis_ids),
        )
        logger.debug("Deleted visualizations {}", vis_ids)
