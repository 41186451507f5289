"""View repository - read access to a form's Views."""

from app.models.forms import View
from app.repositories.base import BaseRepository


class ViewRepository(BaseRepository):
    """Repository for host View data access."""

    def get_views(self, form_id: int) -> list[View]:
        """Get Views of a form in display order."""
        rows = self.fetchall(
            """
            SELECT view_id, form_id, view_name
            FROM form_views
            WHERE form_id = ?
            ORDER BY view_order, view_id
            """,
            [form_id],
        )
        return [View.from_row(r) for r in rows]
