"""Form repository - read access to the host's forms."""

from loguru import logger

from app.models.forms import Form
from app.repositories.base import BaseRepository


class FormRepository(BaseRepository):
    """Repository for host form data access."""

    def get_forms(self) -> list[Form]:
        """Get all forms in display order."""
        rows = self.fetchall(
            """
            SELECT form_id, form_name, is_complete
            FROM forms
            ORDER BY list_order, form_id
            """
        )
        result = [Form.from_row(r) for r in rows]
        logger.debug("get_forms(): {} forms", len(result))
        return result
