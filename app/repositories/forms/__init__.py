"""Host form repositories."""

from app.repositories.forms.form import FormRepository
from app.repositories.forms.view import ViewRepository

__all__ = [
    "FormRepository",
    "ViewRepository",
]
