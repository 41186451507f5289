"""Host form models - forms and their Views."""

from app.models.forms.entities import Form, View
from app.models.forms.form import FORM_DDL
from app.models.forms.view import VIEW_DDL, VIEW_INDEXES

__all__ = [
    "FORM_DDL",
    "VIEW_DDL",
    "VIEW_INDEXES",
    "Form",
    "View",
]
