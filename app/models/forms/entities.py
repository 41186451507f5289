"""Form and View entities."""

from dataclasses import dataclass

from app.models.common import BaseEntity


@dataclass
class Form(BaseEntity):
    """A form configured in the host platform."""

    form_id: int
    form_name: str
    is_complete: bool


@dataclass
class View(BaseEntity):
    """A View (filtered presentation) of a form's submissions."""

    view_id: int
    form_id: int
    view_name: str
