"""Common models - base classes shared across domains."""

from app.models.common.base import BaseEntity

__all__ = [
    "BaseEntity",
]
