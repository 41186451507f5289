"""Base entity class for all domain entities."""

from collections.abc import Sequence
from dataclasses import asdict, dataclass, fields
from typing import Any, Self


@dataclass
class BaseEntity:
    """Base class for all entities."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary."""
        return asdict(self)

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> Self:
        """Build entity from a DB row whose columns follow field order."""
        names = [f.name for f in fields(cls)]
        return cls(**dict(zip(names, row, strict=True)))
