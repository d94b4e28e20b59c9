"""Base model for the Klarna Payments SDK."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class KlarnaModel(BaseModel):
    """Base model with common configuration.

    Field names match the snake_case keys used on the wire, so models
    serialize and validate without an alias table.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
        frozen=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to its wire representation."""
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "KlarnaModel":
        """Create model from dictionary."""
        return cls.model_validate(data)
