"""Affix (catalog entry) data model."""

from typing import Optional

from pydantic import BaseModel, Field


class Affix(BaseModel):
    """Immutable definition of a bonus type in the host's bonus pool."""
    id: str = Field(..., description="Catalog identifier (lowercase, underscores)")
    name: str = Field(..., description="Display name")
    tags: tuple[str, ...] = Field(default=(), description="Tag names, used for family membership")
    is_implicit: bool = Field(default=False, description="Attached by the mod rather than rolled")
    lower_min: float = Field(default=0.0, description="Lower bound, minimum roll")
    lower_max: float = Field(default=0.0, description="Lower bound, maximum roll")
    lower_per_level: float = Field(default=0.0, description="Lower bound growth per item level")
    upper_min: float = Field(default=0.0, description="Upper bound, minimum roll")
    upper_max: float = Field(default=0.0, description="Upper bound, maximum roll")
    upper_per_level: float = Field(default=0.0, description="Upper bound growth per item level")
    multiplier: Optional[float] = Field(default=None, description="Applied after level scaling")

    model_config = {"frozen": True}

    def has_tag(self, marker: str) -> bool:
        """Check whether any tag contains the given marker."""
        return any(marker in tag for tag in self.tags)

    def __repr__(self) -> str:
        kind = "implicit" if self.is_implicit else "explicit"
        return f"Affix({self.id}, {kind})"
