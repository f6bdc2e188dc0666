"""Family configuration model.

The only persisted artifact: for each family, a flat mapping from bonus
display name to an enabled flag.
"""

from pydantic import BaseModel, Field, PrivateAttr

from max_special_modifiers.core.constants import (
    DEFAULT_KEROPOK_CONFIG,
    DEFAULT_ORANG_BUNIAN_CONFIG,
    DEFAULT_AWAKENED_CONFIG,
)
from max_special_modifiers.core.families import Family


class ModConfig(BaseModel):
    """Which implicit affixes are available for each family."""
    keropok: dict[str, bool] = Field(
        default_factory=lambda: dict(DEFAULT_KEROPOK_CONFIG),
        alias="Keropok",
        description="Keropok implicit affixes",
    )
    orang_bunian: dict[str, bool] = Field(
        default_factory=lambda: dict(DEFAULT_ORANG_BUNIAN_CONFIG),
        alias="OrangBunian",
        description="Orang Bunian implicit affixes",
    )
    awakened: dict[str, bool] = Field(
        default_factory=lambda: dict(DEFAULT_AWAKENED_CONFIG),
        alias="Awakened",
        description="Awakened implicit affixes",
    )

    model_config = {"populate_by_name": True, "extra": "ignore"}

    _valid: bool = PrivateAttr(default=True)

    @classmethod
    def invalid(cls) -> "ModConfig":
        """Sentinel returned when the configuration could not be loaded.

        Every override is disabled while this config is active.
        """
        config = cls(Keropok={}, OrangBunian={}, Awakened={})
        config._valid = False
        return config

    @property
    def is_valid(self) -> bool:
        return self._valid

    def for_family(self, family: Family) -> dict[str, bool]:
        """Get the name -> enabled mapping of a family."""
        if family == Family.KEROPOK:
            return self.keropok
        if family == Family.ORANG_BUNIAN:
            return self.orang_bunian
        return self.awakened

    def enabled_names(self, family: Family) -> list[str]:
        """Get enabled display names of a family, in configuration order."""
        if not self._valid:
            return []
        return [name for name, enabled in self.for_family(family).items() if enabled]

    def to_dict(self) -> dict[str, dict[str, bool]]:
        """Serialize with the persisted key names."""
        return self.model_dump(by_alias=True)
