"""Item and bonus instance models.

Runtime state owned by the mod: an item carries an ordered list of bonus
instances, each one a mutable attachment of an Affix.
"""

from dataclasses import dataclass, field

from max_special_modifiers.core.families import is_family_tagged
from max_special_modifiers.data.models.affix import Affix


@dataclass
class BonusInstance:
    """An Affix attached to an item, with its realized range."""

    affix: Affix
    lower: float = 0.0
    upper: float = 0.0

    @classmethod
    def from_affix(cls, affix: Affix) -> "BonusInstance":
        """Create an instance rolled at the template's minimum."""
        return cls(affix=affix, lower=affix.lower_min, upper=affix.upper_min)

    @property
    def catalog_id(self) -> str:
        return self.affix.id

    @property
    def is_implicit(self) -> bool:
        return self.affix.is_implicit

    @property
    def family_tagged(self) -> bool:
        """Check if the affix belongs to any special family."""
        return is_family_tagged(self.affix.tags)

    def has_tag(self, marker: str) -> bool:
        return self.affix.has_tag(marker)

    def __repr__(self) -> str:
        return f"BonusInstance({self.affix.id}, {self.lower:g}-{self.upper:g})"


@dataclass
class ItemInstance:
    """An item with its bonuses and a lookup index over them."""

    id: str
    level: int = 1
    bonuses: list[BonusInstance] = field(default_factory=list)
    _index: dict[str, list[BonusInstance]] = field(
        default_factory=dict, init=False, repr=False
    )

    def __post_init__(self):
        self.refresh_index()

    def refresh_index(self) -> None:
        """Rebuild the catalog id index after the bonus list changed."""
        index: dict[str, list[BonusInstance]] = {}
        for bonus in self.bonuses:
            index.setdefault(bonus.catalog_id, []).append(bonus)
        self._index = index

    def add_bonus(self, affix: Affix, refresh: bool = True) -> BonusInstance:
        """
        Append a new bonus for the given affix.

        Args:
            affix: Catalog entry to attach.
            refresh: Rebuild the index right away.

        Returns:
            The created BonusInstance.
        """
        bonus = BonusInstance.from_affix(affix)
        self.bonuses.append(bonus)
        if refresh:
            self.refresh_index()
        return bonus

    def remove_bonus(self, bonus: BonusInstance) -> bool:
        """Remove a bonus. Returns False if it is not on this item."""
        if bonus not in self.bonuses:
            return False
        self.bonuses.remove(bonus)
        self.refresh_index()
        return True

    def has_affix(self, catalog_id: str) -> bool:
        return bool(self._index.get(catalog_id))

    def get_bonuses(self, catalog_id: str) -> list[BonusInstance]:
        return list(self._index.get(catalog_id, []))
