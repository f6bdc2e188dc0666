"""Host game contract.

The host owns loot generation, creatures and the bonus pool. The mod reads
from it and mutates items through this narrow interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Iterable, Optional

if TYPE_CHECKING:
    from max_special_modifiers.data.models.affix import Affix
    from max_special_modifiers.data.models.item import ItemInstance


class GameHost(ABC):
    """
    Abstract host game.

    `grant_family_bonuses` and `register_kill` are the host's own event
    methods; the mod loader intercepts them. The remaining methods are the
    collaborators the mod calls back into.
    """

    @abstractmethod
    def get_affix(self, catalog_id: str) -> Optional["Affix"]:
        """Look up an entry of the host's bonus pool."""

    @abstractmethod
    def grant_default_family_bonus(self, item: "ItemInstance", tags: Iterable[str]) -> None:
        """Original, unmodified family bonus granting."""

    @abstractmethod
    def roll_normal_family_bonus(
        self,
        item: "ItemInstance",
        curse_tags: Iterable[str],
        kill_count: int,
    ) -> float:
        """
        Roll a normal family-tagged bonus weighted by kill pressure.

        May attach a new explicit bonus to the item.

        Returns:
            Completion probability in [0, 1].
        """

    @abstractmethod
    def is_eligible_creature(self, creature: Any) -> bool:
        """Check whether a creature's kills count toward progression."""

    # =========================================================================
    # EVENTS (interception points)
    # =========================================================================

    def grant_family_bonuses(self, item: "ItemInstance", tags: Iterable[str]) -> None:
        """Grant the bonuses of the family identified by tags."""
        self.grant_default_family_bonus(item, tags)

    def register_kill(
        self,
        item: "ItemInstance",
        creature: Any,
        curse_tags: Iterable[str] = (),
    ) -> bool:
        """Register a kill made with an item. Returns False if rejected."""
        if not self.is_eligible_creature(creature):
            return False
        self.roll_normal_family_bonus(item, curse_tags, 0)
        return True

    def begin_keropok_progression(self, item: "ItemInstance") -> None:
        """An item started a new Keropok progression."""


class HostBonusAdapter:
    """
    Wraps a bonus object owned by the host.

    Exposes `affix`, `lower` and `upper` so the maximizer can work on it;
    writes are copied to the foreign object's fields.
    """

    def __init__(
        self,
        foreign: Any,
        affix: "Affix",
        lower_field: str = "lower",
        upper_field: str = "upper",
    ):
        self.foreign = foreign
        self.affix = affix
        self._lower_field = lower_field
        self._upper_field = upper_field

    @property
    def lower(self) -> float:
        return getattr(self.foreign, self._lower_field)

    @lower.setter
    def lower(self, value: float) -> None:
        setattr(self.foreign, self._lower_field, value)

    @property
    def upper(self) -> float:
        return getattr(self.foreign, self._upper_field)

    @upper.setter
    def upper(self, value: float) -> None:
        setattr(self.foreign, self._upper_field, value)

    def __repr__(self) -> str:
        return f"HostBonusAdapter({self.affix.id})"
