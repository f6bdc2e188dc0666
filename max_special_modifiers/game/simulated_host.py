"""Simulated host game.

A small in-memory host with the reference affix pool, used by the CLI
simulation and the tests.
"""

import random
from dataclasses import dataclass
from typing import Iterable, Optional

from max_special_modifiers.core.constants import KEROPOK_MARKER
from max_special_modifiers.core.families import detect_family, is_family_tagged
from max_special_modifiers.core.host import GameHost
from max_special_modifiers.data.loaders import load_affixes
from max_special_modifiers.data.models.affix import Affix
from max_special_modifiers.data.models.item import BonusInstance, ItemInstance


@dataclass
class Creature:
    """A creature that can be credited with a kill."""
    name: str
    can_feed_keropok: bool = True


class SimulatedHost(GameHost):
    """
    Host with random loot rolls.

    Kill pressure: each kill has `explicit_roll_chance` to add an unrelated
    explicit bonus, and the completion chance grows by `chance_per_kill`.
    """

    def __init__(
        self,
        affixes: Optional[list[Affix]] = None,
        seed: Optional[int] = None,
        explicit_roll_chance: float = 0.5,
        chance_per_kill: float = 0.1,
    ):
        pool = affixes if affixes is not None else load_affixes()
        self.pool: dict[str, Affix] = {a.id: a for a in pool}
        self.rng = random.Random(seed)
        self.explicit_roll_chance = explicit_roll_chance
        self.chance_per_kill = chance_per_kill

    def get_affix(self, catalog_id: str) -> Optional[Affix]:
        return self.pool.get(catalog_id)

    def _roll_bonus(self, item: ItemInstance, affix: Affix) -> BonusInstance:
        """Attach an affix with a random roll inside its template."""
        bonus = BonusInstance(
            affix=affix,
            lower=self.rng.uniform(affix.lower_min, affix.lower_max),
            upper=self.rng.uniform(affix.upper_min, affix.upper_max),
        )
        if bonus.lower > bonus.upper:
            bonus.lower, bonus.upper = bonus.upper, bonus.lower
        item.bonuses.append(bonus)
        item.refresh_index()
        return bonus

    def grant_default_family_bonus(self, item: ItemInstance, tags: Iterable[str]) -> None:
        """Grant one random implicit bonus of the tags' family."""
        family = detect_family(tags)
        if family is None:
            return
        candidates = [
            a for a in self.pool.values()
            if a.is_implicit and detect_family(a.tags) == family and not item.has_affix(a.id)
        ]
        if candidates:
            self._roll_bonus(item, self.rng.choice(candidates))

    def roll_normal_family_bonus(
        self,
        item: ItemInstance,
        curse_tags: Iterable[str],
        kill_count: int,
    ) -> float:
        """Maybe roll an unrelated explicit bonus; curse tags roll a curse."""
        curse_tags = list(curse_tags)
        if curse_tags:
            curses = [
                a for a in self.pool.values()
                if not a.is_implicit and any(a.has_tag(t) for t in curse_tags)
            ]
            if curses:
                self._roll_bonus(item, self.rng.choice(curses))

        if self.rng.random() < self.explicit_roll_chance:
            unrelated = [
                a for a in self.pool.values()
                if not a.is_implicit and not is_family_tagged(a.tags)
            ]
            if unrelated:
                self._roll_bonus(item, self.rng.choice(unrelated))

        return min(1.0, kill_count * self.chance_per_kill)

    def is_eligible_creature(self, creature) -> bool:
        return bool(getattr(creature, "can_feed_keropok", False))

    def create_item(self, item_id: str, level: int = 1, keropok: bool = False) -> ItemInstance:
        """Create an empty item, optionally with a normal Keropok bonus."""
        item = ItemInstance(id=item_id, level=level)
        if keropok:
            normal = [
                a for a in self.pool.values()
                if not a.is_implicit and a.tags == (KEROPOK_MARKER,)
            ]
            if normal:
                self._roll_bonus(item, self.rng.choice(normal))
        return item
