"""Shared fixtures for modifier tests."""

from typing import Iterable, Optional

import pytest

from max_special_modifiers.core.host import GameHost
from max_special_modifiers.data.models.affix import Affix
from max_special_modifiers.data.models.item import BonusInstance, ItemInstance


def _make_affix(
    affix_id: str,
    tags=("Keropok Implicit",),
    is_implicit: bool = True,
    lower=(5.0, 10.0, 0.5),
    upper=(10.0, 20.0, 1.0),
    multiplier: Optional[float] = None,
    name: Optional[str] = None,
) -> Affix:
    return Affix(
        id=affix_id,
        name=name or affix_id,
        tags=tuple(tags),
        is_implicit=is_implicit,
        lower_min=lower[0],
        lower_max=lower[1],
        lower_per_level=lower[2],
        upper_min=upper[0],
        upper_max=upper[1],
        upper_per_level=upper[2],
        multiplier=multiplier,
    )


class FakeHost(GameHost):
    """Deterministic host: every roll is scripted by the test."""

    def __init__(self, affixes: Iterable[Affix] = ()):
        self.pool = {a.id: a for a in affixes}
        self.eligible = True
        # Each roll pops (affixes to attach, chance); default adds nothing
        self.rolls: list[tuple[list[Affix], float]] = []
        self.default_grants: list[tuple[str, list[str]]] = []
        self.roll_calls: list[tuple[str, list[str], int]] = []

    def get_affix(self, catalog_id: str) -> Optional[Affix]:
        return self.pool.get(catalog_id)

    def grant_default_family_bonus(self, item, tags) -> None:
        self.default_grants.append((item.id, list(tags)))

    def roll_normal_family_bonus(self, item, curse_tags, kill_count) -> float:
        self.roll_calls.append((item.id, list(curse_tags), kill_count))
        if not self.rolls:
            return 0.0
        affixes, chance = self.rolls.pop(0)
        for affix in affixes:
            item.add_bonus(affix)
        return chance

    def is_eligible_creature(self, creature) -> bool:
        return self.eligible


@pytest.fixture
def make_affix():
    """Factory for catalog entries."""
    return _make_affix


@pytest.fixture
def unrelated_affixes():
    """Explicit affixes with no family tag."""
    return [
        _make_affix(f"unrelated_{i}", tags=("Attack",), is_implicit=False)
        for i in range(10)
    ]


@pytest.fixture
def keropok_implicit():
    """Pool entry behind the default 'Increased buff effect' name."""
    return _make_affix(
        "keropok_implicit_buff_effect",
        tags=("Keropok Implicit", "Buff"),
        lower=(8.0, 12.0, 0.2),
        upper=(12.0, 18.0, 0.3),
        name="Increased buff effect",
    )


@pytest.fixture
def bunian_implicits():
    return [
        _make_affix("bunian_implicit_minion_count", tags=("Orang Bunian Implicit",),
                    lower=(1, 1, 0), upper=(1, 2, 0)),
        _make_affix("bunian_implicit_hp_mult", tags=("Orang Bunian Implicit",)),
        _make_affix("bunian_implicit_class_passive_mult", tags=("Orang Bunian Implicit",),
                    multiplier=1.25),
    ]


@pytest.fixture
def fake_host(keropok_implicit, bunian_implicits):
    return FakeHost([keropok_implicit, *bunian_implicits])


@pytest.fixture
def item():
    return ItemInstance(id="item_1", level=10)


def add_unrelated(item: ItemInstance, affixes: list[Affix], count: int) -> None:
    for affix in affixes[:count]:
        item.bonuses.append(BonusInstance.from_affix(affix))
    item.refresh_index()


@pytest.fixture
def with_unrelated(unrelated_affixes):
    """Helper that gives an item N unrelated explicit bonuses."""
    def _add(item: ItemInstance, count: int) -> ItemInstance:
        add_unrelated(item, unrelated_affixes, count)
        return item
    return _add
