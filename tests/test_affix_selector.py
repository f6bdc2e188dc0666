"""Tests for the Forced-Affix Selector."""

import pytest

from max_special_modifiers.core.affix_catalog import AffixCatalog
from max_special_modifiers.core.affix_selector import (
    ForcedAffixSelector,
    SelectionMode,
    SelectionStatus,
)
from max_special_modifiers.core.families import Family
from max_special_modifiers.core.value_maximizer import BonusValueMaximizer
from max_special_modifiers.data.models.config import ModConfig
from max_special_modifiers.data.models.item import ItemInstance


def create_selector(host, config=None, seed=42):
    config = config if config is not None else ModConfig()
    maximizer = BonusValueMaximizer(is_active=lambda: config.is_valid)
    return ForcedAffixSelector(
        config=lambda: config,
        catalog=AffixCatalog(),
        affix_source=host.get_affix,
        maximizer=maximizer,
        seed=seed,
    )


def catalog_ids(item: ItemInstance) -> list[str]:
    return [b.catalog_id for b in item.bonuses]


class TestSkipping:
    """Cases where the host's own bonus must be granted instead."""

    def test_no_family_tag(self, fake_host, item):
        result = create_selector(fake_host).select_and_attach(item, ["Fire"])
        assert result.status == SelectionStatus.SKIPPED
        assert item.bonuses == []

    def test_all_disabled(self, fake_host, item):
        config = ModConfig(Keropok={"Increased buff effect": False})
        result = create_selector(fake_host, config).select_and_attach(item, ["Keropok Implicit"])
        assert result.is_skipped
        assert result.family == Family.KEROPOK
        assert item.bonuses == []

    def test_empty_family_config(self, fake_host, item):
        config = ModConfig(Awakened={})
        result = create_selector(fake_host, config).select_and_attach(item, ["Awakened"])
        assert result.is_skipped

    def test_invalid_config_always_skips(self, fake_host, item):
        selector = create_selector(fake_host, ModConfig.invalid())
        for tags in (["Keropok"], ["Orang Bunian"], ["Awakened"]):
            assert selector.select_and_attach(item, tags).is_skipped
        assert item.bonuses == []

    def test_only_unknown_names_enabled(self, fake_host, item):
        """Unknown configuration keys are inert."""
        config = ModConfig(Keropok={"Not A Real Bonus": True})
        result = create_selector(fake_host, config).select_and_attach(item, ["Keropok"])
        assert result.is_skipped
        assert result.skipped == ["Not A Real Bonus"]


class TestAttaching:
    """Tests for the two selection modes."""

    def test_single_mode_attaches_one(self, fake_host, item):
        selector = create_selector(fake_host)
        result = selector.select_and_attach(item, ["Orang Bunian Implicit"], SelectionMode.SINGLE)

        assert result.status == SelectionStatus.ATTACHED
        assert len(result.attached) == 1
        assert len(item.bonuses) == 1

    def test_all_mode_attaches_every_available(self, fake_host, item):
        """Names missing from the host pool are skipped, the rest attach."""
        result = create_selector(fake_host).select_and_attach(item, ["Orang Bunian Implicit"])

        assert result.status == SelectionStatus.ATTACHED
        assert sorted(catalog_ids(item)) == [
            "bunian_implicit_class_passive_mult",
            "bunian_implicit_hp_mult",
            "bunian_implicit_minion_count",
        ]
        assert len(result.skipped) == 24 - 3

    def test_keropok_defaults_to_single(self, fake_host, item):
        result = create_selector(fake_host).select_and_attach(item, ["Keropok Implicit"])
        assert catalog_ids(item) == ["keropok_implicit_buff_effect"]
        assert result.attached[0] is item.bonuses[0]

    def test_attached_bonus_is_maximized(self, fake_host, item):
        create_selector(fake_host).select_and_attach(item, ["Keropok Implicit"])
        bonus = item.bonuses[0]
        # level 10: 12 + 0.2 * 10, 18 + 0.3 * 10
        assert bonus.lower == pytest.approx(14.0)
        assert bonus.upper == pytest.approx(21.0)

    def test_index_refreshed(self, fake_host, item):
        create_selector(fake_host).select_and_attach(item, ["Keropok Implicit"])
        assert item.has_affix("keropok_implicit_buff_effect")

    def test_existing_implicits_maximized_too(self, fake_host, item, bunian_implicits):
        """The maximizer runs over the whole item, not just new bonuses."""
        existing = item.add_bonus(bunian_implicits[1])
        create_selector(fake_host).select_and_attach(item, ["Keropok Implicit"])
        assert existing.upper == pytest.approx(30.0)

    def test_ambiguous_tags_use_first_family(self, fake_host, item):
        create_selector(fake_host).select_and_attach(item, ["Awakened", "Keropok"])
        assert catalog_ids(item) == ["keropok_implicit_buff_effect"]


class TestNoDuplicates:
    """The same catalog entry is never attached twice."""

    def test_repeat_all_mode(self, fake_host, item):
        selector = create_selector(fake_host)
        selector.select_and_attach(item, ["Orang Bunian"])
        second = selector.select_and_attach(item, ["Orang Bunian"])

        ids = catalog_ids(item)
        assert len(ids) == len(set(ids)) == 3
        assert second.status == SelectionStatus.ATTACHED
        assert second.attached == []

    def test_repeat_single_mode(self, fake_host, item):
        selector = create_selector(fake_host)
        for _ in range(10):
            selector.select_and_attach(item, ["Orang Bunian"], SelectionMode.SINGLE)

        ids = catalog_ids(item)
        assert len(ids) == len(set(ids)) == 3

    def test_duplicate_matched_by_identity_not_name(self, fake_host, item, make_affix):
        """A different affix sharing the display name does not block attaching."""
        item.add_bonus(make_affix("other_buff", name="Increased buff effect"))
        create_selector(fake_host).select_and_attach(item, ["Keropok"])
        assert "keropok_implicit_buff_effect" in catalog_ids(item)


class TestDynamicConfig:

    def test_reads_current_config(self, fake_host, item):
        state = {"config": ModConfig(Keropok={})}
        selector = ForcedAffixSelector(
            config=lambda: state["config"],
            catalog=AffixCatalog(),
            affix_source=fake_host.get_affix,
            maximizer=BonusValueMaximizer(),
        )
        assert selector.select_and_attach(item, ["Keropok"]).is_skipped

        state["config"] = ModConfig()
        assert not selector.select_and_attach(item, ["Keropok"]).is_skipped

    def test_mode_override_per_family(self, fake_host, item):
        selector = ForcedAffixSelector(
            config=ModConfig,
            catalog=AffixCatalog(),
            affix_source=fake_host.get_affix,
            maximizer=BonusValueMaximizer(),
            modes={Family.ORANG_BUNIAN: SelectionMode.SINGLE},
            seed=1,
        )
        selector.select_and_attach(item, ["Orang Bunian"])
        assert len(item.bonuses) == 1
