"""Tests for the family configuration loader."""

import json

import pytest

from max_special_modifiers.core.families import Family
from max_special_modifiers.data.loaders.config_loader import (
    dump_config,
    load_config,
    save_config,
)
from max_special_modifiers.data.models.config import ModConfig


class TestModConfig:
    """Tests for the configuration model."""

    def test_defaults(self):
        config = ModConfig()
        assert config.is_valid
        assert config.enabled_names(Family.KEROPOK) == ["Increased buff effect"]
        assert len(config.enabled_names(Family.ORANG_BUNIAN)) == 24
        assert len(config.enabled_names(Family.AWAKENED)) == 23

    def test_defaults_not_shared(self):
        first = ModConfig()
        first.keropok["HP Regen"] = True
        assert ModConfig().keropok["HP Regen"] is False

    def test_invalid_sentinel(self):
        config = ModConfig.invalid()
        assert config.is_valid is False
        for family in Family:
            assert config.enabled_names(family) == []

    def test_persisted_key_names(self):
        assert list(ModConfig().to_dict()) == ["Keropok", "OrangBunian", "Awakened"]

    def test_populate_by_name(self):
        config = ModConfig(awakened={"Minion Damage": True})
        assert config.enabled_names(Family.AWAKENED) == ["Minion Damage"]


class TestLoadConfig:
    """Tests for reading and writing the configuration file."""

    def test_missing_file_writes_defaults(self, tmp_path):
        path = tmp_path / "config" / "MaxSpecialModifiers.json"
        config = load_config(path)

        assert config.is_valid
        assert path.exists()
        assert json.loads(path.read_text(encoding="utf-8")) == ModConfig().to_dict()

    def test_load_custom_values(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "Keropok": {"HP Regen": True, "Increased buff effect": False},
        }), encoding="utf-8")

        config = load_config(path)

        assert config.enabled_names(Family.KEROPOK) == ["HP Regen"]
        # Missing families fall back to the defaults
        assert len(config.enabled_names(Family.AWAKENED)) == 23

    def test_unknown_top_level_keys_ignored(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"Keropok": {}, "Other": 1}', encoding="utf-8")
        assert load_config(path).is_valid

    @pytest.mark.parametrize("content", [
        "{not json",
        "[1, 2, 3]",
        '{"Keropok": {"HP Regen": "definitely"}}',
        '{"Awakened": 5}',
    ])
    def test_corrupt_file_gives_invalid(self, tmp_path, content):
        path = tmp_path / "config.json"
        path.write_text(content, encoding="utf-8")
        assert load_config(path).is_valid is False

    def test_round_trip_is_byte_stable(self, tmp_path):
        path = tmp_path / "config.json"
        custom = ModConfig(Keropok={"Max HP": True, "HP Regen": False})
        save_config(custom, path)
        original = path.read_bytes()

        save_config(load_config(path), path)

        assert path.read_bytes() == original

    def test_dump_format(self):
        text = dump_config(ModConfig(Keropok={"A": True}, OrangBunian={}, Awakened={}))
        assert text.endswith("}\n")
        assert '    "Keropok": {\n        "A": true\n    },' in text

    def test_refuses_to_save_invalid(self, tmp_path):
        with pytest.raises(ValueError):
            save_config(ModConfig.invalid(), tmp_path / "config.json")
