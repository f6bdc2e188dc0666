"""Max Special Modifiers Constants."""

from typing import Final

# =============================================================================
# FAMILY MARKERS
# =============================================================================
# Family membership is a substring test against an affix tag.
# Priority when several markers are present: Keropok, Orang Bunian, Awakened.
KEROPOK_MARKER: Final[str] = "Keropok"
ORANG_BUNIAN_MARKER: Final[str] = "Orang Bunian"
AWAKENED_MARKER: Final[str] = "Awakened"

FAMILY_MARKERS: Final[tuple[str, ...]] = (
    KEROPOK_MARKER,
    ORANG_BUNIAN_MARKER,
    AWAKENED_MARKER,
)

# =============================================================================
# KEROPOK PROGRESSION
# =============================================================================
# Unrelated explicit bonuses required before the completion bonus can roll
COMPLETION_THRESHOLD: Final[int] = 6

# Completion is forced once kill_count exceeds this value
GUARANTEED_KILL_COUNT: Final[int] = 5

# =============================================================================
# HOOKS
# =============================================================================
PATCH_ID: Final[str] = "com.max-special-modifiers"
LOG_PREFIX: Final[str] = "[MaxSpecialModifiers]"

# =============================================================================
# CATALOG IDS
# =============================================================================
# Display name -> identifier used by the host's implicit bonus pool.
# Identifiers are not derivable from names; several names map to
# different identifiers depending on the family.
KEROPOK_CATALOG_IDS: Final[dict[str, str]] = {
    "Increased buff effect": "keropok_implicit_buff_effect",
    "Increased buff duration": "keropok_implicit_buff_duration",
    "HP Regen": "keropok_implicit_hp_regen",
    "Damage Reflection": "keropok_implicit_damage_reflect",
    "Elemental Resistance": "keropok_implicit_all_resistance",
    "Class Passives Multiplier": "keropok_implicit_class_passive_mult",
    "HP Steal": "keropok_implicit_life_steal",
    "MP Steal": "keropok_implicit_mana_steal",
    "Crisis Threshold": "keropok_implicit_crisis_threshold",
    "Crisis Absorb": "keropok_implicit_crisis_absorb",
    "Max HP": "keropok_implicit_max_hp",
    "Cold Chance Defense": "keropok_implicit_chill_avoid",
    "Movement Speed": "keropok_implicit_move_speed",
}

ORANG_BUNIAN_CATALOG_IDS: Final[dict[str, str]] = {
    "Additional Minions": "bunian_implicit_minion_count",
    "Minion Max HP": "bunian_implicit_minion_hp",
    "HP Multiplier": "bunian_implicit_hp_mult",
    "Max Skill Uses": "bunian_implicit_skill_charges",
    "Increased Movement Speed": "bunian_implicit_move_speed",
    "Elemental Chance": "bunian_implicit_elemental_chance",
    "Absorb": "bunian_implicit_absorb",
    "Increased Projectile Radius": "bunian_implicit_projectile_radius",
    "Basic attack as fire": "bunian_implicit_attack_as_fire",
    "Basic attack as ice": "bunian_implicit_attack_as_ice",
    "Fire penetration": "bunian_implicit_fire_pen",
    "Ice penetration": "bunian_implicit_ice_pen",
    "Blind on hit": "bunian_implicit_blind_on_hit",
    "Slow on hit": "bunian_implicit_slow_on_hit",
    "Fire Resistance Cap": "bunian_implicit_fire_res_cap",
    "Ice Resistance Cap": "bunian_implicit_ice_res_cap",
    "Attack Damage": "bunian_implicit_attack_damage",
    "Cooldown Reduction": "bunian_implicit_cdr",
    "Skill Speed": "bunian_implicit_skill_speed",
    "Class Passives Multiplier": "bunian_implicit_class_passive_mult",
    "Triggered Chance No Charge Use": "bunian_implicit_trigger_free_charge",
    "Triggered Damage Multiplier": "bunian_implicit_trigger_damage_mult",
    "Crisis Damage": "bunian_implicit_crisis_damage",
    "Minion Movement Speed": "bunian_implicit_minion_move_speed",
}

AWAKENED_CATALOG_IDS: Final[dict[str, str]] = {
    "Minion Damage": "awakened_implicit_minion_damage",
    "Minion Avoidance": "awakened_implicit_minion_avoid",
    "MP Multiplier": "awakened_implicit_mp_mult",
    "Cooldown Reduction": "awakened_implicit_cdr",
    "Elemental Multiplier": "awakened_implicit_elemental_mult",
    "Elemental Resistance": "awakened_implicit_all_resistance",
    "Projectile Speed": "awakened_implicit_projectile_speed",
    "Armour Break": "awakened_implicit_armour_break",
    "Basic attack as lightning": "awakened_implicit_attack_as_lightning",
    "Basic attack as poison": "awakened_implicit_attack_as_poison",
    "Lightning penetration": "awakened_implicit_lightning_pen",
    "Poison penetration": "awakened_implicit_poison_pen",
    "Frenzy on hit": "awakened_implicit_frenzy_on_hit",
    "Agility on hit": "awakened_implicit_agility_on_hit",
    "Lightning Resistance Cap": "awakened_implicit_lightning_res_cap",
    "Poison Resistance Cap": "awakened_implicit_poison_res_cap",
    "Skill Damage": "awakened_implicit_skill_damage",
    "Critical Hit Multiplier": "awakened_implicit_crit_mult",
    "Crisis Threshold": "awakened_implicit_crisis_threshold",
    "Triggered Chance No Charge Use": "awakened_implicit_trigger_free_charge",
    "Triggered Skill Speed": "awakened_implicit_trigger_skill_speed",
    "Crisis Absorb": "awakened_implicit_crisis_absorb",
    "Movement Skill Distance Multiplier": "awakened_implicit_move_skill_distance",
}

# =============================================================================
# DEFAULT FAMILY CONFIGURATION
# =============================================================================
# Written to disk when no configuration file exists yet.
DEFAULT_KEROPOK_CONFIG: Final[dict[str, bool]] = {
    name: name == "Increased buff effect" for name in KEROPOK_CATALOG_IDS
}
DEFAULT_ORANG_BUNIAN_CONFIG: Final[dict[str, bool]] = {
    name: True for name in ORANG_BUNIAN_CATALOG_IDS
}
DEFAULT_AWAKENED_CONFIG: Final[dict[str, bool]] = {
    name: True for name in AWAKENED_CATALOG_IDS
}
