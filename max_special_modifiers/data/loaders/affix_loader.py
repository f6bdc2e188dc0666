"""Affix pool loader.

Reference bonus pool used by the simulated host.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Optional

from ..models.affix import Affix


# Get the data directory path
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"
IMPLICIT_FILE = DATA_DIR / "affixes" / "implicit.json"
EXPLICIT_FILE = DATA_DIR / "affixes" / "explicit.json"


def _parse_affix(affix_data: dict, is_implicit: bool) -> Affix:
    """Parse an affix from JSON data.

    Range values are given as [min, max, per_level].

    Args:
        affix_data: Dictionary containing affix data.
        is_implicit: Whether the file holds implicit affixes.

    Returns:
        Affix object.
    """
    lower = affix_data.get("lower", [0, 0, 0])
    upper = affix_data.get("upper", lower)

    return Affix(
        id=affix_data["id"],
        name=affix_data["name"],
        tags=tuple(affix_data.get("tags", [])),
        is_implicit=is_implicit,
        lower_min=lower[0],
        lower_max=lower[1],
        lower_per_level=lower[2],
        upper_min=upper[0],
        upper_max=upper[1],
        upper_per_level=upper[2],
        multiplier=affix_data.get("multiplier"),
    )


@lru_cache(maxsize=1)
def load_implicit_affixes() -> list[Affix]:
    """Load all implicit family affixes from JSON file."""
    with open(IMPLICIT_FILE, "r", encoding="utf-8") as f:
        data = json.load(f)

    return [_parse_affix(affix, True) for affix in data["affixes"]]


@lru_cache(maxsize=1)
def load_explicit_affixes() -> list[Affix]:
    """Load all explicit (normally rolled) affixes from JSON file."""
    with open(EXPLICIT_FILE, "r", encoding="utf-8") as f:
        data = json.load(f)

    return [_parse_affix(affix, False) for affix in data["affixes"]]


def load_affixes() -> list[Affix]:
    """Load the whole pool (implicit and explicit)."""
    return load_implicit_affixes() + load_explicit_affixes()


def get_affix_by_id(affix_id: str) -> Optional[Affix]:
    """
    Get an affix by its catalog id.

    Args:
        affix_id: The catalog identifier.

    Returns:
        Affix if found, None otherwise.
    """
    for affix in load_affixes():
        if affix.id == affix_id:
            return affix
    return None


def get_affixes_by_tag(marker: str, implicit: Optional[bool] = None) -> list[Affix]:
    """
    Get all affixes carrying a tag marker.

    Args:
        marker: Substring searched in the affix tags.
        implicit: Restrict to implicit (True) or explicit (False) affixes.

    Returns:
        Matching affixes.
    """
    return [
        affix for affix in load_affixes()
        if affix.has_tag(marker) and (implicit is None or affix.is_implicit == implicit)
    ]


def clear_cache() -> None:
    """Clear the affix cache. Useful for testing or hot-reloading data."""
    load_implicit_affixes.cache_clear()
    load_explicit_affixes.cache_clear()
