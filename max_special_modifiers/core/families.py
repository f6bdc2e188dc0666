"""Special modifier families.

Each family is identified by a marker that appears inside affix tags.
"""

from enum import Enum
from typing import Iterable, Optional

from max_special_modifiers.core.constants import (
    KEROPOK_MARKER,
    ORANG_BUNIAN_MARKER,
    AWAKENED_MARKER,
    FAMILY_MARKERS,
)


class Family(Enum):
    """Tag families whose bonuses are overridden."""

    KEROPOK = KEROPOK_MARKER
    ORANG_BUNIAN = ORANG_BUNIAN_MARKER
    AWAKENED = AWAKENED_MARKER

    @property
    def marker(self) -> str:
        return self.value

    def matches(self, tag: str) -> bool:
        return self.marker in tag

    def __repr__(self) -> str:
        return f"Family.{self.name}"


# Detection order; the first family whose marker is found wins
FAMILY_PRIORITY: tuple[Family, ...] = tuple(Family(m) for m in FAMILY_MARKERS)


def detect_family(tags: Iterable[str]) -> Optional[Family]:
    """
    Determine which family a tag set belongs to.

    Ambiguous tag sets are resolved by FAMILY_PRIORITY, never combined.

    Args:
        tags: Tag names of the affix or trigger.

    Returns:
        The matching Family, or None if no marker is present.
    """
    tags = list(tags)
    for family in FAMILY_PRIORITY:
        if any(family.matches(tag) for tag in tags):
            return family
    return None


def is_family_tagged(tags: Iterable[str]) -> bool:
    """Check whether any tag carries one of the family markers."""
    return detect_family(tags) is not None
