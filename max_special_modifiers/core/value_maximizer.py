"""Bonus Value Maximizer.

Rewrites the realized range of implicit family bonuses to the highest value
their template allows at the item's level.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Callable, Optional

from max_special_modifiers.core.families import is_family_tagged

if TYPE_CHECKING:
    from max_special_modifiers.data.models.affix import Affix
    from max_special_modifiers.data.models.item import BonusInstance, ItemInstance

logger = logging.getLogger(__name__)


def sanitize(value: float) -> float:
    """Replace NaN or infinite values with 0."""
    if value is None or math.isnan(value) or math.isinf(value):
        return 0.0
    return value


def max_bound(
    low: float,
    high: float,
    per_level: float,
    level: int,
    multiplier: Optional[float] = None,
) -> float:
    """
    Calculate the maximum value of one bound.

    Args:
        low: Template minimum roll.
        high: Template maximum roll.
        per_level: Growth per item level.
        level: Item level.
        multiplier: Optional final multiplier.

    Returns:
        max(low, high) + per_level * level, times multiplier if set.
    """
    value = max(sanitize(low), sanitize(high)) + sanitize(per_level) * level
    if multiplier is not None:
        value *= multiplier
    return sanitize(value)


def max_range(affix: "Affix", level: int) -> tuple[float, float]:
    """
    Calculate the maximum (lower, upper) range of an affix at a level.

    A template whose lower bound ends above its upper bound collapses
    both to the lower value.
    """
    lower = max_bound(
        affix.lower_min, affix.lower_max, affix.lower_per_level, level, affix.multiplier
    )
    upper = max_bound(
        affix.upper_min, affix.upper_max, affix.upper_per_level, level, affix.multiplier
    )
    if lower > upper:
        upper = lower
    return lower, upper


class BonusValueMaximizer:
    """
    Maximizes implicit family-tagged bonuses on items.
    """

    def __init__(self, is_active: Optional[Callable[[], bool]] = None):
        """
        Initialize the maximizer.

        Args:
            is_active: Returns False while the mod runs in pass-through mode
                (invalid configuration or disabled). Defaults to always on.
        """
        self._is_active = is_active or (lambda: True)

    @property
    def active(self) -> bool:
        return self._is_active()

    @staticmethod
    def applies_to(bonus: "BonusInstance") -> bool:
        """Only implicit bonuses with a family tag are maximized."""
        return bonus.affix.is_implicit and is_family_tagged(bonus.affix.tags)

    def maximize(self, bonus: "BonusInstance", level: int) -> bool:
        """
        Set a bonus to its maximum range for the given item level.

        Args:
            bonus: The bonus instance to rewrite.
            level: Level of the item carrying the bonus.

        Returns:
            True if the bonus was rewritten.
        """
        if not self.active or not self.applies_to(bonus):
            return False

        lower, upper = max_range(bonus.affix, level)
        if (bonus.lower, bonus.upper) != (lower, upper):
            logger.debug(
                "Maximized %s: %g-%g -> %g-%g",
                bonus.affix.id, bonus.lower, bonus.upper, lower, upper,
            )
        bonus.lower = lower
        bonus.upper = upper
        return True

    def maximize_item(self, item: "ItemInstance") -> int:
        """
        Maximize every eligible bonus on an item.

        Returns:
            Number of bonuses rewritten.
        """
        if not self.active:
            return 0
        return sum(1 for bonus in item.bonuses if self.maximize(bonus, item.level))
