"""Forced-Affix Selector.

Replaces the host's random family bonus with bonuses chosen from the
family configuration.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Iterable, Optional

from max_special_modifiers.core.affix_catalog import AffixCatalog
from max_special_modifiers.core.families import Family, detect_family
from max_special_modifiers.core.value_maximizer import BonusValueMaximizer

if TYPE_CHECKING:
    from max_special_modifiers.data.models.affix import Affix
    from max_special_modifiers.data.models.config import ModConfig
    from max_special_modifiers.data.models.item import BonusInstance, ItemInstance

logger = logging.getLogger(__name__)


class SelectionMode(Enum):
    """How many enabled candidates are attached per trigger."""
    SINGLE = "single"  # One random enabled candidate
    ALL = "all"        # Every enabled candidate


class SelectionStatus(Enum):
    ATTACHED = "attached"
    SKIPPED = "skipped"  # Host default behavior should run


DEFAULT_MODES: dict[Family, SelectionMode] = {
    Family.KEROPOK: SelectionMode.SINGLE,
    Family.ORANG_BUNIAN: SelectionMode.ALL,
    Family.AWAKENED: SelectionMode.ALL,
}


@dataclass
class SelectionResult:
    """Outcome of a forced selection."""
    status: SelectionStatus
    family: Optional[Family] = None
    attached: list["BonusInstance"] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)  # display names
    message: str = ""

    @property
    def is_skipped(self) -> bool:
        return self.status == SelectionStatus.SKIPPED


@dataclass
class _Candidate:
    name: str
    affix: "Affix"


class ForcedAffixSelector:
    """
    Chooses and attaches configured implicit affixes for a family.
    """

    def __init__(
        self,
        config: Callable[[], "ModConfig"],
        catalog: AffixCatalog,
        affix_source: Callable[[str], Optional["Affix"]],
        maximizer: BonusValueMaximizer,
        modes: Optional[dict[Family, SelectionMode]] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize the selector.

        Args:
            config: Returns the current family configuration.
            catalog: Display name -> catalog id lookup.
            affix_source: Host bonus pool lookup by catalog id.
            maximizer: Run over the item after every selection.
            modes: Default selection mode per family.
            seed: Random seed for single-choice mode.
        """
        self._config = config
        self.catalog = catalog
        self._affix_source = affix_source
        self.maximizer = maximizer
        self.modes = {**DEFAULT_MODES, **(modes or {})}
        self.rng = random.Random(seed)

    @property
    def config(self) -> "ModConfig":
        return self._config()

    def select_and_attach(
        self,
        item: "ItemInstance",
        tags: Iterable[str],
        mode: Optional[SelectionMode] = None,
    ) -> SelectionResult:
        """
        Attach configured bonuses for the family identified by tags.

        Args:
            item: Item receiving the bonuses.
            tags: Tags of the trigger; the family is detected from these.
            mode: Overrides the family's default selection mode.

        Returns:
            SelectionResult. SKIPPED means nothing usable was configured and
            the host's own bonus should be granted instead.
        """
        family = detect_family(tags)
        if family is None:
            return SelectionResult(SelectionStatus.SKIPPED, message="No family tag")

        config = self.config
        if not config.is_valid:
            return SelectionResult(SelectionStatus.SKIPPED, family, message="Invalid configuration")

        enabled = config.enabled_names(family)
        if not enabled:
            return SelectionResult(SelectionStatus.SKIPPED, family, message="No enabled affixes")

        result = SelectionResult(SelectionStatus.ATTACHED, family)
        candidates = self._resolve_candidates(family, enabled, result)
        if not candidates:
            result.status = SelectionStatus.SKIPPED
            result.message = "No enabled affix resolved"
            return result

        fresh = []
        for candidate in candidates:
            if item.has_affix(candidate.affix.id):
                logger.debug("%s already on item %s, skipping", candidate.affix.id, item.id)
                result.skipped.append(candidate.name)
            else:
                fresh.append(candidate)

        mode = mode or self.modes[family]
        if mode == SelectionMode.SINGLE and fresh:
            fresh = [self.rng.choice(fresh)]

        for candidate in fresh:
            bonus = item.add_bonus(candidate.affix, refresh=False)
            result.attached.append(bonus)
            logger.info("Attached %s (%s) to item %s", candidate.name, family.marker, item.id)

        if result.attached:
            item.refresh_index()
        else:
            result.message = "All enabled affixes already present"

        self.maximizer.maximize_item(item)
        return result

    def _resolve_candidates(
        self,
        family: Family,
        names: list[str],
        result: SelectionResult,
    ) -> list[_Candidate]:
        """Resolve enabled names to pool entries, skipping misses."""
        candidates = []
        for name in names:
            catalog_id = self.catalog.resolve(family, name)
            if catalog_id is None:
                logger.warning("Unknown %s affix %r in configuration", family.marker, name)
                result.skipped.append(name)
                continue
            affix = self._affix_source(catalog_id)
            if affix is None:
                logger.warning("Affix %s not found in the host pool", catalog_id)
                result.skipped.append(name)
                continue
            candidates.append(_Candidate(name, affix))
        return candidates
