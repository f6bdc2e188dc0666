"""Keropok Progression State Machine.

Keropok items count kills. Each kill may roll an ordinary Keropok bonus;
the implicit completion bonus can only appear once the item carries enough
unrelated explicit bonuses.

States per item:
    NOT_TRACKED -> TRACKING(kill_count) -> COMPLETED

Completion removes the progression record, which is the only guard
against attaching the completion bonus twice.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable, Optional

from max_special_modifiers.core.affix_selector import ForcedAffixSelector
from max_special_modifiers.core.constants import (
    KEROPOK_MARKER,
    COMPLETION_THRESHOLD,
    GUARANTEED_KILL_COUNT,
)
from max_special_modifiers.core.families import Family
from max_special_modifiers.core.host import GameHost

if TYPE_CHECKING:
    from max_special_modifiers.data.models.item import ItemInstance

logger = logging.getLogger(__name__)


class ProgressionState(Enum):
    NOT_TRACKED = "not_tracked"
    TRACKING = "tracking"
    COMPLETED = "completed"


@dataclass
class ProgressionRecord:
    """Kill tracking state of one item."""
    item_id: str
    family: Family = Family.KEROPOK
    kill_count: int = 0


@dataclass
class KillResult:
    """Result of registering a kill."""
    success: bool
    completed: bool = False
    kill_count: int = 0
    non_implicit_count: int = 0
    chance: float = 0.0
    message: str = ""


def count_unrelated_bonuses(item: "ItemInstance", marker: str = KEROPOK_MARKER) -> int:
    """Count bonuses that are neither implicit nor tagged with the marker."""
    return sum(
        1 for bonus in item.bonuses
        if not bonus.is_implicit and not bonus.has_tag(marker)
    )


def clamp_chance(chance: Any) -> float:
    """Clamp a host probability into [0, 1]; non-numbers and NaN become 0."""
    try:
        chance = float(chance)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(chance):
        return 0.0
    return min(1.0, max(0.0, chance))


class KeropokProgression:
    """
    Tracks Keropok kill progression and decides when it completes.
    """

    TAGS: tuple[str, ...] = (KEROPOK_MARKER,)

    def __init__(
        self,
        host: GameHost,
        selector: ForcedAffixSelector,
        completion_threshold: int = COMPLETION_THRESHOLD,
        guaranteed_kill_count: int = GUARANTEED_KILL_COUNT,
        seed: Optional[int] = None,
    ):
        """
        Initialize the state machine.

        Args:
            host: Host collaborator (creature guard, normal bonus roll).
            selector: Attaches the completion bonus.
            completion_threshold: Unrelated explicit bonuses required before
                completion may happen.
            guaranteed_kill_count: Completion is forced once kill_count
                exceeds this.
            seed: Random seed for the completion draw.
        """
        self.host = host
        self.selector = selector
        self.completion_threshold = completion_threshold
        self.guaranteed_kill_count = guaranteed_kill_count
        self.rng = random.Random(seed)
        self._records: dict[str, ProgressionRecord] = {}
        self._completed: set[str] = set()

    # =========================================================================
    # TRACKING SET
    # =========================================================================

    def start_tracking(self, item: "ItemInstance") -> ProgressionRecord:
        """
        Start tracking an item, or return its existing record.

        A completed item re-enters as a fresh record with zero kills.
        """
        record = self._records.get(item.id)
        if record is None:
            record = ProgressionRecord(item_id=item.id)
            self._records[item.id] = record
            self._completed.discard(item.id)
            logger.debug("Tracking Keropok progression for item %s", item.id)
        return record

    def stop_tracking(self, item: "ItemInstance") -> bool:
        """Drop an item's record without completing it."""
        return self._records.pop(item.id, None) is not None

    def get_record(self, item: "ItemInstance") -> Optional[ProgressionRecord]:
        return self._records.get(item.id)

    def is_tracking(self, item: "ItemInstance") -> bool:
        return item.id in self._records

    def state_of(self, item: "ItemInstance") -> ProgressionState:
        if item.id in self._records:
            return ProgressionState.TRACKING
        if item.id in self._completed:
            return ProgressionState.COMPLETED
        return ProgressionState.NOT_TRACKED

    def reset(self) -> None:
        """Forget all progression state (new game session)."""
        self._records.clear()
        self._completed.clear()

    @property
    def tracked_count(self) -> int:
        return len(self._records)

    # =========================================================================
    # TRANSITIONS
    # =========================================================================

    def register_kill(
        self,
        item: "ItemInstance",
        creature: Any,
        curse_tags: Iterable[str] = (),
    ) -> KillResult:
        """
        Register a kill made with a tracked item.

        Args:
            item: The Keropok item.
            creature: The creature credited with the kill.
            curse_tags: Tags passed to the host's normal bonus roll.

        Returns:
            KillResult. success is False only when the kill was rejected.
        """
        if not self.host.is_eligible_creature(creature):
            return KillResult(success=False, message="Ineligible creature")

        record = self._records.get(item.id)
        if record is None:
            return KillResult(success=False, message="Item is not tracked")

        record.kill_count += 1

        chance = clamp_chance(
            self.host.roll_normal_family_bonus(item, list(curse_tags), record.kill_count)
        )
        non_implicit = count_unrelated_bonuses(item)

        result = KillResult(
            success=True,
            kill_count=record.kill_count,
            non_implicit_count=non_implicit,
            chance=chance,
        )

        if non_implicit < self.completion_threshold:
            result.message = f"{non_implicit}/{self.completion_threshold} bonuses"
            return result

        if non_implicit > self.completion_threshold:
            logger.warning(
                "Item %s has %d unrelated bonuses (expected at most %d)",
                item.id, non_implicit, self.completion_threshold,
            )

        if self._should_complete(record, chance):
            self._complete(item, record)
            result.completed = True
            result.message = "Completed"
        else:
            result.message = "Completion roll failed"
        return result

    def _should_complete(self, record: ProgressionRecord, chance: float) -> bool:
        if record.kill_count > self.guaranteed_kill_count:
            return True
        return self.rng.random() < chance

    def _complete(self, item: "ItemInstance", record: ProgressionRecord) -> None:
        """Attach the completion bonus and drop the record."""
        selection = self.selector.select_and_attach(item, self.TAGS)
        if selection.is_skipped:
            self.host.grant_default_family_bonus(item, self.TAGS)
            self.selector.maximizer.maximize_item(item)

        del self._records[item.id]
        self._completed.add(item.id)
        logger.info(
            "Keropok progression completed for item %s after %d kills",
            item.id, record.kill_count,
        )
