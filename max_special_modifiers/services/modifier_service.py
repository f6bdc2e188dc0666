"""
Special modifier service.

Public entry points called by the hooks. Each entry point is the single
place where unexpected faults are caught; on a fault the host's original
behavior runs where it exists, otherwise the call becomes a no-op.
"""

import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from max_special_modifiers.config import Settings
from max_special_modifiers.core.affix_catalog import AffixCatalog
from max_special_modifiers.core.affix_selector import (
    ForcedAffixSelector,
    SelectionMode,
    SelectionResult,
)
from max_special_modifiers.core.families import Family
from max_special_modifiers.core.host import GameHost
from max_special_modifiers.core.keropok_progression import KeropokProgression, KillResult
from max_special_modifiers.core.value_maximizer import BonusValueMaximizer
from max_special_modifiers.data.loaders.config_loader import load_config
from max_special_modifiers.data.models.config import ModConfig
from max_special_modifiers.data.models.item import ItemInstance

logger = logging.getLogger(__name__)


class SpecialModifierService:
    """Forces, maximizes and gates special family modifiers on a host."""

    def __init__(
        self,
        host: GameHost,
        config: Optional[ModConfig] = None,
        catalog: Optional[AffixCatalog] = None,
        enabled: bool = True,
        modes: Optional[dict[Family, SelectionMode]] = None,
        completion_threshold: int = 6,
        guaranteed_kill_count: int = 5,
        seed: Optional[int] = None,
    ):
        self.host = host
        self.config = config if config is not None else ModConfig()
        self.enabled = enabled
        self.catalog = catalog or AffixCatalog()

        self.maximizer = BonusValueMaximizer(is_active=lambda: self.active)
        self.selector = ForcedAffixSelector(
            config=lambda: self.config,
            catalog=self.catalog,
            affix_source=host.get_affix,
            maximizer=self.maximizer,
            modes=modes,
            seed=seed,
        )
        self.progression = KeropokProgression(
            host=host,
            selector=self.selector,
            completion_threshold=completion_threshold,
            guaranteed_kill_count=guaranteed_kill_count,
            seed=seed,
        )

    @classmethod
    def from_settings(
        cls,
        host: GameHost,
        settings: Settings,
        config: Optional[ModConfig] = None,
        catalog: Optional[AffixCatalog] = None,
    ) -> "SpecialModifierService":
        """Build a service from runtime settings, loading the config file if needed."""
        if config is None:
            config = load_config(settings.CONFIG_PATH)
        modes = {
            Family.KEROPOK: SelectionMode(settings.KEROPOK_MODE),
            Family.ORANG_BUNIAN: SelectionMode(settings.ORANG_BUNIAN_MODE),
            Family.AWAKENED: SelectionMode(settings.AWAKENED_MODE),
        }
        return cls(
            host=host,
            config=config,
            catalog=catalog,
            enabled=settings.ENABLED,
            modes=modes,
            completion_threshold=settings.COMPLETION_THRESHOLD,
            guaranteed_kill_count=settings.GUARANTEED_KILL_COUNT,
            seed=settings.RANDOM_SEED,
        )

    @property
    def active(self) -> bool:
        """False while running in pass-through mode."""
        return self.enabled and self.config.is_valid

    def reload_config(self, path: Union[str, Path]) -> bool:
        """Reload the family configuration. Returns whether it is valid."""
        self.config = load_config(path)
        return self.config.is_valid

    # =========================================================================
    # ENTRY POINTS
    # =========================================================================

    def grant_family_bonuses(self, item: ItemInstance, tags: Iterable[str]) -> bool:
        """
        Force configured bonuses in place of the host's family bonus.

        Args:
            item: Item receiving the bonuses.
            tags: Tags of the family trigger.

        Returns:
            True if the host's original granting should run.
        """
        if not self.active:
            return True
        before: Optional[list] = None
        try:
            before = list(item.bonuses)
            result: SelectionResult = self.selector.select_and_attach(item, list(tags))
            if result.is_skipped:
                logger.debug("Selection skipped for item %s: %s", item.id, result.message)
                return True
            return False
        except Exception:
            logger.exception("Error forcing family bonuses on item %s", getattr(item, "id", item))
            if before is not None:
                # Undo a partial attach before the host grants its own bonus
                item.bonuses[:] = before
                item.refresh_index()
            return True

    def maximize_item(self, item: ItemInstance) -> int:
        """Maximize the implicit family bonuses of an item. Returns the count rewritten."""
        if not self.active:
            return 0
        try:
            return self.maximizer.maximize_item(item)
        except Exception:
            logger.exception("Error maximizing bonuses on item %s", getattr(item, "id", item))
            return 0

    def start_tracking(self, item: ItemInstance) -> bool:
        """Start Keropok progression for an item."""
        try:
            self.progression.start_tracking(item)
            return True
        except Exception:
            logger.exception("Error starting progression for item %s", getattr(item, "id", item))
            return False

    def register_kill(
        self,
        item: ItemInstance,
        creature: Any,
        curse_tags: Iterable[str] = (),
    ) -> Optional[KillResult]:
        """
        Advance Keropok progression for a kill.

        Returns:
            KillResult, or None when the host's own kill handling should run:
            the mod is inactive, the item is not tracked, or a fault occurred.
        """
        if not self.active:
            return None
        record = None
        kill_count = 0
        try:
            record = self.progression.get_record(item)
            if record is None:
                return None
            kill_count = record.kill_count
            return self.progression.register_kill(item, creature, curse_tags)
        except Exception:
            logger.exception("Error registering kill for item %s", getattr(item, "id", item))
            if record is not None:
                record.kill_count = kill_count
            return None

    def reset_session(self) -> None:
        """Clear progression state at game load/unload."""
        self.progression.reset()
