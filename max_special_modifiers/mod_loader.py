"""Mod entry point.

Installs hooks on the host's event methods so the modifier service runs
at the right moments, and removes them again when the mod is released.
"""

import functools
import logging
from enum import Enum
from typing import Any, Callable, Iterable, Optional

from max_special_modifiers.config import Settings
from max_special_modifiers.core.constants import PATCH_ID
from max_special_modifiers.core.host import GameHost
from max_special_modifiers.dependencies import get_catalog, get_settings
from max_special_modifiers.logging_config import configure_logging
from max_special_modifiers.services.modifier_service import SpecialModifierService

logger = logging.getLogger(__name__)

# prefix(*args, **kwargs) -> (run_original, result_when_skipped)
Prefix = Callable[..., tuple[bool, Any]]
# postfix(result, *args, **kwargs) -> result
Postfix = Callable[..., Any]


class LoadMode(Enum):
    NEW_GAME = "new_game"
    LOAD_GAME = "load_game"


class HookManager:
    """
    Wraps methods of a target object with prefix/postfix callbacks.

    A prefix decides whether the original method runs; a postfix always
    runs afterwards and may replace the result.
    """

    def __init__(self, patch_id: str = PATCH_ID):
        self.patch_id = patch_id
        # (target, method name, previous instance attribute or None)
        self._patches: list[tuple[Any, str, Optional[Any]]] = []

    def patch(
        self,
        target: Any,
        method_name: str,
        prefix: Optional[Prefix] = None,
        postfix: Optional[Postfix] = None,
    ) -> None:
        original = getattr(target, method_name)
        previous = target.__dict__.get(method_name)

        @functools.wraps(original)
        def hooked(*args, **kwargs):
            run_original, result = True, None
            if prefix is not None:
                run_original, result = prefix(*args, **kwargs)
            if run_original:
                result = original(*args, **kwargs)
            if postfix is not None:
                result = postfix(result, *args, **kwargs)
            return result

        setattr(target, method_name, hooked)
        self._patches.append((target, method_name, previous))
        logger.debug("Patched %s.%s", type(target).__name__, method_name)

    def unpatch_all(self) -> None:
        """Restore every patched method, most recent first."""
        while self._patches:
            target, method_name, previous = self._patches.pop()
            if previous is None:
                delattr(target, method_name)
            else:
                setattr(target, method_name, previous)

    @property
    def patch_count(self) -> int:
        return len(self._patches)


class ModLoader:
    """Lifecycle of the mod inside a host game."""

    def __init__(self, host: GameHost, settings: Optional[Settings] = None):
        self.host = host
        self.settings = settings or get_settings()
        self.hooks = HookManager()
        self.service: Optional[SpecialModifierService] = None

    def on_created(self) -> None:
        """Called when the mod is first loaded. Applies the hooks."""
        configure_logging(self.settings.DEBUG_LOGGING)
        logger.info("OnCreated() called - applying patches...")
        try:
            self.service = SpecialModifierService.from_settings(
                self.host, self.settings, catalog=get_catalog()
            )
            self.hooks.patch(
                self.host, "grant_family_bonuses",
                prefix=self._grant_prefix, postfix=self._grant_postfix,
            )
            self.hooks.patch(self.host, "register_kill", prefix=self._kill_prefix)
            self.hooks.patch(
                self.host, "begin_keropok_progression", postfix=self._progression_postfix
            )
            logger.info("Patches applied successfully")
        except Exception as e:
            logger.error("Error applying patches: %s", e)
            self.hooks.unpatch_all()

    def on_released(self) -> None:
        """Called when the mod is unloaded. Removes the hooks."""
        self.hooks.unpatch_all()
        self.service = None

    def on_game_loaded(self, mode: LoadMode) -> None:
        logger.info("OnGameLoaded() called (%s)", mode.value)
        if self.service is not None:
            self.service.reset_session()

    def on_game_unloaded(self) -> None:
        logger.info("OnGameUnloaded() called")
        if self.service is not None:
            self.service.reset_session()

    # =========================================================================
    # HOOKS
    # =========================================================================

    def _grant_prefix(self, item, tags: Iterable[str]) -> tuple[bool, Any]:
        return self.service.grant_family_bonuses(item, tags), None

    def _grant_postfix(self, result, item, tags: Iterable[str]) -> Any:
        self.service.maximize_item(item)
        return result

    def _kill_prefix(self, item, creature, curse_tags: Iterable[str] = ()) -> tuple[bool, Any]:
        result = self.service.register_kill(item, creature, curse_tags)
        if result is None:
            return True, None
        return False, result.success

    def _progression_postfix(self, result, item) -> Any:
        if self.service.active:
            self.service.start_tracking(item)
        return result
