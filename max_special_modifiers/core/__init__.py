# Core modifier engine
from .constants import (
    KEROPOK_MARKER,
    ORANG_BUNIAN_MARKER,
    AWAKENED_MARKER,
    FAMILY_MARKERS,
    COMPLETION_THRESHOLD,
    GUARANTEED_KILL_COUNT,
)

from .families import Family, FAMILY_PRIORITY, detect_family, is_family_tagged
from .affix_catalog import AffixCatalog
from .value_maximizer import BonusValueMaximizer, max_range, sanitize
from .affix_selector import (
    ForcedAffixSelector,
    SelectionMode,
    SelectionStatus,
    SelectionResult,
)
from .host import GameHost, HostBonusAdapter
from .keropok_progression import (
    KeropokProgression,
    ProgressionRecord,
    ProgressionState,
    KillResult,
)

__all__ = [
    # Constants
    "KEROPOK_MARKER",
    "ORANG_BUNIAN_MARKER",
    "AWAKENED_MARKER",
    "FAMILY_MARKERS",
    "COMPLETION_THRESHOLD",
    "GUARANTEED_KILL_COUNT",
    # Families
    "Family",
    "FAMILY_PRIORITY",
    "detect_family",
    "is_family_tagged",
    # Catalog
    "AffixCatalog",
    # Maximizer
    "BonusValueMaximizer",
    "max_range",
    "sanitize",
    # Selector
    "ForcedAffixSelector",
    "SelectionMode",
    "SelectionStatus",
    "SelectionResult",
    # Host
    "GameHost",
    "HostBonusAdapter",
    # Progression
    "KeropokProgression",
    "ProgressionRecord",
    "ProgressionState",
    "KillResult",
]
