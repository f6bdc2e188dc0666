"""
Dependency wiring for the mod.
"""

from functools import lru_cache

from .config import Settings
from .core.affix_catalog import AffixCatalog


@lru_cache()
def get_settings() -> Settings:
    """Get Settings singleton."""
    return Settings()


@lru_cache()
def get_catalog() -> AffixCatalog:
    """Get AffixCatalog singleton."""
    return AffixCatalog()


def clear_cache() -> None:
    """Forget cached settings and catalog."""
    get_settings.cache_clear()
    get_catalog.cache_clear()
