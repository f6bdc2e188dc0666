"""Affix Catalog Lookup.

Maps configurable display names to the identifiers of the host's implicit
bonus pool, separately for each family.
"""

import logging
from typing import Mapping, Optional

from max_special_modifiers.core.constants import (
    KEROPOK_CATALOG_IDS,
    ORANG_BUNIAN_CATALOG_IDS,
    AWAKENED_CATALOG_IDS,
)
from max_special_modifiers.core.families import Family

logger = logging.getLogger(__name__)


DEFAULT_CATALOG_TABLE: dict[Family, Mapping[str, str]] = {
    Family.KEROPOK: KEROPOK_CATALOG_IDS,
    Family.ORANG_BUNIAN: ORANG_BUNIAN_CATALOG_IDS,
    Family.AWAKENED: AWAKENED_CATALOG_IDS,
}


class AffixCatalog:
    """
    Per-family name -> catalog id table.

    Lookups are exact and case-sensitive.
    """

    def __init__(self, table: Optional[Mapping[Family, Mapping[str, str]]] = None):
        """
        Initialize the catalog.

        Args:
            table: Family -> (display name -> catalog id). Defaults to the
                built-in table.
        """
        source = DEFAULT_CATALOG_TABLE if table is None else table
        self._table: dict[Family, dict[str, str]] = {
            family: dict(source.get(family, {})) for family in Family
        }
        self._family_by_id: dict[str, Family] = {
            catalog_id: family
            for family, names in self._table.items()
            for catalog_id in names.values()
        }

    def resolve(self, family: Family, display_name: str) -> Optional[str]:
        """
        Resolve a display name to its catalog id.

        Args:
            family: Family whose table is searched.
            display_name: Name as it appears in the configuration.

        Returns:
            The catalog id, or None if the name is unknown for that family.
        """
        catalog_id = self._table[family].get(display_name)
        if catalog_id is None:
            logger.debug("No catalog entry for %r in %s", display_name, family.marker)
        return catalog_id

    def names(self, family: Family) -> list[str]:
        return list(self._table[family])

    def family_of(self, catalog_id: str) -> Optional[Family]:
        """Get the family a catalog id belongs to."""
        return self._family_by_id.get(catalog_id)

    def __contains__(self, catalog_id: str) -> bool:
        return catalog_id in self._family_by_id

    def __len__(self) -> int:
        return len(self._family_by_id)
