# Data Loaders
from .affix_loader import (
    load_affixes,
    load_implicit_affixes,
    load_explicit_affixes,
    get_affix_by_id,
    get_affixes_by_tag,
)
from .config_loader import (
    load_config,
    save_config,
    dump_config,
)

__all__ = [
    # Affix loaders
    "load_affixes",
    "load_implicit_affixes",
    "load_explicit_affixes",
    "get_affix_by_id",
    "get_affixes_by_tag",
    # Config loaders
    "load_config",
    "save_config",
    "dump_config",
]
