# Data Models
from .affix import Affix
from .item import BonusInstance, ItemInstance
from .config import ModConfig

__all__ = [
    "Affix",
    "BonusInstance",
    "ItemInstance",
    "ModConfig",
]
