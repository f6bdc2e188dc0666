# Services
from .modifier_service import SpecialModifierService

__all__ = ["SpecialModifierService"]
