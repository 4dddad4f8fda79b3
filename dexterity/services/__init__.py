from .dexterity_service import DexterityService

__all__ = ["DexterityService"]
