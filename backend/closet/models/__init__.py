"""
Database models for Closet Log.

Import all models here for easy access and to ensure they are registered with SQLAlchemy.
"""
from .base import Base
from .user import User
from .wardrobe import ClothingPiece
from .outfit import Outfit, OutfitPiece
from .wear_log import WearLog

__all__ = ["Base", "User", "ClothingPiece", "Outfit", "OutfitPiece", "WearLog"]
