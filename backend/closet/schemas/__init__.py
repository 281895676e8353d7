"""
Pydantic schemas for the Closet Log API.

Import all schemas here for easy access.
"""
from .common import HealthResponse, MessageResponse, EnumsResponse
from .user import Identity, UserResponse
from .wardrobe import ClothingPieceBase, ClothingPiece, ClothingPieceCreate, ClothingPieceUpdate
from .outfit import Outfit, OutfitCreate, OutfitUpdate, OutfitWithPieces, OutfitWithStats
from .wear_log import WearLog, WearLogCreate, WearLogWithOutfit
from .analytics import AnalyticsSnapshot

__all__ = [
    # Common
    "HealthResponse",
    "MessageResponse",
    "EnumsResponse",
    # User
    "Identity",
    "UserResponse",
    # Pieces
    "ClothingPieceBase",
    "ClothingPiece",
    "ClothingPieceCreate",
    "ClothingPieceUpdate",
    # Outfits
    "Outfit",
    "OutfitCreate",
    "OutfitUpdate",
    "OutfitWithPieces",
    "OutfitWithStats",
    # Wear log
    "WearLog",
    "WearLogCreate",
    "WearLogWithOutfit",
    # Analytics
    "AnalyticsSnapshot",
]
