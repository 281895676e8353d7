"""
Outfit schemas.
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from .wardrobe import ClothingPiece


class OutfitCreate(BaseModel):
    """Attributes accepted when creating an outfit"""
    name: str = Field(..., min_length=1, max_length=100)
    cover_image: Optional[str] = None


class OutfitUpdate(BaseModel):
    """Editable outfit attributes; wear counters are not among them"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    cover_image: Optional[str] = None


class Outfit(BaseModel):
    """Outfit without its pieces"""
    id: str
    user_id: str
    name: str
    cover_image: Optional[str] = None
    worn_count: int = 0
    last_worn: Optional[datetime] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class OutfitWithPieces(Outfit):
    """Outfit with its resolved piece list"""
    pieces: List[ClothingPiece] = []


class OutfitWithStats(OutfitWithPieces):
    """Outfit annotated for analytics"""
    days_since_worn: Optional[int] = Field(None, description="Whole days since last worn, null if never")
