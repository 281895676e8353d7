"""
Analytics snapshot schema.
"""
from pydantic import BaseModel
from typing import Dict, List

from .outfit import OutfitWithStats
from .wardrobe import ClothingPiece


class AnalyticsSnapshot(BaseModel):
    """Aggregate wardrobe statistics, recomputed on every request"""
    total_pieces: int = 0
    total_outfits: int = 0
    total_wears: int = 0
    pieces_by_category: Dict[str, int] = {}
    pieces_by_color: Dict[str, int] = {}
    never_worn_pieces: List[ClothingPiece] = []
    least_worn_outfits: List[OutfitWithStats] = []
    seasonal_recommendations: List[OutfitWithStats] = []
    current_season: str
