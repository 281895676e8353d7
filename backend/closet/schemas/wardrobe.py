"""
Clothing piece schemas.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime

from closet.constants import CATEGORIES, COLORS, SEASONS


def _check_member(value: Optional[str], allowed: tuple, label: str) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if value not in allowed:
        raise ValueError(f"{label} must be one of: {', '.join(allowed)}")
    return value


class ClothingPieceBase(BaseModel):
    """Base schema for clothing pieces"""
    name: str = Field(..., min_length=1, max_length=100, description="Display name of the piece")
    category: str = Field(..., description="One of CATEGORIES")
    color: str = Field(..., description="One of COLORS")
    season: str = Field(..., description="One of SEASONS")
    # Free list; the TAGS vocabulary is a suggestion, not enforced
    tags: List[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be empty")
        return v.strip()

    @field_validator("category")
    @classmethod
    def category_known(cls, v: str) -> str:
        return _check_member(v, CATEGORIES, "category")

    @field_validator("color")
    @classmethod
    def color_known(cls, v: str) -> str:
        return _check_member(v, COLORS, "color")

    @field_validator("season")
    @classmethod
    def season_known(cls, v: str) -> str:
        return _check_member(v, SEASONS, "season")


class ClothingPieceCreate(ClothingPieceBase):
    """Schema for creating a new piece"""
    image_path: Optional[str] = None


class ClothingPieceUpdate(BaseModel):
    """Partial update; omitted fields are left untouched"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    category: Optional[str] = None
    color: Optional[str] = None
    season: Optional[str] = None
    tags: Optional[List[str]] = None
    image_path: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("name must not be empty")
        return v.strip() if v is not None else v

    @field_validator("category")
    @classmethod
    def category_known(cls, v: Optional[str]) -> Optional[str]:
        return _check_member(v, CATEGORIES, "category")

    @field_validator("color")
    @classmethod
    def color_known(cls, v: Optional[str]) -> Optional[str]:
        return _check_member(v, COLORS, "color")

    @field_validator("season")
    @classmethod
    def season_known(cls, v: Optional[str]) -> Optional[str]:
        return _check_member(v, SEASONS, "season")


class ClothingPiece(BaseModel):
    """Clothing piece as returned by the API"""
    id: str
    user_id: str
    name: str
    category: str
    color: str
    season: str
    tags: List[str] = []
    image_path: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": "4f7c1f8e-3a7e-4a43-9a55-2a4f0b4f1c11",
                "user_id": "user-123",
                "name": "Striped tee",
                "category": "Top",
                "color": "Blue",
                "season": "Summer",
                "tags": ["casual", "comfy"],
                "image_path": "/static/pieces/1718000000000-123456789.jpg"
            }
        }
