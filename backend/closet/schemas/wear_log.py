"""
Wear log schemas.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from .outfit import Outfit


class WearLogCreate(BaseModel):
    """Input for logging that an outfit was worn"""
    outfit_id: str = Field(..., min_length=1)
    location: Optional[str] = Field(None, max_length=200)
    worn_date: Optional[datetime] = Field(None, description="Defaults to now")


class WearLog(BaseModel):
    id: str
    user_id: str
    outfit_id: str
    worn_date: datetime
    location: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class WearLogWithOutfit(WearLog):
    outfit: Outfit
