"""
User schemas.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class Identity(BaseModel):
    """Claims handed over by the identity provider for the current request"""
    id: str = Field(..., min_length=1, description="Identity provider subject id")
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None


class UserResponse(BaseModel):
    """Schema for user response"""
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
