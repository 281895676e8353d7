"""
Common/shared schemas used across the application.
"""
from typing import List
from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    database: str
    time: str


class MessageResponse(BaseModel):
    message: str


class EnumsResponse(BaseModel):
    """Fixed value lists shared with the presentation layer"""
    version: int
    categories: List[str]
    colors: List[str]
    seasons: List[str]
    tags: List[str]
