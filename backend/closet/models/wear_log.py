"""
Wear log model.
"""
from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from .base import Base, new_id, utcnow


class WearLog(Base):
    """One row per wear event; append-only"""
    __tablename__ = "wear_log"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(255), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    outfit_id = Column(String(36), ForeignKey("outfits.id", ondelete="CASCADE"), nullable=False, index=True)
    worn_date = Column(DateTime, nullable=False, default=utcnow, index=True)
    location = Column(String(200), nullable=True)
    created_at = Column(DateTime, default=utcnow)

    outfit = relationship("Outfit", back_populates="wear_logs")
