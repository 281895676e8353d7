"""
Clothing piece model.
"""
from sqlalchemy import Column, String, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship

from .base import Base, new_id, utcnow


class ClothingPiece(Base):
    """A single catalogued clothing item"""
    __tablename__ = "clothing_pieces"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(255), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    category = Column(String(50), nullable=False, index=True)
    color = Column(String(50), nullable=False, index=True)
    season = Column(String(50), nullable=False, index=True)
    tags = Column(JSON, nullable=False, default=list)
    image_path = Column(String, nullable=True)  # Cloudinary URL or /static path
    created_at = Column(DateTime, default=utcnow, index=True)

    # Junction rows go away with the piece (ON DELETE CASCADE)
    outfit_links = relationship(
        "OutfitPiece",
        back_populates="piece",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
