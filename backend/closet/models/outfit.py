"""
Outfit and outfit/piece junction models.
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from .base import Base, new_id, utcnow


class Outfit(Base):
    """Named collection of pieces with denormalized wear counters"""
    __tablename__ = "outfits"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(255), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    cover_image = Column(String, nullable=True)
    # Only the wear logging service writes these two
    worn_count = Column(Integer, nullable=False, default=0)
    last_worn = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=utcnow, index=True)

    piece_links = relationship(
        "OutfitPiece",
        back_populates="outfit",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    pieces = relationship(
        "ClothingPiece",
        secondary="outfit_pieces",
        viewonly=True,
        order_by="ClothingPiece.created_at.desc()",
    )
    wear_logs = relationship(
        "WearLog",
        back_populates="outfit",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class OutfitPiece(Base):
    """Many-to-many link between an outfit and a piece"""
    __tablename__ = "outfit_pieces"

    outfit_id = Column(String(36), ForeignKey("outfits.id", ondelete="CASCADE"), primary_key=True)
    piece_id = Column(String(36), ForeignKey("clothing_pieces.id", ondelete="CASCADE"), primary_key=True)

    outfit = relationship("Outfit", back_populates="piece_links")
    piece = relationship("ClothingPiece", back_populates="outfit_links")
