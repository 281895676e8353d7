"""
Clothing piece catalog.
"""
import logging
from typing import List, Optional

from closet.models import ClothingPiece
from closet.repository import TenantRepository
from closet.schemas import ClothingPieceCreate, ClothingPieceUpdate

logger = logging.getLogger(__name__)


def list_pieces(repo: TenantRepository) -> List[ClothingPiece]:
    """User's pieces, newest first"""
    return repo.list_pieces()


def get_piece(repo: TenantRepository, piece_id: str) -> Optional[ClothingPiece]:
    return repo.get_piece(piece_id)


def create_piece(repo: TenantRepository, payload: ClothingPieceCreate) -> ClothingPiece:
    piece = ClothingPiece(**payload.model_dump())
    with repo.transaction("create piece"):
        repo.add(piece)
    logger.info(f"Created piece {piece.id} ({piece.category}) for user {repo.user_id}")
    return piece


def update_piece(repo: TenantRepository, piece_id: str, changes: ClothingPieceUpdate) -> Optional[ClothingPiece]:
    """Partial update; returns None when the piece is missing or not owned"""
    piece = repo.get_piece(piece_id)
    if piece is None:
        return None

    with repo.transaction("update piece"):
        for field, value in changes.model_dump(exclude_unset=True).items():
            setattr(piece, field, value)

    logger.info(f"Updated piece {piece_id} for user {repo.user_id}")
    return piece


def delete_piece(repo: TenantRepository, piece_id: str) -> bool:
    """Delete an owned piece; it drops out of every outfit. Returns whether a row was removed."""
    piece = repo.get_piece(piece_id)
    if piece is None:
        return False

    with repo.transaction("delete piece"):
        repo.delete(piece)

    logger.info(f"Deleted piece {piece_id} for user {repo.user_id}")
    return True
