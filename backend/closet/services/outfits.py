"""
Outfit composition: outfits together with their full set of pieces.

The outfit_pieces junction table is the only record of which pieces an outfit
contains. Updates that carry a piece list replace the whole set.
"""
import logging
from typing import List, Optional, Sequence

from closet.models import Outfit
from closet.repository import TenantRepository
from closet.schemas import OutfitCreate, OutfitUpdate
from closet.services.ownership import ensure_piece_ownership

logger = logging.getLogger(__name__)


def list_outfits(repo: TenantRepository) -> List[Outfit]:
    """User's outfits with resolved pieces, newest first"""
    return repo.list_outfits()


def get_outfit(repo: TenantRepository, outfit_id: str) -> Optional[Outfit]:
    return repo.get_outfit(outfit_id)


def create_outfit(repo: TenantRepository, payload: OutfitCreate, piece_ids: Sequence[str]) -> Outfit:
    """Persist an outfit and its junction rows; nothing is written if ownership fails"""
    ensure_piece_ownership(repo, piece_ids)

    outfit = Outfit(name=payload.name, cover_image=payload.cover_image, worn_count=0)
    with repo.transaction("create outfit"):
        repo.add(outfit)
        repo.db.flush()
        repo.add_outfit_pieces(outfit.id, piece_ids)

    logger.info(f"Created outfit {outfit.id} with {len(set(piece_ids))} pieces for user {repo.user_id}")
    return repo.get_outfit(outfit.id)


def update_outfit(
    repo: TenantRepository,
    outfit_id: str,
    changes: OutfitUpdate,
    piece_ids: Optional[Sequence[str]] = None,
) -> Optional[Outfit]:
    """Apply attribute changes and, when piece_ids is given, replace the piece set.

    Returns None if the outfit is missing or belongs to someone else.
    """
    outfit = repo.get_outfit(outfit_id)
    if outfit is None:
        return None

    if piece_ids is not None:
        ensure_piece_ownership(repo, piece_ids)

    with repo.transaction("update outfit"):
        for field, value in changes.model_dump(exclude_unset=True).items():
            setattr(outfit, field, value)
        if piece_ids is not None:
            repo.replace_outfit_pieces(outfit.id, piece_ids)

    logger.info(f"Updated outfit {outfit_id} for user {repo.user_id}")
    return repo.get_outfit(outfit_id)


def delete_outfit(repo: TenantRepository, outfit_id: str) -> bool:
    """Delete an owned outfit; its junction and wear log rows cascade.

    Returns whether a row was removed. Missing or foreign ids are a no-op.
    """
    outfit = repo.outfits().filter(Outfit.id == outfit_id).first()
    if outfit is None:
        return False

    with repo.transaction("delete outfit"):
        repo.delete(outfit)

    logger.info(f"Deleted outfit {outfit_id} for user {repo.user_id}")
    return True
