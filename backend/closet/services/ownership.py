"""
Ownership checks run before pieces are attached to an outfit.
"""
import logging
from typing import Sequence

from closet.core.exceptions import AuthorizationError
from closet.repository import TenantRepository

logger = logging.getLogger(__name__)


def validate_piece_ownership(repo: TenantRepository, piece_ids: Sequence[str]) -> bool:
    """True iff every id exists and belongs to the repository's user. Empty input is valid."""
    unique_ids = set(piece_ids)
    if not unique_ids:
        return True
    return repo.count_owned_pieces(unique_ids) == len(unique_ids)


def ensure_piece_ownership(repo: TenantRepository, piece_ids: Sequence[str]) -> None:
    """Raise AuthorizationError unless the user owns every piece id"""
    if not validate_piece_ownership(repo, piece_ids):
        logger.warning(f"User {repo.user_id} referenced pieces they do not own: {list(piece_ids)}")
        raise AuthorizationError("You don't own all the selected pieces")
