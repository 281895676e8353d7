"""
Tenant-scoped data access.

Every query for pieces, outfits and wear logs goes through a TenantRepository
bound to one user id, so no code path can read or write another user's rows by
forgetting a filter.
"""
import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Iterable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from closet.core.exceptions import DatabaseError
from closet.models import ClothingPiece, Outfit, OutfitPiece, WearLog

logger = logging.getLogger(__name__)


class TenantRepository:
    """Data access for a single user's wardrobe"""

    def __init__(self, db: Session, user_id: str):
        self.db = db
        self.user_id = user_id

    # ------------------------------------------------------------------
    # Base queries, always filtered on user_id
    # ------------------------------------------------------------------

    def pieces(self):
        return self.db.query(ClothingPiece).filter(ClothingPiece.user_id == self.user_id)

    def outfits(self):
        return self.db.query(Outfit).filter(Outfit.user_id == self.user_id)

    def wear_logs(self):
        return self.db.query(WearLog).filter(WearLog.user_id == self.user_id)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list_pieces(self) -> List[ClothingPiece]:
        return self.pieces().order_by(ClothingPiece.created_at.desc()).all()

    def get_piece(self, piece_id: str) -> Optional[ClothingPiece]:
        return self.pieces().filter(ClothingPiece.id == piece_id).first()

    def count_owned_pieces(self, piece_ids: Iterable[str]) -> int:
        ids = list(piece_ids)
        if not ids:
            return 0
        return self.pieces().filter(ClothingPiece.id.in_(ids)).count()

    def list_outfits(self) -> List[Outfit]:
        return (
            self.outfits()
            .options(selectinload(Outfit.pieces))
            .order_by(Outfit.created_at.desc())
            .all()
        )

    def get_outfit(self, outfit_id: str) -> Optional[Outfit]:
        return (
            self.outfits()
            .options(selectinload(Outfit.pieces))
            .filter(Outfit.id == outfit_id)
            .first()
        )

    def list_wear_logs(self) -> List[WearLog]:
        return self.wear_logs().order_by(WearLog.worn_date.desc()).all()

    def recent_wear_logs(self, limit: int) -> List[WearLog]:
        return (
            self.wear_logs()
            .options(selectinload(WearLog.outfit))
            .order_by(WearLog.worn_date.desc())
            .limit(limit)
            .all()
        )

    # ------------------------------------------------------------------
    # Writes (caller commits through transaction())
    # ------------------------------------------------------------------

    def add(self, obj):
        """Stage a new tenant row, stamping it with this repository's user id"""
        obj.user_id = self.user_id
        self.db.add(obj)
        return obj

    def delete(self, obj) -> None:
        if obj.user_id != self.user_id:
            raise ValueError("refusing to delete a row owned by another user")
        self.db.delete(obj)

    def replace_outfit_pieces(self, outfit_id: str, piece_ids: Iterable[str]) -> None:
        """Delete every junction row of the outfit, then insert the given set"""
        self.db.query(OutfitPiece).filter(OutfitPiece.outfit_id == outfit_id).delete(
            synchronize_session=False
        )
        self.add_outfit_pieces(outfit_id, piece_ids)

    def add_outfit_pieces(self, outfit_id: str, piece_ids: Iterable[str]) -> None:
        rows = [{"outfit_id": outfit_id, "piece_id": piece_id} for piece_id in dict.fromkeys(piece_ids)]
        if rows:
            self.db.execute(OutfitPiece.__table__.insert(), rows)

    def increment_wear(self, outfit_id: str, worn_at: datetime, scoped: bool = True) -> int:
        """Atomic worn_count + 1 in SQL; returns the number of rows updated.

        scoped=False matches the outfit by id alone (no owner filter).
        """
        query = self.outfits() if scoped else self.db.query(Outfit)
        return query.filter(Outfit.id == outfit_id).update(
            {
                Outfit.worn_count: Outfit.worn_count + 1,
                Outfit.last_worn: worn_at,
            },
            synchronize_session=False,
        )

    @contextmanager
    def transaction(self, operation: str):
        """Commit on success; roll back and raise DatabaseError on storage failures"""
        try:
            yield self
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"{operation} failed for user {self.user_id}: {exc}", exc_info=True)
            raise DatabaseError(f"{operation} failed") from exc
        except Exception:
            self.db.rollback()
            raise
