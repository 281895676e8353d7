"""
Wardrobe analytics.

Everything is recomputed from the user's full snapshot on each call; there is
no cache and no incremental state.
"""
import logging
from collections import Counter
from datetime import datetime, timedelta
from typing import List, Optional, Sequence

from closet.constants import season_for_month
from closet.models import ClothingPiece, Outfit, WearLog
from closet.models.base import utcnow
from closet.repository import TenantRepository
from closet.schemas import AnalyticsSnapshot, ClothingPiece as ClothingPieceSchema, OutfitWithStats

logger = logging.getLogger(__name__)

TOP_N = 5


def days_since(last_worn: Optional[datetime], now: datetime) -> Optional[int]:
    """Whole days elapsed since last_worn (floored), None if never worn"""
    if last_worn is None:
        return None
    return (now - last_worn) // timedelta(days=1)


def _with_stats(outfit: Outfit, now: datetime) -> OutfitWithStats:
    stats = OutfitWithStats.model_validate(outfit, from_attributes=True)
    stats.days_since_worn = days_since(outfit.last_worn, now)
    return stats


def _least_worn(outfits: Sequence[Outfit], now: datetime) -> List[OutfitWithStats]:
    # sorted() is stable, so equal counts keep their input order
    ranked = sorted(outfits, key=lambda o: o.worn_count or 0)
    return [_with_stats(o, now) for o in ranked[:TOP_N]]


def build_snapshot(
    pieces: Sequence[ClothingPiece],
    outfits: Sequence[Outfit],
    wear_logs: Sequence[WearLog],
    now: Optional[datetime] = None,
) -> AnalyticsSnapshot:
    """Aggregate statistics over in-memory collections.

    pieces and outfits are expected newest-first; each outfit must have its
    pieces resolved.

    now is naive UTC, like every stored timestamp, and the current season is
    taken from its UTC calendar month rather than the server's local month.
    """
    now = now or utcnow()
    current_season = season_for_month(now.month)

    by_category = Counter(p.category for p in pieces)
    by_color = Counter(p.color for p in pieces)

    pieces_in_outfits = {piece.id for outfit in outfits for piece in outfit.pieces}
    never_worn = [p for p in pieces if p.id not in pieces_in_outfits]

    seasonal_piece_ids = {p.id for p in pieces if p.season == current_season}
    seasonal_outfits = [
        o for o in outfits if any(piece.id in seasonal_piece_ids for piece in o.pieces)
    ]

    return AnalyticsSnapshot(
        total_pieces=len(pieces),
        total_outfits=len(outfits),
        total_wears=len(wear_logs),
        pieces_by_category=dict(by_category),
        pieces_by_color=dict(by_color),
        never_worn_pieces=[ClothingPieceSchema.model_validate(p, from_attributes=True) for p in never_worn],
        least_worn_outfits=_least_worn(outfits, now),
        seasonal_recommendations=_least_worn(seasonal_outfits, now),
        current_season=current_season,
    )


def compute_analytics(repo: TenantRepository, now: Optional[datetime] = None) -> AnalyticsSnapshot:
    """Load the user's pieces, outfits and wear logs and aggregate them"""
    pieces = repo.list_pieces()
    outfits = repo.list_outfits()
    wear_logs = repo.list_wear_logs()

    snapshot = build_snapshot(pieces, outfits, wear_logs, now)
    logger.debug(
        f"Analytics for user {repo.user_id}: {snapshot.total_pieces} pieces, "
        f"{snapshot.total_outfits} outfits, {snapshot.total_wears} wears"
    )
    return snapshot
