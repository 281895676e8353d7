"""Row builders used across the test modules."""

from __future__ import annotations

from datetime import datetime, timedelta
from types import SimpleNamespace
from typing import List, Optional

from closet.config import settings
from closet.models import ClothingPiece, Outfit
from closet.repository import TenantRepository

ALICE = "alice"
BOB = "bob"

_clock = {"t": datetime(2026, 1, 1, 12, 0, 0)}


def _tick() -> datetime:
    """Strictly increasing created_at values so newest-first order is deterministic"""
    _clock["t"] += timedelta(seconds=1)
    return _clock["t"]


def identity(user_id: str = ALICE) -> dict:
    return {settings.IDENTITY_HEADER: user_id}


def make_piece(
    repo: TenantRepository,
    name: str,
    category: str = "Top",
    color: str = "Blue",
    season: str = "Summer",
    tags: Optional[List[str]] = None,
) -> ClothingPiece:
    piece = ClothingPiece(
        name=name,
        category=category,
        color=color,
        season=season,
        tags=tags or [],
        created_at=_tick(),
    )
    repo.add(piece)
    repo.db.commit()
    return piece


def make_outfit(repo: TenantRepository, name: str, pieces: List[ClothingPiece]) -> Outfit:
    outfit = Outfit(name=name, created_at=_tick())
    repo.add(outfit)
    repo.db.flush()
    repo.add_outfit_pieces(outfit.id, [p.id for p in pieces])
    repo.db.commit()
    return outfit


# Plain objects for the pure analytics functions (no database involved)

def piece_row(piece_id: str, category: str = "Top", color: str = "Blue", season: str = "Summer") -> SimpleNamespace:
    return SimpleNamespace(
        id=piece_id,
        user_id=ALICE,
        name=piece_id,
        category=category,
        color=color,
        season=season,
        tags=[],
        image_path=None,
        created_at=None,
    )


def outfit_row(
    outfit_id: str,
    pieces: List[SimpleNamespace],
    worn_count: int = 0,
    last_worn: Optional[datetime] = None,
) -> SimpleNamespace:
    return SimpleNamespace(
        id=outfit_id,
        user_id=ALICE,
        name=outfit_id,
        cover_image=None,
        worn_count=worn_count,
        last_worn=last_worn,
        created_at=None,
        pieces=pieces,
    )
