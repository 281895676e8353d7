"""
Wear logging: one WearLog row per wear event plus the outfit's counters.

The insert and the counter UPDATE share one transaction. The counter is bumped
with a SQL expression (worn_count + 1) so concurrent submissions for the same
outfit cannot lose an increment.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from closet.config import settings
from closet.core.exceptions import NotFoundError
from closet.models import WearLog
from closet.models.base import utcnow
from closet.repository import TenantRepository

logger = logging.getLogger(__name__)


def _as_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def log_wear(
    repo: TenantRepository,
    outfit_id: str,
    location: Optional[str] = None,
    worn_date: Optional[datetime] = None,
) -> WearLog:
    """Record a wear event and bump the outfit's worn_count/last_worn.

    If the counter update matches no outfit the whole unit is rolled back and
    NotFoundError is raised, so no log row outlives a failed increment.
    """
    now = utcnow()
    entry = WearLog(
        outfit_id=outfit_id,
        location=location,
        worn_date=_as_naive_utc(worn_date) if worn_date else now,
    )

    with repo.transaction("log wear"):
        updated = repo.increment_wear(outfit_id, now, scoped=settings.ENFORCE_WEAR_LOG_OWNERSHIP)
        if updated != 1:
            raise NotFoundError("Outfit", outfit_id)
        repo.add(entry)
        repo.db.flush()

    logger.info(f"Logged wear of outfit {outfit_id} for user {repo.user_id}")
    return entry


def get_recent_wear_logs(repo: TenantRepository, limit: Optional[int] = None) -> List[WearLog]:
    """Most recent wear logs by worn_date, each with its outfit loaded"""
    if limit is None:
        limit = settings.RECENT_WEAR_LOG_LIMIT
    return [log for log in repo.recent_wear_logs(limit) if log.outfit is not None]
