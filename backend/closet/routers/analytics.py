from fastapi import APIRouter, Depends

from closet.repository import TenantRepository
from closet.schemas import AnalyticsSnapshot
from closet.services.analytics import compute_analytics
from closet.utils.auth import get_repository

router = APIRouter()


@router.get("", response_model=AnalyticsSnapshot)
async def get_analytics(repo: TenantRepository = Depends(get_repository)):
    """
    Wardrobe statistics, recomputed from scratch on every call
    """
    return compute_analytics(repo)
