from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from closet.repository import TenantRepository
from closet.schemas import WearLog, WearLogCreate, WearLogWithOutfit
from closet.services import wear_log as wear_log_service
from closet.utils.auth import get_repository

router = APIRouter()


@router.post("", response_model=WearLog, status_code=201)
async def log_wear(payload: WearLogCreate, repo: TenantRepository = Depends(get_repository)):
    """
    Record that an outfit was worn; bumps its worn count and last worn time
    """
    return wear_log_service.log_wear(
        repo,
        payload.outfit_id,
        location=payload.location,
        worn_date=payload.worn_date,
    )


@router.get("/recent", response_model=List[WearLogWithOutfit])
async def recent_wear_logs(
    limit: Optional[int] = Query(None, ge=1, description="Number of entries (default 10)"),
    repo: TenantRepository = Depends(get_repository),
):
    return wear_log_service.get_recent_wear_logs(repo, limit)
