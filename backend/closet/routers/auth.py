from fastapi import APIRouter, Depends

from closet.constants import CATEGORIES, COLORS, ENUMS_VERSION, SEASONS, TAGS
from closet.models import User
from closet.schemas import EnumsResponse, UserResponse
from closet.utils.auth import get_current_user

router = APIRouter(
    responses={
        401: {"description": "Not authenticated - identity headers missing"},
    }
)


@router.get("/auth/user", response_model=UserResponse, tags=["auth"])
async def read_current_user(current_user: User = Depends(get_current_user)):
    return current_user


@router.get("/enums", response_model=EnumsResponse, tags=["meta"])
async def read_enums():
    """Fixed categories, colors, seasons and suggested tags"""
    return {
        "version": ENUMS_VERSION,
        "categories": list(CATEGORIES),
        "colors": list(COLORS),
        "seasons": list(SEASONS),
        "tags": list(TAGS),
    }
