from fastapi import APIRouter, Depends, File, Form, UploadFile
from typing import List, Optional

from closet.core.exceptions import ClosetException, NotFoundError
from closet.repository import TenantRepository
from closet.schemas import MessageResponse, OutfitCreate, OutfitUpdate, OutfitWithPieces
from closet.services import outfits as outfit_service
from closet.utils.auth import get_repository
from closet.utils.forms import build_schema, parse_json_list, present
from closet.utils.image_storage import OUTFITS, delete_image, store_image

router = APIRouter()


@router.get("", response_model=List[OutfitWithPieces])
async def list_outfits(repo: TenantRepository = Depends(get_repository)):
    """
    Get the current user's outfits with their pieces, newest first
    """
    return outfit_service.list_outfits(repo)


@router.get("/{outfit_id}", response_model=OutfitWithPieces)
async def get_outfit(outfit_id: str, repo: TenantRepository = Depends(get_repository)):
    outfit = outfit_service.get_outfit(repo, outfit_id)
    if outfit is None:
        raise NotFoundError("Outfit", outfit_id)
    return outfit


@router.post("", response_model=OutfitWithPieces, status_code=201)
async def create_outfit(
    name: Optional[str] = Form(None),
    piece_ids: Optional[str] = Form(None, description="JSON array of piece ids"),
    cover_image: Optional[UploadFile] = File(None),
    repo: TenantRepository = Depends(get_repository),
):
    """
    Create an outfit from pieces the user owns. Any foreign piece id rejects the whole request.
    """
    ids = parse_json_list(piece_ids, "piece_ids") or []
    payload = build_schema(OutfitCreate, {"name": name})

    if cover_image is not None:
        payload.cover_image = await store_image(cover_image, OUTFITS)

    try:
        return outfit_service.create_outfit(repo, payload, ids)
    except ClosetException:
        delete_image(payload.cover_image)
        raise


@router.patch("/{outfit_id}", response_model=OutfitWithPieces)
async def update_outfit(
    outfit_id: str,
    name: Optional[str] = Form(None),
    piece_ids: Optional[str] = Form(None, description="JSON array of piece ids; replaces the whole set"),
    cover_image: Optional[UploadFile] = File(None),
    repo: TenantRepository = Depends(get_repository),
):
    """
    Rename, re-cover, or replace the piece set of an outfit. Wear counters are not editable.
    """
    existing = outfit_service.get_outfit(repo, outfit_id)
    if existing is None:
        raise NotFoundError("Outfit", outfit_id)
    old_cover = existing.cover_image

    ids = parse_json_list(piece_ids, "piece_ids")
    new_name = present(name)
    changes = build_schema(OutfitUpdate, {"name": new_name} if new_name is not None else {})

    if cover_image is not None:
        changes.cover_image = await store_image(cover_image, OUTFITS)

    try:
        updated = outfit_service.update_outfit(repo, outfit_id, changes, ids)
    except ClosetException:
        if cover_image is not None:
            delete_image(changes.cover_image)
        raise
    if updated is None:
        raise NotFoundError("Outfit", outfit_id)

    if cover_image is not None and old_cover and old_cover != updated.cover_image:
        delete_image(old_cover)
    return updated


@router.delete("/{outfit_id}", response_model=MessageResponse)
async def delete_outfit(outfit_id: str, repo: TenantRepository = Depends(get_repository)):
    """
    Delete an outfit along with its piece links and wear history
    """
    outfit = outfit_service.get_outfit(repo, outfit_id)
    cover_image = outfit.cover_image if outfit else None

    if not outfit_service.delete_outfit(repo, outfit_id):
        raise NotFoundError("Outfit", outfit_id)

    delete_image(cover_image)
    return {"message": "Outfit deleted"}
