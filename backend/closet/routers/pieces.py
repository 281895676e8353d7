from fastapi import APIRouter, Depends, File, Form, UploadFile
from typing import List, Optional

from closet.core.exceptions import ClosetException, NotFoundError
from closet.repository import TenantRepository
from closet.schemas import ClothingPiece, ClothingPieceCreate, ClothingPieceUpdate, MessageResponse
from closet.services import pieces as piece_service
from closet.utils.auth import get_repository
from closet.utils.forms import build_schema, parse_json_list, present
from closet.utils.image_storage import PIECES, delete_image, store_image

router = APIRouter()


@router.get("", response_model=List[ClothingPiece])
async def list_pieces(repo: TenantRepository = Depends(get_repository)):
    """
    Get the current user's pieces, newest first
    """
    return piece_service.list_pieces(repo)


@router.get("/{piece_id}", response_model=ClothingPiece)
async def get_piece(piece_id: str, repo: TenantRepository = Depends(get_repository)):
    piece = piece_service.get_piece(repo, piece_id)
    if piece is None:
        raise NotFoundError("Piece", piece_id)
    return piece


@router.post("", response_model=ClothingPiece, status_code=201)
async def create_piece(
    name: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    color: Optional[str] = Form(None),
    season: Optional[str] = Form(None),
    tags: Optional[str] = Form(None, description="JSON array of tag strings"),
    image: Optional[UploadFile] = File(None),
    repo: TenantRepository = Depends(get_repository),
):
    """
    Add a new piece, with an optional image upload
    """
    payload = build_schema(ClothingPieceCreate, {
        "name": name,
        "category": category,
        "color": color,
        "season": season,
        "tags": parse_json_list(tags, "tags") or [],
    })

    if image is not None:
        payload.image_path = await store_image(image, PIECES)

    try:
        return piece_service.create_piece(repo, payload)
    except ClosetException:
        delete_image(payload.image_path)
        raise


@router.patch("/{piece_id}", response_model=ClothingPiece)
async def update_piece(
    piece_id: str,
    name: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    color: Optional[str] = Form(None),
    season: Optional[str] = Form(None),
    tags: Optional[str] = Form(None, description="JSON array of tag strings"),
    image: Optional[UploadFile] = File(None),
    repo: TenantRepository = Depends(get_repository),
):
    """
    Update a piece; blank fields are left unchanged. A new image replaces the old file.
    """
    existing = piece_service.get_piece(repo, piece_id)
    if existing is None:
        raise NotFoundError("Piece", piece_id)
    old_image = existing.image_path

    data = {
        "name": present(name),
        "category": present(category),
        "color": present(color),
        "season": present(season),
        "tags": parse_json_list(tags, "tags"),
    }
    changes = build_schema(ClothingPieceUpdate, {k: v for k, v in data.items() if v is not None})

    if image is not None:
        changes.image_path = await store_image(image, PIECES)

    try:
        updated = piece_service.update_piece(repo, piece_id, changes)
    except ClosetException:
        if image is not None:
            delete_image(changes.image_path)
        raise

    if image is not None and old_image and old_image != updated.image_path:
        delete_image(old_image)
    return updated


@router.delete("/{piece_id}", response_model=MessageResponse)
async def delete_piece(piece_id: str, repo: TenantRepository = Depends(get_repository)):
    """
    Delete a piece and its image; it is removed from every outfit
    """
    piece = piece_service.get_piece(repo, piece_id)
    image_path = piece.image_path if piece else None

    if not piece_service.delete_piece(repo, piece_id):
        raise NotFoundError("Piece", piece_id)

    delete_image(image_path)
    return {"message": "Piece deleted"}
