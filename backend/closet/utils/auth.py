"""
Identity dependency.

Authentication happens upstream: the identity provider (or the proxy in front
of this service) sets trusted headers carrying the user's subject id and
profile claims. This module turns those headers into a User row, creating it
on first sight.
"""
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from closet.config import settings
from closet.core.exceptions import AuthenticationError
from closet.database import get_db
from closet.models import User
from closet.repository import TenantRepository
from closet.schemas import Identity
from closet.services.users import upsert_user


def _header(request: Request, name: str) -> Optional[str]:
    value = request.headers.get(name)
    return value.strip() if value and value.strip() else None


def identity_from_request(request: Request) -> Identity:
    user_id = _header(request, settings.IDENTITY_HEADER)
    if not user_id:
        raise AuthenticationError()
    return Identity(
        id=user_id,
        email=_header(request, settings.IDENTITY_EMAIL_HEADER),
        first_name=_header(request, settings.IDENTITY_FIRST_NAME_HEADER),
        last_name=_header(request, settings.IDENTITY_LAST_NAME_HEADER),
        profile_image_url=_header(request, settings.IDENTITY_PROFILE_IMAGE_HEADER),
    )


def get_current_user(
    identity: Identity = Depends(identity_from_request),
    db: Session = Depends(get_db),
) -> User:
    return upsert_user(db, identity)


def get_repository(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> TenantRepository:
    """Tenant repository bound to the authenticated user"""
    return TenantRepository(db, current_user.id)
