"""
Users are created the first time the identity provider presents them.
"""
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from closet.core.exceptions import DatabaseError
from closet.models import User
from closet.models.base import utcnow
from closet.schemas import Identity

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def upsert_user(db: Session, identity: Identity) -> User:
    """Insert the user, or refresh profile fields the provider sent"""
    user = get_user(db, identity.id)
    profile = identity.model_dump(exclude={"id"}, exclude_none=True)

    if user is None:
        user = User(id=identity.id, **profile)
        db.add(user)
        logger.info(f"Created user {identity.id} on first authentication")
    elif any(getattr(user, k) != v for k, v in profile.items()):
        for key, value in profile.items():
            setattr(user, key, value)
        user.updated_at = utcnow()
    else:
        return user

    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Upsert of user {identity.id} failed: {exc}", exc_info=True)
        raise DatabaseError("Could not save user") from exc
    db.refresh(user)
    return user
