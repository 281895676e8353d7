"""
Declarative base and shared column helpers.
"""
import uuid
from datetime import datetime

from sqlalchemy.orm import declarative_base

# Base class for models
Base = declarative_base()


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Naive UTC timestamp, the format every DateTime column stores"""
    return datetime.utcnow()
