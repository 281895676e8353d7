"""
Helpers for multipart form input.
"""
import json
from typing import List, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from closet.core.exceptions import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_json_list(raw: Optional[str], field: str) -> Optional[List[str]]:
    """Decode a JSON array of strings sent as a form field; None when absent"""
    if raw is None or raw == "":
        return None
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        raise ValidationError(f"{field} must be a JSON array of strings", field=field)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValidationError(f"{field} must be a JSON array of strings", field=field)
    return value


def build_schema(model: Type[ModelT], data: dict) -> ModelT:
    """Validate form data into a schema, reporting failures as ValidationError"""
    try:
        return model(**data)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or None
        message = first.get("msg", "Invalid input")
        if field:
            message = f"{field}: {message}"
        raise ValidationError(message, field=field) from exc


def present(value: Optional[str]) -> Optional[str]:
    """Treat blank form values as not sent"""
    if value is None or not value.strip():
        return None
    return value
