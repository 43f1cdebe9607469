"""Request validators.

Each validator takes the raw request mapping (JSON body or query string)
and returns a list of human-readable problems; an empty list means the
request is valid. Validators never raise.
"""
import math
import re
from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.errors import RequestValidationFailed

TRUSTED_IMAGE_PREFIX = "https://images.unsplash.com/"

# Ids are stored in 32-bit INTEGER columns.
MAX_ID = 2**31 - 1

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_POSITIVE_INT = re.compile(r"^\d+$")

ModelT = TypeVar("ModelT", bound=BaseModel)


def _is_nonempty_str(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _fits_id(value: Optional[int]) -> bool:
    return value is not None and -MAX_ID - 1 <= value <= MAX_ID


def parse_int(value: Any) -> Optional[int]:
    """Parse the leading integer of a query-string value ("7abc" -> 7)."""
    if _is_number(value):
        return int(value) if math.isfinite(value) else None
    if not isinstance(value, str):
        return None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def is_numeric(value: Any) -> bool:
    """Loose numeric check: the whole value must read as a finite number."""
    if _is_number(value):
        return math.isfinite(value)
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        return math.isfinite(float(value))
    except ValueError:
        return False


def validate_user(body: Mapping[str, Any]) -> list[str]:
    errors = []
    if not _is_nonempty_str(body.get("username")):
        errors.append("Username is required and should be string.")
    email = body.get("email")
    if not _is_nonempty_str(email) or "@" not in email or "." not in email:
        errors.append("email is require and should be string.")
    return errors


def validate_search_query(params: Mapping[str, Any]) -> list[str]:
    if not _is_nonempty_str(params.get("query")):
        return ["Query is require and should be string."]
    return []


def validate_photo(body: Mapping[str, Any]) -> list[str]:
    errors = []
    image_url = body.get("imageUrl")
    if not isinstance(image_url, str) or not image_url.startswith(TRUSTED_IMAGE_PREFIX):
        errors.append("Invalid image URL")
    user_id = body.get("userId")
    if (
        not _is_number(user_id) or not user_id
        or not float(user_id).is_integer() or not _fits_id(int(user_id))
    ):
        errors.append("userId is required and should be number.")
    tags = body.get("tags")
    if tags is not None and not _is_tag_list(tags):
        errors.append("tags should be an array of strings.")
    return errors


def validate_tags(body: Mapping[str, Any]) -> list[str]:
    """Tags appended to an existing photo must arrive as a list of strings."""
    if not _is_tag_list(body.get("tags")):
        return ["tags is required and should be an array of strings."]
    return []


def validate_photo_id(photo_id: Any) -> list[str]:
    if (
        not isinstance(photo_id, str) or not _POSITIVE_INT.match(photo_id)
        or not 0 < int(photo_id) <= MAX_ID
    ):
        return ["photoId is requires and should be number."]
    return []


def validate_search_photo_by_tags(params: Mapping[str, Any]) -> list[str]:
    errors = []
    if not _is_nonempty_str(params.get("tag")):
        errors.append("Tags require and should be string.")
    user_id = params.get("userId")
    if user_id and not _fits_id(parse_int(user_id)):
        errors.append("UserId must be number.")
    return errors


def validate_search_history(params: Mapping[str, Any]) -> list[str]:
    user_id = params.get("userId")
    if not user_id or not is_numeric(user_id) or not _fits_id(parse_int(user_id)):
        return ["userId is required and should be a number."]
    return []


def _is_tag_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(tag, str) for tag in value)


def ensure_valid(errors: list[str]) -> None:
    """Raise the 400 error for a non-empty validator result."""
    if errors:
        raise RequestValidationFailed(errors)


def parse_body(schema: Type[ModelT], body: Mapping[str, Any]) -> ModelT:
    """Convert a validated raw body into its typed schema."""
    try:
        return schema.model_validate(body)
    except ValidationError as e:
        raise RequestValidationFailed([
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ])
