"""Tags API routes."""
import logging
from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.errors import ApiError, internal_error
from app.models.tag import Tag
from app.schemas.tag import MessageResponse, TagAppend
from app.services.photo_rules import lock_photo, tag_limit_reached
from app.services.validators import ensure_valid, parse_body, validate_photo_id, validate_tags

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tags"])


@router.post("/create/tag/{photo_id}", response_model=MessageResponse)
async def create_tag(
    photo_id: str,
    body: dict = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Append tags to an existing photo, keeping it at five tags or fewer.

    The photo row stays locked from the limit check until the new tags are
    committed.
    """
    errors = validate_photo_id(photo_id)
    if errors:
        logger.info("Rejected tags for invalid photo id %r", photo_id)
        raise ApiError(400, errors[0])
    ensure_valid(validate_tags(body))
    payload = parse_body(TagAppend, body)

    try:
        photo = await lock_photo(db, int(photo_id))
        if photo is None:
            logger.info("Rejected tags for unknown photo %s", photo_id)
            raise ApiError(404, "Photo not found.")
        if await tag_limit_reached(db, photo.id, len(payload.tags)):
            raise ApiError(404, "tags are maximum")

        for name in payload.tags:
            db.add(Tag(name=name, photo_id=photo.id))
        await db.commit()
    except ApiError:
        raise
    except Exception as e:
        await db.rollback()
        return internal_error("Internal server error.", e)

    logger.info("Added %d tag(s) to photo %s", len(payload.tags), photo_id)
    return MessageResponse(message="Tag created successfully")
