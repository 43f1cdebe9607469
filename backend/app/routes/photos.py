"""Photo API routes: saving photos and finding them by tag."""
import logging
from typing import Optional
from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.database import get_db
from app.errors import ApiError, internal_error
from app.models.photo import Photo
from app.models.search_history import SearchHistory
from app.models.tag import Tag
from app.schemas.photo import (
    PhotoCreate, PhotoCreatedResponse, PhotoResponse, PhotosByTagResponse,
)
from app.services.photo_rules import MAX_TAG_LENGTH, MAX_TAGS_PER_PHOTO
from app.services.validators import (
    ensure_valid, parse_body, parse_int,
    validate_photo, validate_search_photo_by_tags,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["photos"])

SORT_ORDERS = ("ASC", "DESC")


@router.post("/create/photo", response_model=PhotoCreatedResponse)
async def create_photo(
    body: dict = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Save a photo together with up to five tags.

    The photo and its tags are committed in one transaction.
    """
    ensure_valid(validate_photo(body))
    payload = parse_body(PhotoCreate, body)
    tags = payload.tags or []

    if len(tags) > MAX_TAGS_PER_PHOTO:
        logger.info("Rejected photo with %d tags", len(tags))
        raise ApiError(400, f"A photo can have a maximum of {MAX_TAGS_PER_PHOTO} tags.")
    if any(len(name) > MAX_TAG_LENGTH for name in tags):
        logger.info("Rejected photo with a tag over %d characters", MAX_TAG_LENGTH)
        raise ApiError(400, f"Each tag must not exceed {MAX_TAG_LENGTH} characters in length.")

    try:
        photo = Photo(
            image_url=payload.image_url,
            description=payload.description,
            alt_description=payload.alt_description,
            user_id=payload.user_id,
        )
        db.add(photo)
        await db.flush()
        for name in tags:
            db.add(Tag(name=name, photo_id=photo.id))
        await db.commit()
        await db.refresh(photo)
    except Exception as e:
        await db.rollback()
        return internal_error("Internal server error.", e)

    logger.info("Saved photo %s with %d tag(s)", photo.id, len(tags))
    return PhotoCreatedResponse(
        message="Photo saved successfully.",
        photo=PhotoResponse.model_validate(photo),
    )


@router.get("/photos/tag/search", response_model=PhotosByTagResponse)
async def search_photos_by_tag(
    tag: Optional[str] = Query(None),
    sort: str = Query("ASC", description="Order by save date: ASC or DESC"),
    user_id: Optional[str] = Query(None, alias="userId"),
    db: AsyncSession = Depends(get_db),
):
    """Find photos carrying a tag, ordered by save date.

    When a userId is given the search is recorded in that user's history.
    """
    ensure_valid(validate_search_photo_by_tags({"tag": tag, "userId": user_id}))

    direction = sort.upper()
    if direction not in SORT_ORDERS:
        logger.info("Rejected tag search with sort order %r", sort)
        raise ApiError(400, "Invalid sort order. Use 'ASC' or 'DESC'.")

    try:
        result = await db.execute(select(Tag.photo_id).where(Tag.name == tag))
        photo_ids = sorted(set(result.scalars().all()))
        if not photo_ids:
            logger.info("Tag search found no tag %r", tag)
            raise ApiError(404, "Tag not found.")

        if user_id:
            db.add(SearchHistory(user_id=parse_int(user_id), query=tag))
            await db.commit()

        if direction == "DESC":
            order = (Photo.date_saved.desc(), Photo.id.desc())
        else:
            order = (Photo.date_saved.asc(), Photo.id.asc())
        result = await db.execute(
            select(Photo)
            .where(Photo.id.in_(photo_ids))
            .options(selectinload(Photo.tags))
            .order_by(*order)
        )
        photos = result.scalars().all()
        if not photos:
            logger.info("Tag search for %r matched no photos", tag)
            raise ApiError(404, "No photos found for the given tag.")
    except ApiError:
        raise
    except Exception as e:
        return internal_error("Error while fetching the Photos by tag.", e)

    return {"photos": [_to_response(p) for p in photos]}


def _to_response(photo: Photo) -> dict:
    """Convert a photo with loaded tags to a search result dict."""
    return {
        "image_url": photo.image_url,
        "description": photo.description,
        "date_saved": photo.date_saved,
        "tags": [t.name for t in photo.tags],
    }
