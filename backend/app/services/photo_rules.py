"""Business checks shared by the user, photo and tag routes.

Each check issues a single read and answers yes/no; the routes decide what
to do with the answer.
"""
import logging

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.photo import Photo
from app.models.tag import Tag
from app.models.user import User

logger = logging.getLogger(__name__)

MAX_TAGS_PER_PHOTO = 5
MAX_TAG_LENGTH = 20


async def email_exists(db: AsyncSession, email: str) -> bool:
    """True iff a user with exactly this email is already stored."""
    result = await db.execute(select(User.id).where(User.email == email).limit(1))
    return result.scalar_one_or_none() is not None


async def lock_photo(db: AsyncSession, photo_id: int) -> Photo | None:
    """Load a photo with a row lock held until the session's transaction ends.

    Serializes concurrent tag appends on the same photo. Dialects without
    row locks (SQLite) ignore FOR UPDATE.
    """
    result = await db.execute(
        select(Photo).where(Photo.id == photo_id).with_for_update()
    )
    return result.scalar_one_or_none()


async def tag_limit_reached(db: AsyncSession, photo_id: int, incoming_count: int) -> bool:
    """True when the photo is full or the incoming tags would overflow it."""
    result = await db.execute(
        select(func.count(Tag.id)).where(Tag.photo_id == photo_id)
    )
    current = result.scalar_one()
    reached = current == MAX_TAGS_PER_PHOTO or current + incoming_count > MAX_TAGS_PER_PHOTO
    if reached:
        logger.info(
            "Tag limit reached for photo %s (%d existing, %d incoming)",
            photo_id, current, incoming_count,
        )
    return reached
