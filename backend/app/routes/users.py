"""User API routes."""
import logging
from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.errors import ApiError, internal_error
from app.models.user import User
from app.schemas.user import UserCreate, UserCreatedResponse, UserResponse
from app.services.photo_rules import email_exists
from app.services.validators import ensure_valid, parse_body, validate_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.post("/create/user", response_model=UserCreatedResponse)
async def create_user(
    body: dict = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Create a user unless one with the same email already exists."""
    ensure_valid(validate_user(body))
    payload = parse_body(UserCreate, body)

    try:
        if await email_exists(db, payload.email):
            logger.info("Rejected duplicate user email %s", payload.email)
            raise ApiError(404, "user already existed.")

        user = User(username=payload.username, email=payload.email)
        db.add(user)
        await db.commit()
        await db.refresh(user)
    except ApiError:
        raise
    except Exception as e:
        return internal_error("Internal server error.", e)

    logger.info("Created user %s", user.id)
    return UserCreatedResponse(
        message="user created successfully.",
        user=UserResponse.model_validate(user),
    )
