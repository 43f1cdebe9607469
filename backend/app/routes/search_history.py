"""Search history routes."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.errors import ApiError, internal_error
from app.models.search_history import SearchHistory
from app.schemas.search_history import SearchHistoryListResponse, SearchHistoryResponse
from app.services.validators import ensure_valid, parse_int, validate_search_history

logger = logging.getLogger(__name__)

router = APIRouter(tags=["search-history"])


@router.get("/search-history", response_model=SearchHistoryListResponse)
async def get_search_history(
    user_id: Optional[str] = Query(None, alias="userId"),
    db: AsyncSession = Depends(get_db),
):
    """List a user's tag searches in the order they were made."""
    ensure_valid(validate_search_history({"userId": user_id}))

    try:
        result = await db.execute(
            select(SearchHistory)
            .where(SearchHistory.user_id == parse_int(user_id))
            .order_by(SearchHistory.id)
        )
        entries = result.scalars().all()
    except Exception as e:
        return internal_error("Error while fetching the search history by userId.", e)

    if not entries:
        logger.info("No search history for user %s", user_id)
        raise ApiError(400, "no search history found")
    return SearchHistoryListResponse(
        search_histoies=[SearchHistoryResponse.model_validate(h) for h in entries],
    )
