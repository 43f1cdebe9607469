"""Image search routes backed by the Unsplash API."""
import logging
from typing import Callable, Optional
from fastapi import APIRouter, Depends, Query

from app.errors import ApiError, internal_error
from app.schemas.photo import ImageSearchResponse
from app.services.unsplash_client import UnsplashClient, get_unsplash_client, to_image_result
from app.services.validators import ensure_valid, validate_search_query

logger = logging.getLogger(__name__)

router = APIRouter(tags=["search"])


@router.get("/search/photos", response_model=ImageSearchResponse)
async def search_images(
    query: Optional[str] = Query(None),
    make_client: Callable[[], UnsplashClient] = Depends(get_unsplash_client),
):
    """Search Unsplash and return url variants and descriptions per image."""
    ensure_valid(validate_search_query({"query": query}))

    try:
        async with make_client() as client:
            results = await client.search_photos(query)
    except Exception as e:
        return internal_error("Error while fetching the Images.", e)

    if not results:
        logger.info("No Unsplash results for %r", query)
        raise ApiError(404, "No images found for the given query.")
    return {"Images": [to_image_result(r) for r in results]}
