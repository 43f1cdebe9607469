"""Search history response schemas."""
from datetime import datetime
from typing import Optional
from app.schemas.base import CamelModel, CamelORMModel


class SearchHistoryResponse(CamelORMModel):
    id: int
    user_id: int
    query: str
    created_at: Optional[datetime] = None


class SearchHistoryListResponse(CamelModel):
    # Key spelling is part of the public API.
    search_histoies: list[SearchHistoryResponse]
