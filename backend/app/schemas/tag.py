"""Tag request/response schemas."""
from app.schemas.base import CamelModel


class TagAppend(CamelModel):
    tags: list[str]


class MessageResponse(CamelModel):
    message: str
