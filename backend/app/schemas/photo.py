"""Photo request/response schemas."""
from datetime import datetime
from typing import Optional
from pydantic import Field
from app.schemas.base import CamelModel, CamelORMModel


class PhotoCreate(CamelModel):
    image_url: str
    description: Optional[str] = None
    alt_description: Optional[str] = None
    tags: Optional[list[str]] = None
    user_id: int


class PhotoResponse(CamelORMModel):
    id: int
    image_url: str
    description: Optional[str] = None
    alt_description: Optional[str] = None
    user_id: int
    date_saved: datetime
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PhotoCreatedResponse(CamelModel):
    message: str
    photo: PhotoResponse


class PhotoByTagResult(CamelModel):
    image_url: str
    description: Optional[str] = None
    date_saved: datetime
    tags: list[str] = []


class PhotosByTagResponse(CamelModel):
    photos: list[PhotoByTagResult]


class ImageResult(CamelModel):
    """One Unsplash result; image_url keeps the raw ``urls`` variants object."""
    image_url: Optional[dict] = None
    description: Optional[str] = None
    alt_description: Optional[str] = None


class ImageSearchResponse(CamelModel):
    images: list[ImageResult] = Field(alias="Images")
