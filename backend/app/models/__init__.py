"""Import all models so SQLAlchemy metadata knows about them."""
from app.models.base import Base
from app.models.user import User
from app.models.photo import Photo
from app.models.tag import Tag
from app.models.search_history import SearchHistory

__all__ = ["Base", "User", "Photo", "Tag", "SearchHistory"]
