"""User model - owners of saved photos and search history."""
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.models.base import Base, TimestampMixin


class User(Base, TimestampMixin):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False)
    # Uniqueness is checked by the create-user route, not the database.
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    photos = relationship("Photo", back_populates="user")
    search_histories = relationship("SearchHistory", back_populates="user")
