"""Tag model - short labels attached to a photo."""
from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.models.base import Base, TimestampMixin


class Tag(Base, TimestampMixin):
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    # Length is capped at 20 when tags arrive with a new photo; the
    # append-tag route stores names as given.
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    photo_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("photos.id", ondelete="CASCADE"), nullable=False, index=True
    )

    photo = relationship("Photo", back_populates="tags")
