"""Photo model - images saved from Unsplash search results."""
from datetime import datetime
from sqlalchemy import Text, Integer, DateTime, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.models.base import Base, TimestampMixin, utcnow


class Photo(Base, TimestampMixin):
    __tablename__ = "photos"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    alt_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    date_saved: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    user = relationship("User", back_populates="photos")
    tags = relationship(
        "Tag", back_populates="photo",
        cascade="all, delete-orphan", passive_deletes=True,
        order_by="Tag.id",
    )

    __table_args__ = (
        Index("idx_photos_date_saved", "date_saved"),
    )
