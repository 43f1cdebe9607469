"""Async SQLAlchemy engine and session factory.

Routes take a session through ``Depends(get_db)`` and commit their own
writes; a session closed without a commit rolls back.
"""
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.config import settings


def build_engine(url: str) -> AsyncEngine:
    """Create the async engine for a database URL.

    SQLite (dev and tests) shares one connection so in-memory databases
    survive across sessions.
    """
    if url.startswith("sqlite"):
        return create_async_engine(
            url,
            echo=False,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(
        url,
        echo=False,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,
    )


engine = build_engine(settings.DATABASE_URL)

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db():
    """FastAPI dependency that yields an async DB session."""
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()
