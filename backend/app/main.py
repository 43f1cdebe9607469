"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from app.config import settings
from app.database import engine, get_db
from app.errors import register_exception_handlers
from app.logging_config import configure_logging
from app.models import Base

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and check the database on startup."""
    configure_logging(settings.LOG_LEVEL)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            await conn.execute(text("SELECT 1"))
        logger.info("database connected")
    except Exception:
        logger.exception("Unable to connect to database")

    yield

    # Cleanup
    await engine.dispose()


app = FastAPI(
    title="Picass API",
    version="1.0.0",
    description="Save Unsplash photos, tag them, and search them by tag.",
    lifespan=lifespan,
)

# CORS
origins = [o.strip() for o in settings.CORS_ORIGINS.split(",")]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/api/health")
async def health_check():
    """Verify API and database connectivity."""
    try:
        async for db in get_db():
            await db.execute(text("SELECT 1"))
            return {"status": "ok", "database": "connected"}
    except Exception as e:
        logger.warning("Health check failed: %s", e)
        return {"status": "error", "database": "unavailable"}


# Register routers
from app.routes.users import router as users_router
from app.routes.photos import router as photos_router
from app.routes.tags import router as tags_router
from app.routes.search import router as search_router
from app.routes.search_history import router as search_history_router
app.include_router(users_router)
app.include_router(photos_router)
app.include_router(tags_router)
app.include_router(search_router)
app.include_router(search_history_router)
