import logging
from datetime import datetime
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text

from closet import __version__
from closet.config import settings
from closet.core.exceptions import register_exception_handlers
from closet.database import engine, init_db
from closet.routers import analytics, auth, outfits, pieces, wear_log
from closet.schemas import HealthResponse
from closet.utils.image_storage import get_image_storage_status

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Closet Log API",
    description="Wardrobe catalog, outfit composition, wear logging and analytics",
    version=__version__
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins if settings.ENVIRONMENT == "production" else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.on_event("startup")
async def create_tables() -> None:
    """Create missing tables; schema changes go through alembic"""
    init_db()
    logger.info(f"Database ready ({engine.dialect.name}), image storage: {get_image_storage_status()['backend']}")


# Include routers
app.include_router(auth.router, prefix="/api")
app.include_router(pieces.router, prefix="/api/pieces", tags=["pieces"])
app.include_router(outfits.router, prefix="/api/outfits", tags=["outfits"])
app.include_router(wear_log.router, prefix="/api/wear-log", tags=["wear-log"])
app.include_router(analytics.router, prefix="/api/analytics", tags=["analytics"])

# Locally stored piece photos and outfit covers
Path(settings.STATIC_DIR).mkdir(parents=True, exist_ok=True)
app.mount(settings.STATIC_URL_PREFIX, StaticFiles(directory=settings.STATIC_DIR), name="static")


@app.get("/health", response_model=HealthResponse)
@app.head("/health")
async def health_check():
    """
    Health check endpoint with a quick database connectivity probe.
    Supports both GET and HEAD methods for monitoring services.
    """
    db_ok = False
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            db_ok = True
    except Exception as exc:
        logger.warning(f"Health check database probe failed: {exc}")

    return {
        "status": "ok" if db_ok else "degraded",
        "database": "connected" if db_ok else "unavailable",
        "time": datetime.utcnow().isoformat() + "Z",
    }


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Welcome to Closet Log API",
        "version": __version__,
        "docs": "/docs"
    }
