"""
FastAPI application entry point
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from movie_booking.api import bookings
from movie_booking.core.config import get_settings
from movie_booking.core.database import Database
from movie_booking.core.logging_config import setup_logging
from movie_booking.middleware.tracing import TracingMiddleware

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for startup and shutdown"""
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    logger.info("🚀 Starting up Movie Booking System...")

    logger.info(f"📊 Database: {settings.DATABASE_URL.split('@')[-1]}")
    database = Database.from_settings(settings)

    # Test database connection
    try:
        async with database.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("✅ Database connection successful")
    except Exception as e:
        logger.error(f"❌ Database connection failed: {e}")
        await database.dispose()
        raise

    app.state.database = database

    yield

    logger.info("🛑 Shutting down...")
    await database.dispose()
    logger.info("✅ Cleanup complete")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Movie ticket booking with atomic booking creation",
    lifespan=lifespan,
)

app.add_middleware(TracingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


# Include routers
app.include_router(bookings.router, prefix="/api/v1", tags=["Bookings"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "movie_booking.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
