# main.py
"""
Exercise Tracker API - Main Application.

FastAPI app with MongoDB backend.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
import logging
import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from database import Database
from settings import settings
from app.routes import users
from app.utils.errors import ExerciseTrackerException

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize Sentry for error tracking
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.SENTRY_ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        integrations=[
            FastApiIntegration(),
            LoggingIntegration(
                level=logging.INFO,
                event_level=logging.ERROR
            ),
        ],
    )
    logger.info(f"Sentry initialized ({settings.SENTRY_ENVIRONMENT})")
else:
    logger.warning("Sentry DSN not configured - error tracking disabled")

BASE_DIR = Path(__file__).resolve().parent
VIEWS_DIR = BASE_DIR / "views"
PUBLIC_DIR = BASE_DIR / "public"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting Exercise Tracker API...")
    database: Database = app.state.database
    await database.connect()

    yield

    await database.close()
    logger.info("Exercise Tracker API shutdown complete")


async def tracker_exception_handler(request: Request, exc: ExerciseTrackerException):
    """Render handled errors as {"error": message}."""
    logger.info(f"{request.method} {request.url.path} -> {exc.message} ({exc.detail})")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message}
    )


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Build the application.

    Args:
        database: Connection handle to use; one is built from settings when omitted.
    """
    app = FastAPI(
        title="Exercise Tracker API",
        version="1.0.0",
        description="Create users, record exercises and query exercise logs",
        lifespan=lifespan
    )
    app.state.database = database or Database(settings.MONGO_URI, settings.database_name)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ExerciseTrackerException, tracker_exception_handler)

    @app.get("/", include_in_schema=False)
    async def home():
        """Home page."""
        return FileResponse(VIEWS_DIR / "index.html")

    @app.get("/health")
    async def health_check():
        """Health check endpoint - fast response without database dependency."""
        return {
            "status": "ok",
            "environment": settings.ENV,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": "1.0.0"
        }

    @app.get("/health/detailed")
    async def health_check_detailed(request: Request):
        """Detailed health check with MongoDB connectivity test."""
        mongo_ok = await request.app.state.database.ping()
        return {
            "status": "ok" if mongo_ok else "degraded",
            "database": "mongodb",
            "database_connected": mongo_ok,
            "environment": settings.ENV,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": "1.0.0"
        }

    app.include_router(users.router, prefix="/api/users", tags=["Users"])

    # Static assets last so API routes take precedence
    app.mount("/", StaticFiles(directory=PUBLIC_DIR), name="public")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Your app is listening on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
