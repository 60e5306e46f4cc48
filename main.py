import logging
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from optahire.core.config import settings
from optahire.core.database import Database
from optahire.core.errors import register_exception_handlers
from optahire.core.logging_config import setup_logging
from optahire.api.endpoints import health, resumes

setup_logging(settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    logger.info("Starting up OptaHire API...")
    app.state.database.init_db()

    yield

    # Shutdown
    logger.info("Shutting down OptaHire API...")
    app.state.database.dispose()


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        database: Database to serve from (default: built from settings)
    """
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="Job hiring marketplace API: candidate resume profiles",
        lifespan=lifespan
    )
    app.state.database = database or Database.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health.router, prefix=settings.API_V1_STR)
    app.include_router(resumes.router, prefix=settings.API_V1_STR)

    @app.get("/")
    async def root():
        """Root endpoint - API health check"""
        return {
            "message": "OptaHire API",
            "version": "1.0.0",
            "status": "healthy"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )
