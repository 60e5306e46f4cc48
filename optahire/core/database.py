"""
Database handle and session dependency.

The engine is owned by an explicitly constructed Database value that the
application opens on startup and disposes on shutdown (see main.lifespan).
"""

import logging
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from optahire.core.config import Settings

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()


class Database:
    """
    Engine plus session factory for one database.

    Usage:
        database = Database.from_settings(settings)
        database.init_db()
        ...
        database.dispose()
    """

    def __init__(self, url: str, **engine_kwargs):
        self.url = make_url(url)
        self.engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a pooled database from application settings."""
        url = settings.DATABASE_URL
        if make_url(url).get_backend_name() == "sqlite":
            return cls(url, connect_args={"check_same_thread": False})

        return cls(
            url,
            pool_pre_ping=True,  # Verify connections before using them
            pool_size=10,  # Connection pool size
            max_overflow=20  # Allow up to 20 connections beyond pool_size
        )

    def session(self) -> Session:
        return self.SessionLocal()

    def init_db(self) -> None:
        """
        Register models and create any missing tables.
        """
        from optahire.models import user, resume  # noqa: F401  Import models to register them

        Base.metadata.create_all(bind=self.engine)
        logger.info(
            f"Database connection established: {self.url.get_backend_name()} "
            f"host={self.url.host} database={self.url.database} "
            f"tables={', '.join(sorted(Base.metadata.tables))}"
        )

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info(f"Database connection closed: {self.url.get_backend_name()}")


def get_db(request: Request):
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
