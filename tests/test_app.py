"""
Tests for application wiring.

Tests:
- Health check endpoints
- Error envelopes for framework and unexpected errors
- Database lifecycle and settings
- Logging setup
"""

import json
import logging

from fastapi import APIRouter
from fastapi.testclient import TestClient
from sqlalchemy import inspect

from optahire.core.config import Settings
from optahire.core.database import Database
from optahire.core.logging_config import CustomJsonFormatter, setup_logging
from optahire.core.responses import envelope


class TestHealthCheck:
    """Test health check endpoints"""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health_check(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data

    def test_detailed_health_check_with_database(self, client):
        response = client.get("/api/v1/health/detailed")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["checks"]["database"]["status"] == "healthy"


class TestErrorEnvelopes:
    """Test the error handlers"""

    def test_unknown_route(self, client):
        response = client.get("/api/v1/unknown")

        assert response.status_code == 404
        data = response.json()
        assert data["success"] is False
        assert data["message"] == "Not Found"
        assert "timestamp" in data

    def test_method_not_allowed(self, client, candidate_headers):
        response = client.patch("/api/v1/resumes/user", headers=candidate_headers)

        assert response.status_code == 405
        assert response.json()["success"] is False

    def test_malformed_json_body(self, client, candidate_headers):
        response = client.post(
            "/api/v1/resumes",
            content="{not json",
            headers={**candidate_headers, "Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_unexpected_error_is_500(self, app):
        router = APIRouter()

        @router.get("/boom")
        def boom():
            raise RuntimeError("database went away")

        app.include_router(router)

        with TestClient(app, raise_server_exceptions=False) as test_client:
            response = test_client.get("/boom")

        assert response.status_code == 500
        assert response.json()["success"] is False
        assert response.json()["message"] == "Internal server error"


class TestEnvelope:
    """Test the success envelope builder"""

    def test_payload_between_message_and_timestamp(self):
        body = envelope("Profiles retrieved successfully.", count=0, profiles=[])

        assert list(body) == ["success", "message", "count", "profiles", "timestamp"]
        assert body["success"] is True

    def test_no_payload(self):
        body = envelope("Resume deleted successfully.")

        assert set(body) == {"success", "message", "timestamp"}


class TestDatabase:
    """Test database lifecycle and settings"""

    def test_init_db_creates_tables(self, tmp_path):
        database = Database(f"sqlite:///{tmp_path / 'init.db'}")
        database.init_db()

        tables = inspect(database.engine).get_table_names()
        database.dispose()

        assert {"users", "resumes"} <= set(tables)

    def test_from_settings_uses_override(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'override.db'}"
        settings = Settings(DATABASE_URL_OVERRIDE=url)

        database = Database.from_settings(settings)

        assert database.url.get_backend_name() == "sqlite"
        assert database.url.database == str(tmp_path / "override.db")
        database.dispose()

    def test_database_url_from_parts(self):
        settings = Settings(
            POSTGRES_USER="hire",
            POSTGRES_PASSWORD="secret",
            POSTGRES_SERVER="db",
            POSTGRES_PORT="5433",
            POSTGRES_DB="optahire",
        )

        assert settings.DATABASE_URL == "postgresql+psycopg2://hire:secret@db:5433/optahire"

    def test_default_database_uses_psycopg2_driver(self):
        """The declared psycopg2 driver is named explicitly, not left to SQLAlchemy's default"""
        database = Database.from_settings(Settings(DATABASE_URL_OVERRIDE=None))

        assert database.url.drivername == "postgresql+psycopg2"
        assert database.engine.dialect.driver == "psycopg2"
        database.dispose()

    def test_cors_origins_from_comma_separated_string(self):
        settings = Settings(BACKEND_CORS_ORIGINS="http://a.test, http://b.test")

        assert settings.BACKEND_CORS_ORIGINS == ["http://a.test", "http://b.test"]


class TestLogging:
    """Test logging configuration"""

    def test_json_formatter_adds_standard_fields(self):
        formatter = CustomJsonFormatter('%(message)s')
        record = logging.LogRecord("optahire.test", logging.WARNING, __file__, 10, "resume rejected", None, None)

        data = json.loads(formatter.format(record))

        assert data["message"] == "resume rejected"
        assert data["level"] == "WARNING"
        assert data["logger"] == "optahire.test"
        assert data["line"] == 10

    def test_setup_logging_replaces_root_handlers(self):
        root_logger = logging.getLogger()
        original_handlers = root_logger.handlers[:]
        original_level = root_logger.level

        try:
            setup_logging("DEBUG", json_logs=True)

            assert root_logger.level == logging.DEBUG
            assert len(root_logger.handlers) == 1
            assert isinstance(root_logger.handlers[0].formatter, CustomJsonFormatter)
        finally:
            for handler in root_logger.handlers[:]:
                root_logger.removeHandler(handler)
            for handler in original_handlers:
                root_logger.addHandler(handler)
            root_logger.setLevel(original_level)
