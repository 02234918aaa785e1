"""
Notes API - Settings Tests
===========================

Tests for environment parsing and validation in app.config.Settings.
"""

import pytest
from pydantic import ValidationError

from app.config import Settings


class TestDatabaseUrl:

    def test_postgresql_url_uses_asyncpg(self):
        settings = Settings(database_url="postgresql://u:p@db:5432/notes")
        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/notes"

    def test_postgres_scheme_uses_asyncpg(self):
        settings = Settings(database_url="postgres://u:p@db/notes")
        assert settings.database_url == "postgresql+asyncpg://u:p@db/notes"

    def test_explicit_driver_is_kept(self):
        url = "postgresql+asyncpg://u:p@db/notes"
        assert Settings(database_url=url).database_url == url

    def test_sqlite_detection(self):
        assert Settings(database_url="sqlite+aiosqlite:///:memory:").is_sqlite
        assert not Settings(database_url="postgresql://u:p@db/notes").is_sqlite

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://env:pw@envhost/envdb")
        assert Settings().database_url == "postgresql+asyncpg://env:pw@envhost/envdb"


class TestServerSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        settings = Settings()
        assert settings.backend_host == "0.0.0.0"
        assert settings.backend_port == 8000
        assert settings.log_level == "INFO"

    def test_log_level_is_uppercased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
