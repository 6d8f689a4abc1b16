"""
Tests for environment-driven settings.
"""

from movies_api.core.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.API_V1_STR == "/api"
    assert settings.DEFAULT_PAGE_SIZE == 50
    assert settings.MOVIES_DB_PATH == "db/movies.db"
    assert settings.RATINGS_DB_PATH == "db/ratings.db"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MOVIES_DB_PATH", "/data/movies.db")
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "25")
    monkeypatch.setenv("BACKEND_CORS_ORIGINS", "http://localhost:3000, https://example.com")
    settings = Settings(_env_file=None)
    assert settings.MOVIES_DB_PATH == "/data/movies.db"
    assert settings.DEFAULT_PAGE_SIZE == 25
    assert settings.BACKEND_CORS_ORIGINS == ["http://localhost:3000", "https://example.com"]


def test_cors_origins_accepts_json_list(monkeypatch):
    monkeypatch.setenv("BACKEND_CORS_ORIGINS", '["http://localhost:3000", "https://example.com"]')
    settings = Settings(_env_file=None)
    assert settings.BACKEND_CORS_ORIGINS == ["http://localhost:3000", "https://example.com"]
