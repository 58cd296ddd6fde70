"""Tests for service configuration."""

import pytest
from pydantic import ValidationError

from app.config import Settings


def test_defaults_from_environment():
    settings = Settings()

    assert settings.SERVICE_NAME == "customer-service"
    assert settings.MONGO_DB_NAME == "customer_test_db"
    assert settings.DEFAULT_PAGE_LIMIT == 10


def test_environment_override(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb://db.internal:27017")
    monkeypatch.setenv("MAX_PAGE_LIMIT", "50")

    settings = Settings()

    assert settings.MONGO_URI == "mongodb://db.internal:27017"
    assert settings.MAX_PAGE_LIMIT == 50


def test_cors_origins_list(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example,")

    assert Settings().cors_origins_list == ["http://a.example", "http://b.example"]


def test_rejects_invalid_port(monkeypatch):
    monkeypatch.setenv("SERVICE_PORT", "70000")

    with pytest.raises(ValidationError):
        Settings()
