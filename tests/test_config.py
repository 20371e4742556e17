"""Settings parsing."""

from __future__ import annotations

from datetime import timedelta

import pytest
from pydantic import ValidationError

from company_erp.config import Settings, parse_duration
from tests.helpers import JWT_SECRET


def _settings(**overrides) -> Settings:
    values = {"JWT_SECRET": JWT_SECRET}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("30d", timedelta(days=30)),
        ("12h", timedelta(hours=12)),
        ("15m", timedelta(minutes=15)),
        ("45s", timedelta(seconds=45)),
        ("3600", timedelta(seconds=3600)),
    ],
)
def test_parse_duration(value: str, expected: timedelta) -> None:
    assert parse_duration(value) == expected


@pytest.mark.parametrize("value", ["", "thirty days", "10w", "-5d"])
def test_parse_duration_rejects_garbage(value: str) -> None:
    with pytest.raises(ValueError):
        parse_duration(value)


def test_defaults() -> None:
    settings = _settings()
    assert settings.API_PREFIX == "/api"
    assert settings.DOCS_URL == "/api-docs"
    assert settings.PORT == 5000
    assert settings.jwt_expires_delta == timedelta(days=30)
    assert settings.STRIPE_SECRET_KEY is None
    assert settings.cors_origins == ["*"]


def test_jwt_secret_is_required(monkeypatch) -> None:
    monkeypatch.delenv("JWT_SECRET", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_short_jwt_secret_is_rejected() -> None:
    with pytest.raises(ValidationError):
        _settings(JWT_SECRET="too-short")


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("JWT_SECRET", JWT_SECRET)
    monkeypatch.setenv("JWT_EXPIRE", "2h")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings(_env_file=None)
    assert settings.jwt_expires_delta == timedelta(hours=2)
    assert settings.LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("http://a.example, http://b.example", ["http://a.example", "http://b.example"]),
        ('["http://a.example"]', ["http://a.example"]),
    ],
)
def test_cors_origins(raw: str, expected: list) -> None:
    assert _settings(CORS_ORIGINS=raw).cors_origins == expected


def test_invalid_log_format_is_rejected() -> None:
    with pytest.raises(ValidationError):
        _settings(LOG_FORMAT="xml")


def test_invalid_jwt_expire_is_rejected() -> None:
    with pytest.raises(ValidationError):
        _settings(JWT_EXPIRE="forever")
