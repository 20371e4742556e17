"""Shared fixtures: an app on a fresh in-memory database per test."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from company_erp.config import Settings
from company_erp.main import create_app
from tests.helpers import JWT_SECRET, register

if TYPE_CHECKING:
    from collections.abc import Iterator

    from fastapi import FastAPI


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        ENVIRONMENT="testing",
        DATABASE_URL="sqlite://",
        JWT_SECRET=JWT_SECRET,
        JWT_EXPIRE="1h",
        BCRYPT_ROUNDS=4,
        STRIPE_SECRET_KEY="sk_test_123",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def employee_token(client: TestClient) -> str:
    return register(client, "e1@example.com", name="Employee One")


@pytest.fixture
def admin_token(client: TestClient) -> str:
    return register(client, "admin@example.com", role="admin", name="Admin", department="HR")
