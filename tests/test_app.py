"""Application assembly: health, docs, middleware and the error envelope."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from company_erp.models.employee import Employee
from company_erp.repositories.employee import EmployeeRepository
from company_erp.services.common import UnitOfWork


def test_health(client: TestClient) -> None:
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "data": {"status": "healthy", "version": "1.0.0"}}


def test_docs_are_served(client: TestClient) -> None:
    assert client.get("/api-docs").status_code == 200
    schema = client.get("/api/openapi.json").json()
    assert "/api/leaves/apply" in schema["paths"]
    assert "HTTPBearer" in schema["components"]["securitySchemes"]


def test_request_id_is_echoed(client: TestClient) -> None:
    resp = client.get("/api/health", headers={"X-Request-ID": "req-123"})
    assert resp.headers["X-Request-ID"] == "req-123"
    assert "X-Process-Time" in resp.headers


def test_request_id_is_generated(client: TestClient) -> None:
    assert client.get("/api/health").headers["X-Request-ID"]


def test_unknown_route_uses_envelope(client: TestClient) -> None:
    resp = client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Not Found"}


def test_wrong_method_uses_envelope(client: TestClient) -> None:
    resp = client.get("/api/auth/login")
    assert resp.status_code == 405
    assert resp.json()["success"] is False


def test_malformed_json_is_a_validation_error(client: TestClient) -> None:
    resp = client.post(
        "/api/auth/login",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["success"] is False


class TestUnitOfWork:
    def _employee(self, email: str) -> dict:
        return {
            "name": "Unit",
            "email": email,
            "password_hash": "x",
            "department": "QA",
        }

    def test_commits_on_success(self, client: TestClient) -> None:
        factory = client.app.state.session_factory
        with UnitOfWork(factory) as uow:
            uow.get_repo(EmployeeRepository).create(self._employee("ok@example.com"))

        assert uow.is_committed
        assert not uow.is_active

        with UnitOfWork(factory) as uow:
            assert uow.get_repo(EmployeeRepository).get_by_email("ok@example.com") is not None

    def test_rolls_back_on_error(self, client: TestClient) -> None:
        factory = client.app.state.session_factory
        with pytest.raises(RuntimeError):
            with UnitOfWork(factory) as uow:
                uow.get_repo(EmployeeRepository).create(self._employee("gone@example.com"))
                raise RuntimeError("boom")

        assert uow.is_rolled_back

        with factory() as session:
            assert session.query(Employee).filter_by(email="gone@example.com").first() is None

    def test_repositories_are_cached(self, client: TestClient) -> None:
        with UnitOfWork(client.app.state.session_factory) as uow:
            assert uow.get_repo(EmployeeRepository) is uow.get_repo(EmployeeRepository)

    def test_get_repo_outside_context(self, client: TestClient) -> None:
        with pytest.raises(RuntimeError):
            UnitOfWork(client.app.state.session_factory).get_repo(EmployeeRepository)

    def test_explicit_rollback_skips_commit(self, client: TestClient) -> None:
        factory = client.app.state.session_factory
        with UnitOfWork(factory) as uow:
            uow.get_repo(EmployeeRepository).create(self._employee("undone@example.com"))
            uow.rollback()

        assert not uow.is_committed
        with UnitOfWork(factory) as uow:
            assert uow.get_repo(EmployeeRepository).get_by_email("undone@example.com") is None
