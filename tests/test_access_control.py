"""Bearer token authentication and role gating."""

from __future__ import annotations

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from company_erp.core.exceptions import AuthenticationError, AuthorizationError, InvalidTokenError, TokenExpiredError
from company_erp.core.security import JWTManager
from company_erp.models.base import EmployeeRole
from company_erp.models.employee import Employee
from company_erp.services.auth import AccessControlService
from company_erp.services.common import Principal
from tests.helpers import auth_headers, employee_id_of, register

PENDING_URL = "/api/leaves/pending"
HISTORY_URL = "/api/leaves/history"


@pytest.fixture
def access_control(client: TestClient) -> AccessControlService:
    state = client.app.state
    return AccessControlService(state.session_factory, state.jwt_manager)


class TestAuthenticate:
    def test_valid_token_resolves_employee(self, client, access_control, employee_token) -> None:
        principal = access_control.authenticate(employee_token)
        assert principal.employee_id == employee_id_of(client, employee_token)
        assert principal.role == EmployeeRole.EMPLOYEE
        assert principal.email == "e1@example.com"

    def test_missing_token(self, access_control) -> None:
        with pytest.raises(AuthenticationError):
            access_control.authenticate(None)

    def test_expired_token(self, client, access_control, employee_token) -> None:
        employee_id = employee_id_of(client, employee_token)
        expired = client.app.state.jwt_manager.create_access_token(
            employee_id, expires_delta=timedelta(seconds=-10)
        )
        with pytest.raises(TokenExpiredError):
            access_control.authenticate(expired)

    def test_token_signed_with_other_secret(self, client, access_control, employee_token) -> None:
        other = JWTManager("another-secret-key-that-is-32-chars-long!")
        forged = other.create_access_token(employee_id_of(client, employee_token))
        with pytest.raises(InvalidTokenError):
            access_control.authenticate(forged)

    def test_token_without_identity_claim(self, client, access_control) -> None:
        token = client.app.state.jwt_manager.create_access_token("", additional_claims={"user_id": None})
        with pytest.raises(InvalidTokenError):
            access_control.authenticate(token)

    def test_token_for_deleted_employee(self, client, access_control, employee_token) -> None:
        employee_id = employee_id_of(client, employee_token)
        with client.app.state.session_factory() as session:
            session.delete(session.get(Employee, employee_id))
            session.commit()

        with pytest.raises(AuthenticationError):
            access_control.authenticate(employee_token)

    def test_authorize_rejects_other_roles(self, access_control) -> None:
        principal = Principal(employee_id="e1", role=EmployeeRole.EMPLOYEE)
        with pytest.raises(AuthorizationError):
            access_control.authorize(principal, [EmployeeRole.ADMIN])

    def test_authorize_returns_principal(self, access_control) -> None:
        principal = Principal(employee_id="a1", role=EmployeeRole.ADMIN)
        assert access_control.authorize(principal, [EmployeeRole.ADMIN]) is principal


class TestHttpGate:
    def test_missing_bearer_is_401(self, client: TestClient) -> None:
        resp = client.get(HISTORY_URL)
        assert resp.status_code == 401
        assert resp.json() == {"success": False, "error": "Not authorized to access this route"}

    def test_malformed_token_is_401(self, client: TestClient) -> None:
        resp = client.get(HISTORY_URL, headers=auth_headers("not-a-jwt"))
        assert resp.status_code == 401

    def test_non_bearer_scheme_is_401(self, client: TestClient, employee_token: str) -> None:
        resp = client.get(HISTORY_URL, headers={"Authorization": f"Basic {employee_token}"})
        assert resp.status_code == 401

    def test_employee_on_admin_route_is_403(self, client: TestClient, employee_token: str) -> None:
        resp = client.get(PENDING_URL, headers=auth_headers(employee_token))
        assert resp.status_code == 403
        assert resp.json() == {
            "success": False,
            "error": "User role employee is not authorized to access this route",
        }

    def test_admin_on_admin_route(self, client: TestClient, admin_token: str) -> None:
        resp = client.get(PENDING_URL, headers=auth_headers(admin_token))
        assert resp.status_code == 200

    def test_deleted_employee_token_is_401(self, client: TestClient) -> None:
        token = register(client, "gone@example.com")
        with client.app.state.session_factory() as session:
            session.delete(session.get(Employee, employee_id_of(client, token)))
            session.commit()

        resp = client.get(HISTORY_URL, headers=auth_headers(token))
        assert resp.status_code == 401
