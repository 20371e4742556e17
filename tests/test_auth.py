"""Registration, login and logout."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from company_erp.models.base import EmployeeRole
from company_erp.models.employee import Employee
from company_erp.repositories.employee import EmployeeRepository
from tests.helpers import PASSWORD, auth_headers, employee_id_of, register

REGISTER_URL = "/api/auth/register"
LOGIN_URL = "/api/auth/login"
LOGOUT_URL = "/api/auth/logout"


def _register_body(**overrides):
    body = {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "password": PASSWORD,
        "department": "Engineering",
    }
    body.update(overrides)
    return body


class TestRegister:
    def test_register_returns_token(self, client: TestClient) -> None:
        resp = client.post(REGISTER_URL, json=_register_body())
        assert resp.status_code == 201
        body = resp.json()
        assert body["success"] is True
        assert isinstance(body["token"], str) and body["token"]

    def test_register_defaults_role_to_employee(self, client: TestClient) -> None:
        token = register(client, "plain@example.com")
        employee_id = employee_id_of(client, token)

        with client.app.state.session_factory() as session:
            employee = session.get(Employee, employee_id)
            assert employee.role == EmployeeRole.EMPLOYEE

    def test_password_is_stored_hashed(self, client: TestClient) -> None:
        token = register(client, "hashed@example.com")
        employee_id = employee_id_of(client, token)

        with client.app.state.session_factory() as session:
            employee = session.get(Employee, employee_id)
            assert employee.password_hash != PASSWORD
            assert client.app.state.password_hasher.verify(PASSWORD, employee.password_hash)

    def test_duplicate_email_is_rejected(self, client: TestClient) -> None:
        first = client.post(REGISTER_URL, json=_register_body())
        assert first.status_code == 201

        second = client.post(REGISTER_URL, json=_register_body(name="Someone Else"))
        assert second.status_code == 400
        assert second.json() == {"success": False, "error": "Employee already exists"}

    def test_duplicate_rejected_at_insert(self, client: TestClient, monkeypatch) -> None:
        assert client.post(REGISTER_URL, json=_register_body()).status_code == 201
        # A concurrent registration can pass the lookup before the first row commits.
        monkeypatch.setattr(EmployeeRepository, "email_exists", lambda self, email: False)

        resp = client.post(REGISTER_URL, json=_register_body(name="Someone Else"))

        assert resp.status_code == 400
        assert resp.json() == {"success": False, "error": "Employee already exists"}

    def test_trailing_space_counts_toward_password_length(self, client: TestClient) -> None:
        resp = client.post(REGISTER_URL, json=_register_body(password="abcde "))
        assert resp.status_code == 201

        employee_id = employee_id_of(client, resp.json()["token"])
        with client.app.state.session_factory() as session:
            employee = session.get(Employee, employee_id)
            assert client.app.state.password_hasher.verify("abcde ", employee.password_hash)
            assert not client.app.state.password_hasher.verify("abcde", employee.password_hash)

    @pytest.mark.parametrize(
        ("overrides", "field", "message"),
        [
            ({"name": ""}, "name", "Name is required"),
            ({"email": "not-an-email"}, "email", "Please include a valid email"),
            ({"password": "12345"}, "password", "Password must be at least 6 characters"),
            ({"department": "   "}, "department", "Department is required"),
            ({"role": "superuser"}, "role", "Role must be either employee or admin"),
        ],
    )
    def test_invalid_field_is_rejected(self, client: TestClient, overrides, field, message) -> None:
        resp = client.post(REGISTER_URL, json=_register_body(**overrides))
        assert resp.status_code == 400
        body = resp.json()
        assert body["success"] is False
        assert body["error"] == message
        assert body["errors"] == [{"field": field, "message": message}]

    def test_missing_fields_are_all_reported(self, client: TestClient) -> None:
        resp = client.post(REGISTER_URL, json={})
        assert resp.status_code == 400
        fields = {error["field"] for error in resp.json()["errors"]}
        assert fields == {"name", "email", "password", "department"}


class TestLogin:
    def test_login_with_correct_password(self, client: TestClient) -> None:
        register(client, "login@example.com")

        resp = client.post(LOGIN_URL, json={"email": "login@example.com", "password": PASSWORD})
        assert resp.status_code == 200
        token = resp.json()["token"]
        # The issued token is accepted by protected routes.
        assert client.post(LOGOUT_URL, headers=auth_headers(token)).status_code == 200

    def test_wrong_password_is_unauthorized(self, client: TestClient) -> None:
        register(client, "login@example.com")

        resp = client.post(LOGIN_URL, json={"email": "login@example.com", "password": "wrong-pass"})
        assert resp.status_code == 401
        assert resp.json() == {"success": False, "error": "Invalid credentials"}

    def test_unknown_email_is_unauthorized(self, client: TestClient) -> None:
        resp = client.post(LOGIN_URL, json={"email": "nobody@example.com", "password": PASSWORD})
        assert resp.status_code == 401
        assert resp.json()["error"] == "Invalid credentials"

    def test_password_spaces_are_significant(self, client: TestClient) -> None:
        resp = client.post(REGISTER_URL, json=_register_body(email="spaced@example.com", password=" secret99 "))
        assert resp.status_code == 201

        trimmed = client.post(LOGIN_URL, json={"email": "spaced@example.com", "password": "secret99"})
        assert trimmed.status_code == 401

        exact = client.post(LOGIN_URL, json={"email": "spaced@example.com", "password": " secret99 "})
        assert exact.status_code == 200

    def test_missing_password_is_a_validation_error(self, client: TestClient) -> None:
        resp = client.post(LOGIN_URL, json={"email": "login@example.com"})
        assert resp.status_code == 400
        assert resp.json()["errors"] == [{"field": "password", "message": "Password is required"}]


class TestLogout:
    def test_logout_acknowledges(self, client: TestClient, employee_token: str) -> None:
        resp = client.post(LOGOUT_URL, headers=auth_headers(employee_token))
        assert resp.status_code == 200
        assert resp.json() == {"success": True, "data": {}}

    def test_logout_requires_token(self, client: TestClient) -> None:
        resp = client.post(LOGOUT_URL)
        assert resp.status_code == 401
        assert resp.json()["success"] is False
