"""Request helpers shared by the API tests."""

from __future__ import annotations

from typing import Any

from fastapi.testclient import TestClient

JWT_SECRET = "test-secret-key-that-is-at-least-32-chars"
PASSWORD = "secret123"


def register(
    client: TestClient,
    email: str,
    *,
    role: str = "employee",
    name: str = "Test Employee",
    department: str = "Engineering",
) -> str:
    """Register an employee and return its bearer token."""
    resp = client.post(
        "/api/auth/register",
        json={
            "name": name,
            "email": email,
            "password": PASSWORD,
            "role": role,
            "department": department,
        },
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["token"]


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def employee_id_of(client: TestClient, token: str) -> str:
    return client.app.state.jwt_manager.verify_token(token)["user_id"]


def leave_body(**overrides: Any) -> dict[str, Any]:
    body = {
        "leaveType": "Annual",
        "startDate": "2023-12-20",
        "endDate": "2023-12-25",
        "reason": "Family vacation",
    }
    body.update(overrides)
    return body
