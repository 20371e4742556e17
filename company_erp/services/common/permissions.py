"""
Role-based authorization utilities.

Access is decided on the caller's single role; there are no fine-grained
permissions.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from company_erp.core.exceptions import AuthorizationError
from company_erp.models.base import EmployeeRole


@dataclass(frozen=True)
class Principal:
    """
    Authenticated employee as seen by the service layer.

    Attributes:
        employee_id: Identifier of the employee the token belongs to
        role: Employee's role at the time of the request
        name: Display name
        email: Login email
    """
    employee_id: str
    role: EmployeeRole
    name: str = ""
    email: str = ""

    @property
    def is_admin(self) -> bool:
        return self.role == EmployeeRole.ADMIN

    def has_any_role(self, roles: Iterable[EmployeeRole]) -> bool:
        return self.role in set(roles)


def role_in(principal: Principal, allowed_roles: Iterable[EmployeeRole]) -> bool:
    return principal.has_any_role(allowed_roles)


def require_role(principal: Principal, allowed_roles: Iterable[EmployeeRole]) -> Principal:
    """
    Assert that principal has one of the allowed roles.

    Raises:
        AuthorizationError: If principal's role is not allowed

    Example:
        >>> require_role(principal, [EmployeeRole.ADMIN])
    """
    allowed = list(allowed_roles)
    if not role_in(principal, allowed):
        raise AuthorizationError(
            f"User role {principal.role.value} is not authorized to access this route",
            required_roles=[r.value for r in allowed],
        )
    return principal
