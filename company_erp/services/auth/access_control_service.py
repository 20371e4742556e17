"""
Bearer token authentication and role checks.

Every request is authenticated from scratch: the token is verified and the
employee it names is loaded again, so deleted employees lose access at once.
"""
from __future__ import annotations

from typing import Iterable, Optional

import jwt

from company_erp.core.exceptions import AuthenticationError, InvalidTokenError, TokenExpiredError
from company_erp.core.logging import get_logger
from company_erp.core.security import JWTManager
from company_erp.db.session import SessionFactory
from company_erp.models.base import EmployeeRole
from company_erp.repositories.employee import EmployeeRepository
from company_erp.services.common import Principal, UnitOfWork
from company_erp.services.common.permissions import require_role

logger = get_logger(__name__)


class AccessControlService:
    """Resolves bearer tokens to a ``Principal`` and enforces roles."""

    def __init__(self, session_factory: SessionFactory, jwt_manager: JWTManager) -> None:
        self._session_factory = session_factory
        self._jwt = jwt_manager

    def authenticate(self, token: Optional[str]) -> Principal:
        """
        Verify ``token`` and load the employee it was issued to.

        Raises:
        - AuthenticationError when no token is given or the employee is gone
        - TokenExpiredError / InvalidTokenError for bad tokens
        """
        if not token:
            raise AuthenticationError()

        try:
            payload = self._jwt.verify_token(token)
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpiredError() from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError(reason=str(exc)) from exc

        employee_id = payload.get("user_id")
        if not employee_id:
            raise InvalidTokenError(reason="missing identity claim")

        with UnitOfWork(self._session_factory) as uow:
            employee = uow.get_repo(EmployeeRepository).get(str(employee_id))
            if employee is None:
                logger.info("token_for_unknown_employee", employee_id=employee_id)
                raise AuthenticationError()

            return Principal(
                employee_id=employee.id,
                role=employee.role,
                name=employee.name,
                email=employee.email,
            )

    def authorize(self, principal: Principal, roles: Iterable[EmployeeRole]) -> Principal:
        return require_role(principal, roles)
