# company_erp/dependencies.py
from __future__ import annotations

from typing import Annotated, Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from company_erp.config import Settings
from company_erp.core.security import JWTManager, PasswordHasher
from company_erp.db.session import SessionFactory
from company_erp.models.base import EmployeeRole
from company_erp.services.auth import AccessControlService, AuthService
from company_erp.services.common import Principal
from company_erp.services.leave import LeaveWorkflowService
from company_erp.services.subscription import BillingService


# Missing credentials must be a 401, so the scheme never rejects on its own.
bearer_scheme = HTTPBearer(auto_error=False)


# ------------------------------------------------------------------ #
# Application state
# ------------------------------------------------------------------ #
def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_session_factory(request: Request) -> SessionFactory:
    """
    Provide a session factory for services that expect Callable[[], Session].
    """
    return request.app.state.session_factory


def get_jwt_manager(request: Request) -> JWTManager:
    return request.app.state.jwt_manager


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


# ------------------------------------------------------------------ #
# Service factories
# ------------------------------------------------------------------ #
def get_access_control_service(
    session_factory: SessionFactory = Depends(get_session_factory),
    jwt_manager: JWTManager = Depends(get_jwt_manager),
) -> AccessControlService:
    return AccessControlService(session_factory=session_factory, jwt_manager=jwt_manager)


def get_auth_service(
    session_factory: SessionFactory = Depends(get_session_factory),
    jwt_manager: JWTManager = Depends(get_jwt_manager),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> AuthService:
    return AuthService(
        session_factory=session_factory,
        jwt_manager=jwt_manager,
        password_hasher=password_hasher,
    )


def get_leave_service(
    session_factory: SessionFactory = Depends(get_session_factory),
) -> LeaveWorkflowService:
    return LeaveWorkflowService(session_factory=session_factory)


def get_billing_service(settings: Settings = Depends(get_settings)) -> BillingService:
    return BillingService(api_key=settings.STRIPE_SECRET_KEY)


# ------------------------------------------------------------------ #
# Current employee
# ------------------------------------------------------------------ #
def get_current_employee(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    access_control: AccessControlService = Depends(get_access_control_service),
) -> Principal:
    """
    Resolve the bearer token to the calling employee.

    Raises 401 on a missing, invalid or expired token.
    """
    token = credentials.credentials if credentials else None
    return access_control.authenticate(token)


def require_roles(*roles: EmployeeRole) -> Callable[..., Principal]:
    """
    Dependency factory admitting only employees holding one of ``roles``.

    Example:
        >>> @router.get("/pending")
        ... def pending(admin: Principal = Depends(require_roles(EmployeeRole.ADMIN))): ...
    """

    def dependency(
        principal: Principal = Depends(get_current_employee),
        access_control: AccessControlService = Depends(get_access_control_service),
    ) -> Principal:
        return access_control.authorize(principal, roles)

    return dependency


CurrentEmployee = Annotated[Principal, Depends(get_current_employee)]
AdminEmployee = Annotated[Principal, Depends(require_roles(EmployeeRole.ADMIN))]
