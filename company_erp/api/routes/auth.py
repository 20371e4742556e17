"""
Authentication endpoints: register, login, logout.
"""

from fastapi import APIRouter, Depends, status

from company_erp.dependencies import CurrentEmployee, get_auth_service
from company_erp.schemas.auth import LoginRequest, RegisterRequest
from company_erp.schemas.common import DataResponse, TokenResponse, error_responses
from company_erp.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new employee",
    responses=error_responses(400),
)
def register(
    payload: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    return auth_service.register(payload)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login employee",
    responses=error_responses(400, 401),
)
def login(
    payload: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    return auth_service.login(payload)


@router.post(
    "/logout",
    response_model=DataResponse[dict],
    summary="Logout employee",
    responses=error_responses(401),
)
def logout(
    current: CurrentEmployee,
    auth_service: AuthService = Depends(get_auth_service),
) -> DataResponse[dict]:
    return DataResponse[dict](success=True, data=auth_service.logout(current.employee_id))
