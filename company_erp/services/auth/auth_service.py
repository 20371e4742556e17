from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from company_erp.core.exceptions import AuthenticationError, ConflictError
from company_erp.core.logging import get_logger
from company_erp.core.security import JWTManager, PasswordHasher
from company_erp.db.session import SessionFactory
from company_erp.repositories.employee import EmployeeRepository
from company_erp.schemas.auth import LoginRequest, RegisterRequest
from company_erp.schemas.common import TokenResponse
from company_erp.services.common import UnitOfWork

logger = get_logger(__name__)


class AuthService:
    """
    Employee registration and login.

    - Registration hashes the password before the row is written
    - Login compares against the stored bcrypt hash
    - Both return a freshly signed bearer token
    """

    def __init__(
        self,
        session_factory: SessionFactory,
        jwt_manager: JWTManager,
        password_hasher: PasswordHasher,
    ) -> None:
        self._session_factory = session_factory
        self._jwt = jwt_manager
        self._hasher = password_hasher

    def _issue_token(self, employee_id: str) -> TokenResponse:
        return TokenResponse(success=True, token=self._jwt.create_access_token(employee_id))

    # ------------------------------------------------------------------ #
    # Registration
    # ------------------------------------------------------------------ #
    def register(self, data: RegisterRequest) -> TokenResponse:
        """
        Register a new employee.

        Raises:
        - ConflictError if the email is already registered
        """
        with UnitOfWork(self._session_factory) as uow:
            repo = uow.get_repo(EmployeeRepository)

            if repo.email_exists(data.email):
                logger.info("registration_rejected", reason="duplicate_email")
                raise ConflictError("Employee already exists", field="email")

            try:
                employee = repo.create(
                    {
                        "name": data.name,
                        "email": data.email,
                        "password_hash": self._hasher.hash(data.password),
                        "role": data.role,
                        "department": data.department,
                    }
                )
            except IntegrityError as exc:
                # Lost a race with a concurrent registration for the same email.
                logger.info("registration_rejected", reason="duplicate_email_on_insert")
                raise ConflictError("Employee already exists", field="email") from exc
            employee_id = employee.id

        logger.info("employee_registered", employee_id=employee_id, role=data.role.value)
        return self._issue_token(employee_id)

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #
    def login(self, data: LoginRequest) -> TokenResponse:
        """
        Email/password login.

        Unknown email and wrong password fail identically.
        """
        with UnitOfWork(self._session_factory) as uow:
            employee = uow.get_repo(EmployeeRepository).get_by_email(data.email)

            if employee is None or not self._hasher.verify(data.password, employee.password_hash):
                logger.info("login_failed")
                raise AuthenticationError("Invalid credentials")

            employee_id = employee.id

        logger.info("login_succeeded", employee_id=employee_id)
        return self._issue_token(employee_id)

    def logout(self, employee_id: str) -> dict:
        """Tokens are stateless; the client discards its copy."""
        logger.info("logout", employee_id=employee_id)
        return {}
