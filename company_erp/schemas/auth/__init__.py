from company_erp.schemas.auth.login import LoginRequest
from company_erp.schemas.auth.register import RegisterRequest

__all__ = ["LoginRequest", "RegisterRequest"]
