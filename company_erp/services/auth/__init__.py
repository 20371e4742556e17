from company_erp.services.auth.access_control_service import AccessControlService
from company_erp.services.auth.auth_service import AuthService

__all__ = ["AccessControlService", "AuthService"]
