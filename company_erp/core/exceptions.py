"""
Custom Exceptions for the Company ERP API

This module defines the exception taxonomy raised by services and mapped to
HTTP responses by the handlers in ``company_erp.core.error_handlers``.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"

    # Authentication & Authorization
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    AUTHORIZATION_FAILED = "AUTHORIZATION_FAILED"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    TOKEN_INVALID = "TOKEN_INVALID"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"

    # External service errors
    PAYMENT_GATEWAY_ERROR = "PAYMENT_GATEWAY_ERROR"

    # Configuration errors
    MISSING_CONFIGURATION = "MISSING_CONFIGURATION"


class BaseAppException(Exception):
    """
    Base exception class for all application exceptions.

    Carries the HTTP status the error maps to, so handlers never need to
    know about individual subclasses.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to the response envelope"""
        return {"success": False, "error": self.message}

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


# ========================================
# General Application Exceptions
# ========================================

class ValidationError(BaseAppException):
    """Exception raised when request data validation fails"""

    def __init__(
        self,
        message: str = "Validation failed",
        field_errors: Optional[List[Dict[str, str]]] = None,
    ):
        details = {"field_errors": field_errors} if field_errors else {}
        super().__init__(message, ErrorCode.VALIDATION_ERROR, details, 400)

    def to_dict(self) -> Dict[str, Any]:
        body = super().to_dict()
        if self.details.get("field_errors"):
            body["errors"] = self.details["field_errors"]
        return body


class ResourceNotFoundError(BaseAppException):
    """Exception raised when a requested resource is not found"""

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None
    ):
        if not message:
            message = f"{resource_type} not found"
        details = {
            "resource_type": resource_type,
            "resource_id": resource_id
        }
        super().__init__(message, ErrorCode.RESOURCE_NOT_FOUND, details, 404)


class ConflictError(BaseAppException):
    """Exception raised when a unique value is already taken"""

    def __init__(
        self,
        message: str = "Duplicate entry",
        field: Optional[str] = None,
    ):
        details = {"field": field} if field else {}
        # Duplicates are reported as bad input, not 409.
        super().__init__(message, ErrorCode.DUPLICATE_ENTRY, details, 400)


class InternalError(BaseAppException):
    """Exception raised for unexpected failures; never exposes detail"""

    def __init__(self, message: str = "Server Error", **details: Any):
        super().__init__(message, ErrorCode.INTERNAL_ERROR, details, 500)

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "error": "Server Error"}


class MissingConfigurationError(InternalError):
    """Exception raised when a required setting is absent"""

    def __init__(self, setting: str):
        super().__init__(f"Missing configuration: {setting}", setting=setting)
        self.error_code = ErrorCode.MISSING_CONFIGURATION


# ========================================
# Authentication & Authorization Exceptions
# ========================================

class AuthenticationError(BaseAppException):
    """Exception raised when authentication fails"""

    def __init__(
        self,
        message: str = "Not authorized to access this route",
        error_code: ErrorCode = ErrorCode.AUTHENTICATION_FAILED,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details, 401)


class AuthorizationError(BaseAppException):
    """Exception raised when the caller's role is not permitted"""

    def __init__(
        self,
        message: str = "Access denied",
        required_roles: Optional[List[str]] = None,
    ):
        details = {"required_roles": required_roles} if required_roles else {}
        super().__init__(message, ErrorCode.AUTHORIZATION_FAILED, details, 403)


class InvalidTokenError(AuthenticationError):
    """Exception raised when a token is malformed or has a bad signature"""

    def __init__(
        self,
        message: str = "Not authorized to access this route",
        reason: Optional[str] = None
    ):
        details = {"reason": reason} if reason else {}
        super().__init__(message, ErrorCode.TOKEN_INVALID, details)


class TokenExpiredError(AuthenticationError):
    """Exception raised when a token has expired"""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message, ErrorCode.TOKEN_EXPIRED)


# ========================================
# External Service Exceptions
# ========================================

class UpstreamError(BaseAppException):
    """Exception raised when the payment provider rejects a call"""

    def __init__(
        self,
        message: str = "Payment gateway error",
        gateway_name: Optional[str] = "stripe",
        gateway_error_code: Optional[str] = None,
    ):
        details = {
            "gateway_name": gateway_name,
            "gateway_error_code": gateway_error_code
        }
        super().__init__(message, ErrorCode.PAYMENT_GATEWAY_ERROR, details, 400)


# ========================================
# Utility Functions
# ========================================

def create_validation_error(field_errors: List[Dict[str, str]]) -> ValidationError:
    """Create a validation error with field-specific errors"""
    if len(field_errors) == 1:
        message = field_errors[0]["message"]
    else:
        message = f"Validation failed with {len(field_errors)} error(s)"
    return ValidationError(message, field_errors)


__all__ = [
    'ErrorCode',
    'BaseAppException',
    'ValidationError',
    'ResourceNotFoundError',
    'ConflictError',
    'InternalError',
    'MissingConfigurationError',
    'AuthenticationError',
    'AuthorizationError',
    'InvalidTokenError',
    'TokenExpiredError',
    'UpstreamError',
    'create_validation_error',
]
