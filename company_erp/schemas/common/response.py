"""
Standard API response envelopes.

Successful responses always carry ``success: true``; list responses add the
number of items as ``count``.
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import Field

from company_erp.schemas.common.base import BaseSchema

T = TypeVar("T")

__all__ = [
    "DataResponse",
    "ListResponse",
    "TokenResponse",
    "ErrorDetail",
    "ErrorResponse",
]


class DataResponse(BaseSchema, Generic[T]):
    """Single-object success response."""

    success: bool = Field(default=True, description="Success flag")
    data: T = Field(..., description="Response data")


class ListResponse(BaseSchema, Generic[T]):
    """Collection success response."""

    success: bool = Field(default=True, description="Success flag")
    count: int = Field(..., ge=0, description="Number of items in data")
    data: List[T] = Field(default_factory=list, description="Response items")

    @classmethod
    def of(cls, items: List[Any]) -> "ListResponse":
        return cls(success=True, count=len(items), data=items)


class TokenResponse(BaseSchema):
    """Bearer token issued by register and login."""

    success: bool = Field(default=True, description="Success flag")
    token: str = Field(..., description="Signed bearer token")


class ErrorDetail(BaseSchema):
    """Field-level validation message."""

    field: str = Field(..., description="Field name causing error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseSchema):
    """Error envelope produced by the exception handlers."""

    success: bool = Field(default=False, description="Success flag")
    error: str = Field(..., description="Error message")
    errors: Optional[List[ErrorDetail]] = Field(default=None, description="Field errors")


def error_responses(*status_codes: int) -> Dict[int, Dict[str, Any]]:
    """OpenAPI ``responses`` entries documenting the error envelope."""
    return {code: {"model": ErrorResponse} for code in status_codes}
