"""
Login schema.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field, field_validator

from company_erp.schemas.auth.validators import require_email
from company_erp.schemas.common.base import BaseSchema

__all__ = ["LoginRequest"]


class LoginRequest(BaseSchema):
    """Email/password login request."""

    email: Optional[str] = Field(
        default=None,
        validate_default=True,
        description="Login email",
        examples=["jane@example.com"],
    )
    password: Optional[str] = Field(
        default=None,
        validate_default=True,
        description="Password",
    )

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> str:
        return require_email(v)

    @field_validator("password", mode="plain")
    @classmethod
    def validate_password(cls, v: Any) -> str:
        """Passwords are taken verbatim, surrounding spaces included."""
        if not isinstance(v, str):
            raise ValueError("Password is required")
        return v
