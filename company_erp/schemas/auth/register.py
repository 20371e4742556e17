"""
Registration schema.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field, field_validator

from company_erp.models.base import EmployeeRole
from company_erp.schemas.auth.validators import require_email, require_text
from company_erp.schemas.common.base import BaseSchema

__all__ = ["RegisterRequest"]


class RegisterRequest(BaseSchema):
    """
    Employee registration request.

    Missing fields are reported with the same message as empty ones, so
    every field defaults to ``None`` and is checked by its validator.
    """

    name: Optional[str] = Field(
        default=None,
        validate_default=True,
        description="Display name",
        examples=["Jane Doe"],
    )
    email: Optional[str] = Field(
        default=None,
        validate_default=True,
        description="Login email (must be unique)",
        examples=["jane@example.com"],
    )
    password: Optional[str] = Field(
        default=None,
        validate_default=True,
        description="Password, at least 6 characters",
    )
    role: EmployeeRole = Field(
        default=EmployeeRole.EMPLOYEE,
        description="employee or admin",
    )
    department: Optional[str] = Field(
        default=None,
        validate_default=True,
        description="Department",
        examples=["Engineering"],
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> str:
        return require_text(v, "Name is required")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> str:
        return require_email(v)

    # Plain mode skips the model-wide whitespace stripping.
    @field_validator("password", mode="plain")
    @classmethod
    def validate_password(cls, v: Any) -> str:
        if not isinstance(v, str) or len(v) < 6:
            raise ValueError("Password must be at least 6 characters")
        return v

    @field_validator("department")
    @classmethod
    def validate_department(cls, v: Optional[str]) -> str:
        return require_text(v, "Department is required")

    @field_validator("role", mode="before")
    @classmethod
    def validate_role(cls, v):
        if v is None:
            return EmployeeRole.EMPLOYEE
        if isinstance(v, EmployeeRole):
            return v
        if not isinstance(v, str) or v not in {role.value for role in EmployeeRole}:
            raise ValueError("Role must be either employee or admin")
        return v
