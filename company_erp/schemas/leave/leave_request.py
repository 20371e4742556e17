"""
Leave request schemas.

Requests and responses use the camelCase field names clients send
(``leaveType``, ``startDate``); Python code uses snake_case.
"""

from __future__ import annotations

from datetime import date as Date, datetime
from typing import Any, Optional, Union

from pydantic import ConfigDict, Field, field_validator

from company_erp.models.base import ApplicableLeaveCategory, LeaveCategory, LeaveStatus
from company_erp.models.leave import LeaveRequest
from company_erp.schemas.common.base import CamelSchema

__all__ = [
    "LeaveApplyRequest",
    "EmployeeSummary",
    "LeaveRead",
    "to_leave_read",
]


def _parse_iso_date(value: Any, message: str) -> Date:
    """Accept an ISO 8601 date or date-time and keep the calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, Date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(message)
    text = value.strip()
    try:
        return Date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError as exc:
        raise ValueError(message) from exc


class LeaveApplyRequest(CamelSchema):
    """
    Leave application submitted by an employee.

    Unknown fields (including ``status``) are ignored; a new request is
    always ``Pending``.
    """

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "leaveType": "Annual",
                "startDate": "2023-12-20",
                "endDate": "2023-12-25",
                "reason": "Family vacation",
            }
        },
    )

    leave_type: Optional[ApplicableLeaveCategory] = Field(
        default=None,
        validate_default=True,
        description="Annual, Sick, Personal or Other",
    )
    start_date: Optional[Date] = Field(
        default=None,
        validate_default=True,
        description="First day of leave (ISO 8601)",
    )
    end_date: Optional[Date] = Field(
        default=None,
        validate_default=True,
        description="Last day of leave (ISO 8601)",
    )
    reason: Optional[str] = Field(
        default=None,
        validate_default=True,
        description="Reason for leave",
    )

    @field_validator("leave_type", mode="before")
    @classmethod
    def validate_leave_type(cls, v: Any) -> ApplicableLeaveCategory:
        if isinstance(v, ApplicableLeaveCategory):
            return v
        if not isinstance(v, str) or v not in {c.value for c in ApplicableLeaveCategory}:
            raise ValueError("Invalid leave type")
        return ApplicableLeaveCategory(v)

    @field_validator("start_date", mode="before")
    @classmethod
    def validate_start_date(cls, v: Any) -> Date:
        return _parse_iso_date(v, "Invalid start date")

    @field_validator("end_date", mode="before")
    @classmethod
    def validate_end_date(cls, v: Any) -> Date:
        return _parse_iso_date(v, "Invalid end date")

    @field_validator("reason")
    @classmethod
    def validate_reason(cls, v: Optional[str]) -> str:
        if v is None or not v:
            raise ValueError("Reason is required")
        return v


class EmployeeSummary(CamelSchema):
    """Owner details embedded in employee-enriched leave records."""

    id: str
    name: str
    email: str
    department: str


class LeaveRead(CamelSchema):
    """Leave request as returned by the API."""

    id: str
    employee: Union[EmployeeSummary, str] = Field(
        ...,
        description="Owner id, or owner summary on enriched responses",
    )
    leave_type: LeaveCategory
    start_date: Date
    end_date: Date
    reason: str
    status: LeaveStatus
    created_at: datetime


def to_leave_read(leave: LeaveRequest, *, enrich: bool = False) -> LeaveRead:
    """
    Build the response shape for ``leave``.

    With ``enrich`` the owner must already be loaded on the record.
    """
    if enrich:
        employee: Union[EmployeeSummary, str] = EmployeeSummary.model_validate(leave.employee)
    else:
        employee = leave.employee_id
    return LeaveRead(
        id=leave.id,
        employee=employee,
        leave_type=leave.leave_type,
        start_date=leave.start_date,
        end_date=leave.end_date,
        reason=leave.reason,
        status=leave.status,
        created_at=leave.created_at,
    )
