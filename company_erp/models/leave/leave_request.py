"""
Leave request database model.

A leave request belongs to exactly one employee and moves from ``Pending``
to ``Approved`` or ``Rejected`` by admin action.
"""

from datetime import date as Date
from typing import TYPE_CHECKING

from sqlalchemy import Date as SQLDate, Enum, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from company_erp.models.base import BaseModel, LeaveCategory, LeaveStatus, enum_values

if TYPE_CHECKING:
    from company_erp.models.employee.employee import Employee

__all__ = ["LeaveRequest"]


class LeaveRequest(BaseModel):
    """
    Single time-off application.

    No ordering constraint is placed between ``start_date`` and ``end_date``.
    """

    __tablename__ = "leave_requests"
    __table_args__ = (
        Index("ix_leave_request_employee_id", "employee_id"),
        Index("ix_leave_request_status", "status"),
    )

    employee_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
        comment="Employee who applied"
    )
    leave_type: Mapped[LeaveCategory] = mapped_column(
        Enum(
            LeaveCategory,
            name="leave_category_enum",
            native_enum=False,
            values_callable=enum_values,
        ),
        nullable=False,
        comment="Type of leave"
    )
    start_date: Mapped[Date] = mapped_column(
        SQLDate,
        nullable=False,
        comment="Leave start date"
    )
    end_date: Mapped[Date] = mapped_column(
        SQLDate,
        nullable=False,
        comment="Leave end date"
    )
    reason: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Reason for leave"
    )
    status: Mapped[LeaveStatus] = mapped_column(
        Enum(
            LeaveStatus,
            name="leave_status_enum",
            native_enum=False,
            values_callable=enum_values,
        ),
        nullable=False,
        default=LeaveStatus.PENDING,
        comment="Pending, Approved or Rejected"
    )

    employee: Mapped["Employee"] = relationship(
        "Employee",
        back_populates="leave_requests",
    )
