"""
Employee database model.

Employees are the credential holders of the system: they log in, apply for
leave and, when their role is ``admin``, decide on other employees' leave.
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from company_erp.models.base import BaseModel, EmployeeRole, enum_values

if TYPE_CHECKING:
    from company_erp.models.leave.leave_request import LeaveRequest

__all__ = ["Employee"]


class Employee(BaseModel):
    """Registered employee with a hashed credential and a role."""

    __tablename__ = "employees"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name"
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Login email, unique"
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="bcrypt hash of the password"
    )
    role: Mapped[EmployeeRole] = mapped_column(
        Enum(
            EmployeeRole,
            name="employee_role_enum",
            native_enum=False,
            values_callable=enum_values,
        ),
        nullable=False,
        default=EmployeeRole.EMPLOYEE,
        comment="Access tier"
    )
    department: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Department, free text"
    )

    leave_requests: Mapped[List["LeaveRequest"]] = relationship(
        "LeaveRequest",
        back_populates="employee",
    )
