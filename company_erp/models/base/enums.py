"""
Enumerations shared by models and schemas.
"""

from enum import Enum


class EmployeeRole(str, Enum):
    """Coarse access tier of an employee."""

    EMPLOYEE = "employee"
    ADMIN = "admin"


class LeaveCategory(str, Enum):
    """Leave categories a stored leave request may carry."""

    ANNUAL = "Annual"
    SICK = "Sick"
    MEDICAL = "Medical"
    PERSONAL = "Personal"
    OTHER = "Other"


class ApplicableLeaveCategory(str, Enum):
    """
    Leave categories accepted when applying.

    Narrower than ``LeaveCategory``: ``Medical`` can be stored but not
    applied for. The two sets are kept as they are on purpose.
    """

    ANNUAL = "Annual"
    SICK = "Sick"
    PERSONAL = "Personal"
    OTHER = "Other"


class LeaveStatus(str, Enum):
    """Leave request status."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


def enum_values(enum_cls) -> list:
    """Persist enums by value (``"Pending"``) rather than member name."""
    return [member.value for member in enum_cls]
