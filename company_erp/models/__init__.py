"""SQLAlchemy models."""

from company_erp.models.employee import Employee
from company_erp.models.leave import LeaveRequest

__all__ = ["Employee", "LeaveRequest"]
