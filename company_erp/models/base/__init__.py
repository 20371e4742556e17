from company_erp.models.base.base_model import BaseModel, utcnow
from company_erp.models.base.enums import (
    ApplicableLeaveCategory,
    EmployeeRole,
    LeaveCategory,
    LeaveStatus,
    enum_values,
)

__all__ = [
    "BaseModel",
    "utcnow",
    "ApplicableLeaveCategory",
    "EmployeeRole",
    "LeaveCategory",
    "LeaveStatus",
    "enum_values",
]
