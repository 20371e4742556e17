from company_erp.schemas.leave.leave_request import (
    EmployeeSummary,
    LeaveApplyRequest,
    LeaveRead,
    to_leave_read,
)

__all__ = ["EmployeeSummary", "LeaveApplyRequest", "LeaveRead", "to_leave_read"]
