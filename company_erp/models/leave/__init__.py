from company_erp.models.leave.leave_request import LeaveRequest

__all__ = ["LeaveRequest"]
