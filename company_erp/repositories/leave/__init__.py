from company_erp.repositories.leave.leave_request_repository import LeaveRequestRepository

__all__ = ["LeaveRequestRepository"]
