from company_erp.services.leave.leave_workflow_service import LeaveWorkflowService

__all__ = ["LeaveWorkflowService"]
