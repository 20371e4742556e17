"""
Leave request workflow.

Requests start ``Pending`` and are moved to ``Approved`` or ``Rejected`` by
an admin. Admins see every request with owner details; employees only see
their own, with the owner given as an id.
"""
from __future__ import annotations

from typing import List

from company_erp.core.exceptions import ResourceNotFoundError
from company_erp.core.logging import get_logger
from company_erp.db.session import SessionFactory
from company_erp.models.base import LeaveCategory, LeaveStatus
from company_erp.repositories.leave import LeaveRequestRepository
from company_erp.schemas.leave import LeaveApplyRequest, LeaveRead, to_leave_read
from company_erp.services.common import Principal, UnitOfWork

logger = get_logger(__name__)


class LeaveWorkflowService:
    """
    Leave request use-cases.

    Role checks happen before these methods are called; the methods that
    are admin-only say so.
    """

    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    # ------------------------------------------------------------------ #
    # Employee operations
    # ------------------------------------------------------------------ #
    def apply(self, principal: Principal, data: LeaveApplyRequest) -> LeaveRead:
        """Create a ``Pending`` request owned by the caller."""
        with UnitOfWork(self._session_factory) as uow:
            leave = uow.get_repo(LeaveRequestRepository).create(
                {
                    "employee_id": principal.employee_id,
                    "leave_type": LeaveCategory(data.leave_type.value),
                    "start_date": data.start_date,
                    "end_date": data.end_date,
                    "reason": data.reason,
                    "status": LeaveStatus.PENDING,
                }
            )
            result = to_leave_read(leave)

        logger.info(
            "leave_applied",
            leave_id=result.id,
            employee_id=principal.employee_id,
            leave_type=result.leave_type.value,
        )
        return result

    def history(self, principal: Principal) -> List[LeaveRead]:
        """Every request for admins, otherwise only the caller's own."""
        with UnitOfWork(self._session_factory) as uow:
            repo = uow.get_repo(LeaveRequestRepository)
            if principal.is_admin:
                return [to_leave_read(leave, enrich=True) for leave in repo.find_all_with_employee()]
            return [to_leave_read(leave) for leave in repo.find_by_employee(principal.employee_id)]

    # ------------------------------------------------------------------ #
    # Admin operations
    # ------------------------------------------------------------------ #
    def list_pending(self) -> List[LeaveRead]:
        """Pending requests of all employees. Admin only."""
        with UnitOfWork(self._session_factory) as uow:
            pending = uow.get_repo(LeaveRequestRepository).find_pending()
            return [to_leave_read(leave, enrich=True) for leave in pending]

    def approve(self, leave_id: str) -> LeaveRead:
        """Admin only."""
        return self._decide(leave_id, LeaveStatus.APPROVED)

    def reject(self, leave_id: str) -> LeaveRead:
        """Admin only."""
        return self._decide(leave_id, LeaveStatus.REJECTED)

    def _decide(self, leave_id: str, status: LeaveStatus) -> LeaveRead:
        # Already decided requests can be decided again; the last call wins.
        with UnitOfWork(self._session_factory) as uow:
            repo = uow.get_repo(LeaveRequestRepository)
            leave = repo.get_with_employee(leave_id)
            if leave is None:
                raise ResourceNotFoundError(
                    "LeaveRequest",
                    leave_id,
                    message="Leave request not found",
                )
            previous = leave.status
            repo.set_status(leave, status)
            result = to_leave_read(leave, enrich=True)

        logger.info(
            "leave_status_changed",
            leave_id=leave_id,
            previous_status=previous.value,
            status=status.value,
        )
        return result
