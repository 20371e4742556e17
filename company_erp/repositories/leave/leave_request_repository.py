"""
Leave request repository.

Queries that return employee-enriched records eager load the owner so the
records stay usable after the session is closed.
"""

from typing import List, Optional

from sqlalchemy.orm import joinedload

from company_erp.models.base import LeaveStatus
from company_erp.models.leave import LeaveRequest
from company_erp.repositories.base import BaseRepository


class LeaveRequestRepository(BaseRepository[LeaveRequest]):
    """Data access for leave requests."""

    model = LeaveRequest

    def _with_employee(self):
        return self._select().options(joinedload(LeaveRequest.employee))

    def get_with_employee(self, leave_id: str) -> Optional[LeaveRequest]:
        stmt = self._with_employee().where(LeaveRequest.id == leave_id)
        return self.db.scalars(stmt).first()

    def find_pending(self) -> List[LeaveRequest]:
        """All pending requests across employees, oldest first."""
        stmt = (
            self._with_employee()
            .where(LeaveRequest.status == LeaveStatus.PENDING)
            .order_by(LeaveRequest.created_at)
        )
        return list(self.db.scalars(stmt).all())

    def find_all_with_employee(self) -> List[LeaveRequest]:
        stmt = self._with_employee().order_by(LeaveRequest.created_at)
        return list(self.db.scalars(stmt).all())

    def find_by_employee(self, employee_id: str) -> List[LeaveRequest]:
        return self.find_by(employee_id=employee_id)

    def set_status(self, leave: LeaveRequest, status: LeaveStatus) -> LeaveRequest:
        """Overwrite the status; terminal records are not guarded."""
        return self.update(leave, {"status": status})
