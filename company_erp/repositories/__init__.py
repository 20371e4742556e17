"""
Repository layer.

Each repository wraps one SQLAlchemy session and is obtained through
``UnitOfWork.get_repo``.
"""

from company_erp.repositories.base import BaseRepository
from company_erp.repositories.employee import EmployeeRepository
from company_erp.repositories.leave import LeaveRequestRepository

__all__ = ["BaseRepository", "EmployeeRepository", "LeaveRequestRepository"]
