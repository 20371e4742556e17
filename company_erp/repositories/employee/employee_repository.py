"""
Employee repository: the credential store.
"""

from typing import Optional

from company_erp.models.employee import Employee
from company_erp.repositories.base import BaseRepository


class EmployeeRepository(BaseRepository[Employee]):
    """Data access for employees."""

    model = Employee

    def get_by_email(self, email: str) -> Optional[Employee]:
        """Find an employee by exact email address."""
        return self.find_one_by(email=email)

    def email_exists(self, email: str) -> bool:
        return self.get_by_email(email) is not None
