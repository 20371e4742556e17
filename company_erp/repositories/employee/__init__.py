from company_erp.repositories.employee.employee_repository import EmployeeRepository

__all__ = ["EmployeeRepository"]
