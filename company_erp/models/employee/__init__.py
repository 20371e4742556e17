from company_erp.models.employee.employee import Employee

__all__ = ["Employee"]
