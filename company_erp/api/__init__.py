from company_erp.api.router import router

__all__ = ["router"]
