from company_erp.services.subscription.billing_service import BillingService, to_plain

__all__ = ["BillingService", "to_plain"]
