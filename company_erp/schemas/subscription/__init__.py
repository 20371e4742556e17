from company_erp.schemas.subscription.subscription import (
    ScheduleCreateRequest,
    SubscriptionCreateRequest,
    SubscriptionUpdateRequest,
)

__all__ = ["ScheduleCreateRequest", "SubscriptionCreateRequest", "SubscriptionUpdateRequest"]
