"""
Subscription request schemas.

Required-field checks are done by the billing service so that missing
values produce its messages rather than generic validation errors.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field

from company_erp.schemas.common.base import CamelSchema

__all__ = [
    "SubscriptionCreateRequest",
    "SubscriptionUpdateRequest",
    "ScheduleCreateRequest",
]


class SubscriptionCreateRequest(CamelSchema):
    """Create a subscription for an existing Stripe customer."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "customerId": "cus_1234567890",
                "priceId": "price_1234567890",
                "paymentMethodId": "pm_1234567890",
            }
        }
    )

    customer_id: Optional[str] = Field(default=None, description="Stripe customer id")
    price_id: Optional[str] = Field(default=None, description="Stripe price id")
    payment_method_id: Optional[str] = Field(
        default=None,
        description="Payment method to attach and make the default",
    )


class SubscriptionUpdateRequest(CamelSchema):
    """
    Change the price or payment method of a subscription.

    Any other fields are passed to Stripe unchanged when no price is given.
    """

    model_config = ConfigDict(extra="allow")

    price_id: Optional[str] = Field(default=None, description="New Stripe price id")
    payment_method_id: Optional[str] = Field(default=None, description="New default payment method")

    @property
    def passthrough_fields(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


class ScheduleCreateRequest(CamelSchema):
    """Create a subscription schedule."""

    customer_id: Optional[str] = Field(default=None, description="Stripe customer id")
    phases: Optional[List[Dict[str, Any]]] = Field(default=None, description="Schedule phases")
    start_date: Optional[Any] = Field(
        default=None,
        description="Unix timestamp or 'now' (default)",
    )
