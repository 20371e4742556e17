"""
Subscription endpoints proxied to Stripe. Any authenticated employee may
call them.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, status

from company_erp.dependencies import CurrentEmployee, get_billing_service
from company_erp.schemas.common import DataResponse, ListResponse, error_responses
from company_erp.schemas.subscription import (
    ScheduleCreateRequest,
    SubscriptionCreateRequest,
    SubscriptionUpdateRequest,
)
from company_erp.services.subscription import BillingService

router = APIRouter(prefix="/subscriptions", tags=["Subscriptions"])

StripeData = Dict[str, Any]


@router.post(
    "",
    response_model=DataResponse[StripeData],
    status_code=status.HTTP_201_CREATED,
    summary="Create a subscription",
    responses=error_responses(400, 401),
)
def create_subscription(
    payload: SubscriptionCreateRequest,
    _current: CurrentEmployee,
    billing: BillingService = Depends(get_billing_service),
) -> DataResponse[StripeData]:
    return DataResponse[StripeData](data=billing.create_subscription(payload))


@router.get(
    "",
    response_model=ListResponse[StripeData],
    summary="List subscriptions",
    responses=error_responses(400, 401),
)
def list_subscriptions(
    _current: CurrentEmployee,
    customer: Optional[str] = Query(default=None, description="Filter by Stripe customer id"),
    billing: BillingService = Depends(get_billing_service),
) -> ListResponse[StripeData]:
    return ListResponse[StripeData].of(billing.list_subscriptions(customer))


@router.post(
    "/schedule",
    response_model=DataResponse[StripeData],
    status_code=status.HTTP_201_CREATED,
    summary="Create a subscription schedule",
    responses=error_responses(400, 401),
)
def create_subscription_schedule(
    payload: ScheduleCreateRequest,
    _current: CurrentEmployee,
    billing: BillingService = Depends(get_billing_service),
) -> DataResponse[StripeData]:
    return DataResponse[StripeData](data=billing.create_schedule(payload))


@router.get(
    "/{subscription_id}",
    response_model=DataResponse[StripeData],
    summary="Get a subscription",
    responses=error_responses(401, 404),
)
def get_subscription(
    subscription_id: str,
    _current: CurrentEmployee,
    billing: BillingService = Depends(get_billing_service),
) -> DataResponse[StripeData]:
    return DataResponse[StripeData](data=billing.get_subscription(subscription_id))


@router.put(
    "/{subscription_id}",
    response_model=DataResponse[StripeData],
    summary="Update a subscription",
    responses=error_responses(400, 401),
)
def update_subscription(
    subscription_id: str,
    payload: SubscriptionUpdateRequest,
    _current: CurrentEmployee,
    billing: BillingService = Depends(get_billing_service),
) -> DataResponse[StripeData]:
    return DataResponse[StripeData](data=billing.update_subscription(subscription_id, payload))


@router.delete(
    "/{subscription_id}",
    response_model=DataResponse[StripeData],
    summary="Cancel a subscription",
    responses=error_responses(400, 401),
)
def cancel_subscription(
    subscription_id: str,
    _current: CurrentEmployee,
    billing: BillingService = Depends(get_billing_service),
) -> DataResponse[StripeData]:
    return DataResponse[StripeData](data=billing.cancel_subscription(subscription_id))


@router.post(
    "/{subscription_id}/resume",
    response_model=DataResponse[StripeData],
    summary="Resume a subscription scheduled for cancellation",
    responses=error_responses(400, 401),
)
def resume_subscription(
    subscription_id: str,
    _current: CurrentEmployee,
    billing: BillingService = Depends(get_billing_service),
) -> DataResponse[StripeData]:
    return DataResponse[StripeData](data=billing.resume_subscription(subscription_id))


@router.get(
    "/{subscription_id}/invoice",
    response_model=ListResponse[StripeData],
    summary="List invoices of a subscription",
    responses=error_responses(400, 401),
)
def list_subscription_invoices(
    subscription_id: str,
    _current: CurrentEmployee,
    billing: BillingService = Depends(get_billing_service),
) -> ListResponse[StripeData]:
    return ListResponse[StripeData].of(billing.list_invoices(subscription_id))
