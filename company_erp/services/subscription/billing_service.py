"""
Stripe subscription billing proxy.

Each operation is forwarded to Stripe once with the configured secret key
passed per call. Nothing is stored locally and nothing is retried.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

import stripe

from company_erp.core.exceptions import (
    MissingConfigurationError,
    ResourceNotFoundError,
    UpstreamError,
)
from company_erp.core.logging import get_logger
from company_erp.schemas.subscription import (
    ScheduleCreateRequest,
    SubscriptionCreateRequest,
    SubscriptionUpdateRequest,
)

logger = get_logger(__name__)


def to_plain(obj: Any) -> Any:
    """Convert Stripe resources (and lists of them) to plain JSON data."""
    if isinstance(obj, stripe.StripeObject):
        # Resources are not dicts, and ``obj.items`` may be a field.
        return to_plain(obj.to_dict())
    if isinstance(obj, dict):
        return {key: to_plain(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [to_plain(item) for item in obj]
    return obj


def _upstream(exc: stripe.StripeError, operation: str) -> UpstreamError:
    message = exc.user_message or str(exc) or "Payment gateway error"
    logger.warning(
        "stripe_call_failed",
        operation=operation,
        error_type=type(exc).__name__,
        gateway_error_code=exc.code,
    )
    return UpstreamError(message, gateway_error_code=exc.code)


class BillingService:
    """Subscription operations on behalf of authenticated employees."""

    EXPAND_ON_CREATE = ["latest_invoice.payment_intent"]

    def __init__(self, api_key: Optional[str]) -> None:
        self._api_key = api_key

    @property
    def api_key(self) -> str:
        if not self._api_key:
            raise MissingConfigurationError("STRIPE_SECRET_KEY")
        return self._api_key

    def _set_default_payment_method(self, customer_id: str, payment_method_id: str) -> None:
        stripe.PaymentMethod.attach(payment_method_id, customer=customer_id, api_key=self.api_key)
        stripe.Customer.modify(
            customer_id,
            invoice_settings={"default_payment_method": payment_method_id},
            api_key=self.api_key,
        )

    # ------------------------------------------------------------------ #
    # Subscriptions
    # ------------------------------------------------------------------ #
    def create_subscription(self, data: SubscriptionCreateRequest) -> Dict[str, Any]:
        """
        Create a one-item subscription for ``customer_id`` at ``price_id``.

        A given payment method is attached first and becomes the customer's
        default for invoices.
        """
        if not data.customer_id or not data.price_id:
            raise UpstreamError("Please provide a customer ID and price ID", gateway_name=None)

        api_key = self.api_key
        try:
            if data.payment_method_id:
                self._set_default_payment_method(data.customer_id, data.payment_method_id)

            subscription = stripe.Subscription.create(
                customer=data.customer_id,
                items=[{"price": data.price_id}],
                expand=self.EXPAND_ON_CREATE,
                api_key=api_key,
            )
        except stripe.StripeError as exc:
            raise _upstream(exc, "create_subscription") from exc

        result = to_plain(subscription)
        logger.info("subscription_created", subscription_id=result.get("id"))
        return result

    def list_subscriptions(self, customer: Optional[str] = None) -> List[Dict[str, Any]]:
        params: Dict[str, Any] = {}
        if customer:
            params["customer"] = customer

        api_key = self.api_key
        try:
            subscriptions = stripe.Subscription.list(api_key=api_key, **params)
        except stripe.StripeError as exc:
            raise _upstream(exc, "list_subscriptions") from exc
        return to_plain(subscriptions).get("data", [])

    def get_subscription(self, subscription_id: str) -> Dict[str, Any]:
        """Any provider failure is reported as not found."""
        api_key = self.api_key
        try:
            subscription = stripe.Subscription.retrieve(subscription_id, api_key=api_key)
        except stripe.StripeError as exc:
            logger.info("subscription_lookup_failed", subscription_id=subscription_id, error_type=type(exc).__name__)
            raise ResourceNotFoundError(
                "Subscription",
                subscription_id,
                message=f"No subscription found with id {subscription_id}",
            ) from exc
        return to_plain(subscription)

    def update_subscription(self, subscription_id: str, data: SubscriptionUpdateRequest) -> Dict[str, Any]:
        """
        Change the price and/or default payment method.

        With a new price the first subscription item is switched to it;
        otherwise the remaining request fields are sent as a plain update.
        """
        api_key = self.api_key
        try:
            current = to_plain(stripe.Subscription.retrieve(subscription_id, api_key=api_key))

            if data.payment_method_id:
                self._set_default_payment_method(current["customer"], data.payment_method_id)

            if data.price_id:
                items = to_plain(
                    stripe.SubscriptionItem.list(subscription=subscription_id, api_key=api_key)
                ).get("data", [])
                if not items:
                    raise UpstreamError(f"Subscription {subscription_id} has no items")
                updated = stripe.Subscription.modify(
                    subscription_id,
                    items=[{"id": items[0]["id"], "price": data.price_id}],
                    api_key=api_key,
                )
            else:
                updated = stripe.Subscription.modify(
                    subscription_id,
                    api_key=api_key,
                    **data.passthrough_fields,
                )
        except stripe.StripeError as exc:
            raise _upstream(exc, "update_subscription") from exc

        logger.info("subscription_updated", subscription_id=subscription_id, price_changed=bool(data.price_id))
        return to_plain(updated)

    def cancel_subscription(self, subscription_id: str) -> Dict[str, Any]:
        """Cancel immediately rather than at period end."""
        api_key = self.api_key
        try:
            cancelled = stripe.Subscription.cancel(subscription_id, api_key=api_key)
        except stripe.StripeError as exc:
            raise _upstream(exc, "cancel_subscription") from exc

        logger.info("subscription_cancelled", subscription_id=subscription_id)
        return to_plain(cancelled)

    def resume_subscription(self, subscription_id: str) -> Dict[str, Any]:
        """Undo a pending cancellation at period end."""
        api_key = self.api_key
        try:
            current = to_plain(stripe.Subscription.retrieve(subscription_id, api_key=api_key))
            if not current.get("cancel_at_period_end"):
                raise UpstreamError("This subscription is not scheduled for cancellation", gateway_name=None)

            resumed = stripe.Subscription.modify(
                subscription_id,
                cancel_at_period_end=False,
                api_key=api_key,
            )
        except stripe.StripeError as exc:
            raise _upstream(exc, "resume_subscription") from exc

        logger.info("subscription_resumed", subscription_id=subscription_id)
        return to_plain(resumed)

    # ------------------------------------------------------------------ #
    # Schedules and invoices
    # ------------------------------------------------------------------ #
    def create_schedule(self, data: ScheduleCreateRequest) -> Dict[str, Any]:
        if not data.customer_id or data.phases is None:
            raise UpstreamError("Please provide customer ID and schedule phases", gateway_name=None)

        api_key = self.api_key
        try:
            schedule = stripe.SubscriptionSchedule.create(
                customer=data.customer_id,
                start_date=data.start_date or "now",
                phases=data.phases,
                api_key=api_key,
            )
        except stripe.StripeError as exc:
            raise _upstream(exc, "create_schedule") from exc

        result = to_plain(schedule)
        logger.info("subscription_schedule_created", schedule_id=result.get("id"))
        return result

    def list_invoices(self, subscription_id: str) -> List[Dict[str, Any]]:
        api_key = self.api_key
        try:
            invoices = stripe.Invoice.list(subscription=subscription_id, api_key=api_key)
        except stripe.StripeError as exc:
            raise _upstream(exc, "list_invoices") from exc
        return to_plain(invoices).get("data", [])
