"""
Billing Use Cases.

Use cases pour la facturation Stripe.

Use Cases:
----------
- CreateCheckoutSessionUseCase: Session checkout depuis une lookup key
- CreatePortalSessionUseCase: Portail client depuis une session checkout
- ReceiveWebhookUseCase: Verification et dispatch des webhooks
- WebhookDispatcher: Table type d'event -> handler
"""

from src.application.use_cases.billing.create_checkout_session import (
    CheckoutSessionResult,
    CreateCheckoutSessionUseCase,
)
from src.application.use_cases.billing.create_portal_session import (
    CreatePortalSessionUseCase,
    PortalSessionRequest,
)
from src.application.use_cases.billing.receive_webhook import ReceiveWebhookUseCase
from src.application.use_cases.billing.webhook_handlers import (
    HandleEntitlementSummaryUpdated,
    HandleSubscriptionCanceled,
    HandleSubscriptionCreated,
    HandleSubscriptionUpdated,
    HandleTrialWillEnd,
    SubscriptionEventHandler,
    WebhookDispatcher,
    WebhookResult,
)

__all__ = [
    "CheckoutSessionResult",
    "CreateCheckoutSessionUseCase",
    "CreatePortalSessionUseCase",
    "PortalSessionRequest",
    "ReceiveWebhookUseCase",
    "SubscriptionEventHandler",
    "HandleSubscriptionCreated",
    "HandleSubscriptionUpdated",
    "HandleSubscriptionCanceled",
    "HandleTrialWillEnd",
    "HandleEntitlementSummaryUpdated",
    "WebhookDispatcher",
    "WebhookResult",
]
