"""
Stripe Webhook Handlers - Use Cases pour les events Stripe.

Responsabilite unique:
----------------------
Traiter les events Stripe de maniere isolee et testable.

Dispatch:
---------
WebhookDispatcher associe chaque type d'event a un handler.
Le payload data.object est decode en Subscription avant l'appel.
Les types inconnus sont logges puis ignores.

Handlers:
---------
- HandleSubscriptionCreated: customer.subscription.created
- HandleSubscriptionUpdated: customer.subscription.updated
- HandleSubscriptionCanceled: customer.subscription.deleted
- HandleTrialWillEnd: customer.subscription.trial_will_end
- HandleEntitlementSummaryUpdated: entitlements.active_entitlement_summary.updated

Les handlers se contentent de logger: c'est ici que viendra la
logique metier (provisioning, emails de fin d'essai...).
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

import structlog

from src.domain.entities.subscription import Subscription
from src.domain.entities.webhook_event import WebhookEvent


@dataclass
class WebhookResult:
    """
    Resultat du traitement d'un webhook.

    Attributes:
        success: True si traitement reussi.
        action_taken: Description de l'action effectuee.
        error: Message d'erreur si echec.
    """

    success: bool
    action_taken: Optional[str] = None
    error: Optional[str] = None


class SubscriptionEventHandler:
    """
    Handler de base pour un event d'abonnement.

    Les sous-classes fixent event_type, log_event et action.
    """

    event_type: str = ""
    log_event: str = ""
    action: str = ""

    def __init__(self, logger: Optional[structlog.stdlib.BoundLogger] = None):
        """
        Initialise le handler.

        Args:
            logger: Logger a utiliser (defaut: logger du module).
        """
        self._logger = logger or structlog.get_logger(__name__)

    def execute(self, subscription: Subscription) -> WebhookResult:
        """
        Traite l'abonnement decode.

        Args:
            subscription: Abonnement decode depuis data.object.

        Returns:
            WebhookResult avec le resultat.
        """
        self._logger.info(
            self.log_event,
            subscription_id=subscription.id,
            status=subscription.status,
            customer_id=subscription.customer_id,
        )
        return WebhookResult(success=True, action_taken=self.action)


class HandleSubscriptionCreated(SubscriptionEventHandler):
    """Use case pour customer.subscription.created."""

    event_type = "customer.subscription.created"
    log_event = "subscription_created"
    action = "logged_creation"


class HandleSubscriptionUpdated(SubscriptionEventHandler):
    """Use case pour customer.subscription.updated."""

    event_type = "customer.subscription.updated"
    log_event = "subscription_updated"

    def execute(self, subscription: Subscription) -> WebhookResult:
        result = super().execute(subscription)
        result.action_taken = f"logged_status_{subscription.status}"
        return result


class HandleSubscriptionCanceled(SubscriptionEventHandler):
    """Use case pour customer.subscription.deleted."""

    event_type = "customer.subscription.deleted"
    log_event = "subscription_deleted"
    action = "logged_cancellation"


class HandleTrialWillEnd(SubscriptionEventHandler):
    """Use case pour customer.subscription.trial_will_end."""

    event_type = "customer.subscription.trial_will_end"
    log_event = "subscription_trial_will_end"
    action = "logged_trial_end"


class HandleEntitlementSummaryUpdated(SubscriptionEventHandler):
    """Use case pour entitlements.active_entitlement_summary.updated."""

    event_type = "entitlements.active_entitlement_summary.updated"
    log_event = "active_entitlement_summary_updated"
    action = "logged_entitlement_update"


DEFAULT_HANDLERS = (
    HandleSubscriptionCreated,
    HandleSubscriptionUpdated,
    HandleSubscriptionCanceled,
    HandleTrialWillEnd,
    HandleEntitlementSummaryUpdated,
)


class WebhookDispatcher:
    """
    Table de dispatch type d'event -> handler.

    Example:
        >>> dispatcher = WebhookDispatcher.default()
        >>> dispatcher.dispatch(event).action_taken
        'logged_cancellation'
    """

    def __init__(
        self,
        handlers: Iterable[SubscriptionEventHandler],
        logger: Optional[structlog.stdlib.BoundLogger] = None,
    ):
        """
        Initialise le dispatcher.

        Args:
            handlers: Handlers a enregistrer (un par event_type).
            logger: Logger a utiliser (defaut: logger du module).
        """
        self._handlers: Dict[str, SubscriptionEventHandler] = {
            handler.event_type: handler for handler in handlers
        }
        self._logger = logger or structlog.get_logger(__name__)

    @classmethod
    def default(
        cls,
        logger: Optional[structlog.stdlib.BoundLogger] = None,
    ) -> "WebhookDispatcher":
        """Dispatcher avec les handlers d'abonnement standards."""
        return cls([handler(logger) for handler in DEFAULT_HANDLERS], logger)

    @property
    def event_types(self) -> list[str]:
        """Types d'event geres."""
        return sorted(self._handlers)

    def dispatch(self, event: WebhookEvent) -> WebhookResult:
        """
        Route l'event vers son handler.

        Args:
            event: Event verifie.

        Returns:
            WebhookResult du handler, ou ignored_unhandled_type.

        Raises:
            InvalidWebhookPayloadError: Si data.object n'est pas decodable.
        """
        handler = self._handlers.get(event.type)
        if handler is None:
            self._logger.info("webhook_event_unhandled", **event.summary)
            return WebhookResult(success=True, action_taken="ignored_unhandled_type")

        subscription = Subscription.from_payload(event.data_object)
        return handler.execute(subscription)
