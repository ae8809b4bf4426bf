"""
ReceiveWebhookUseCase - Recevoir une notification Stripe.

Responsabilite unique:
----------------------
Enchainer verification -> decodage -> dispatch pour un corps
de webhook deja lu (et deja borne en taille).

Sequence:
---------
1. Verifier la signature contre le secret partage
2. Decoder l'enveloppe de l'event
3. Router vers le handler du type d'event
4. Retourner le resultat (la route repond 200 dans tous les cas)
"""

from typing import Optional

import structlog

from src.application.use_cases.billing.webhook_handlers import (
    WebhookDispatcher,
    WebhookResult,
)
from src.domain.exceptions import InvalidWebhookPayloadError, InvalidWebhookSignatureError
from src.domain.ports.payment_gateway import PaymentGateway


class ReceiveWebhookUseCase:
    """
    Use case de reception de webhook.

    Example:
        >>> use_case = ReceiveWebhookUseCase(gateway, WebhookDispatcher.default())
        >>> use_case.execute(payload, request.headers["stripe-signature"])
        WebhookResult(success=True, action_taken='logged_creation', error=None)
    """

    def __init__(
        self,
        gateway: PaymentGateway,
        dispatcher: WebhookDispatcher,
        logger: Optional[structlog.stdlib.BoundLogger] = None,
    ):
        """
        Initialise le use case.

        Args:
            gateway: Adapter qui verifie la signature.
            dispatcher: Table de dispatch des events.
            logger: Logger a utiliser (defaut: logger du module).
        """
        self._gateway = gateway
        self._dispatcher = dispatcher
        self._logger = logger or structlog.get_logger(__name__)

    def execute(self, payload: bytes, signature: str) -> WebhookResult:
        """
        Verifie puis traite le webhook.

        Args:
            payload: Corps brut de la requete.
            signature: Header Stripe-Signature (vide si absent).

        Returns:
            WebhookResult du handler.

        Raises:
            InvalidWebhookSignatureError: Si la signature est invalide.
            InvalidWebhookPayloadError: Si l'event ou son payload est mal forme.
        """
        try:
            event = self._gateway.construct_event(payload, signature)
        except InvalidWebhookSignatureError as e:
            self._logger.warning("webhook_signature_invalid", error=e.detail)
            raise

        self._logger.info("webhook_event_received", **event.summary)

        try:
            result = self._dispatcher.dispatch(event)
        except InvalidWebhookPayloadError as e:
            self._logger.warning(
                "webhook_payload_invalid",
                error=e.detail,
                **event.summary,
            )
            raise

        self._logger.info(
            "webhook_event_processed",
            action_taken=result.action_taken,
            **event.summary,
        )
        return result
