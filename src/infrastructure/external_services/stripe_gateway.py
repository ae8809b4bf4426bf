"""
StripeGateway - Adapter Stripe du port PaymentGateway.

Responsabilite unique:
----------------------
Traduire les appels du port en appels au SDK stripe, et les
erreurs du SDK en exceptions du domaine.

Configuration:
--------------
La cle API est passee a chaque appel (api_key=...) au lieu de
stripe.api_key: deux instances configurees differemment peuvent
coexister dans le meme process.

Usage:
------
    gateway = StripeGateway(
        api_key=settings.stripe_secret_key,
        webhook_secret=settings.stripe_webhook_secret,
    )
    price = gateway.find_price_by_lookup_key("standard_monthly")
"""

import json
from typing import Any, Optional

import stripe

from src.domain.entities.checkout_session import CheckoutOptions, CheckoutSession
from src.domain.entities.portal_session import PortalSession
from src.domain.entities.price import Price
from src.domain.entities.webhook_event import WebhookEvent
from src.domain.exceptions import (
    InvalidWebhookPayloadError,
    InvalidWebhookSignatureError,
    PaymentProviderError,
)
from src.domain.ports.payment_gateway import PaymentGateway


class StripeGateway(PaymentGateway):
    """
    Adapter vers l'API Stripe.

    Aucun appel n'est rejoue: une erreur Stripe est terminale
    pour la requete en cours.
    """

    def __init__(
        self,
        api_key: str,
        webhook_secret: str,
        webhook_tolerance: int = stripe.Webhook.DEFAULT_TOLERANCE,
    ):
        """
        Initialise l'adapter.

        Args:
            api_key: Cle secrete Stripe (sk_...).
            webhook_secret: Secret de l'endpoint webhook (whsec_...).
            webhook_tolerance: Age maximal d'une signature, en secondes.
        """
        self._api_key = api_key
        self._webhook_secret = webhook_secret
        self._webhook_tolerance = webhook_tolerance

    def find_price_by_lookup_key(self, lookup_key: str) -> Optional[Price]:
        try:
            prices = stripe.Price.list(
                lookup_keys=[lookup_key],
                limit=1,
                api_key=self._api_key,
            )
        except stripe.StripeError as e:
            raise PaymentProviderError("Price.list", str(e)) from e

        if not prices.data:
            return None

        price = prices.data[0]
        return Price(
            id=price.id,
            lookup_key=getattr(price, "lookup_key", None),
            recurring=getattr(price, "recurring", None) is not None,
        )

    def create_checkout_session(
        self,
        price: Price,
        options: CheckoutOptions,
    ) -> CheckoutSession:
        params: dict[str, Any] = {
            "mode": "subscription",
            "line_items": [{"price": price.id, "quantity": options.quantity}],
            "success_url": options.success_url,
            "cancel_url": options.cancel_url,
            "automatic_tax": {"enabled": options.automatic_tax},
        }
        if options.billing_cycle_anchor:
            params["subscription_data"] = {
                "billing_cycle_anchor": options.billing_cycle_anchor,
            }

        try:
            session = stripe.checkout.Session.create(api_key=self._api_key, **params)
        except stripe.StripeError as e:
            raise PaymentProviderError("checkout.Session.create", str(e)) from e

        return self._to_checkout_session(session)

    def retrieve_checkout_session(self, session_id: str) -> CheckoutSession:
        try:
            session = stripe.checkout.Session.retrieve(session_id, api_key=self._api_key)
        except stripe.StripeError as e:
            raise PaymentProviderError("checkout.Session.retrieve", str(e)) from e

        return self._to_checkout_session(session)

    def create_portal_session(
        self,
        customer_id: str,
        return_url: str,
    ) -> PortalSession:
        try:
            session = stripe.billing_portal.Session.create(
                customer=customer_id,
                return_url=return_url,
                api_key=self._api_key,
            )
        except stripe.StripeError as e:
            raise PaymentProviderError("billing_portal.Session.create", str(e)) from e

        return PortalSession(
            id=session.id,
            url=session.url,
            customer_id=customer_id,
            return_url=return_url,
        )

    def construct_event(self, payload: bytes, signature: str) -> WebhookEvent:
        if not self._webhook_secret:
            raise InvalidWebhookSignatureError("secret webhook non configure")

        try:
            body = payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidWebhookPayloadError("corps non UTF-8") from e

        try:
            stripe.WebhookSignature.verify_header(
                body,
                signature,
                self._webhook_secret,
                self._webhook_tolerance,
            )
        except stripe.SignatureVerificationError as e:
            raise InvalidWebhookSignatureError(str(e)) from e

        try:
            data = json.loads(body)
        except ValueError as e:
            raise InvalidWebhookPayloadError(f"JSON invalide: {e}") from e

        return self._to_event(data)

    def _to_checkout_session(self, session: Any) -> CheckoutSession:
        """Convertit une session Stripe en entite."""
        return CheckoutSession(
            id=session.id,
            url=getattr(session, "url", None),
            customer_id=_object_id(getattr(session, "customer", None)),
            subscription_id=_object_id(getattr(session, "subscription", None)),
        )

    def _to_event(self, data: Any) -> WebhookEvent:
        """Valide l'enveloppe d'un event decode."""
        if not isinstance(data, dict):
            raise InvalidWebhookPayloadError("l'event n'est pas un objet")

        event_type = data.get("type")
        if not isinstance(event_type, str) or not event_type:
            raise InvalidWebhookPayloadError("type d'event manquant")

        event_data = data.get("data")
        if not isinstance(event_data, dict) or "object" not in event_data:
            raise InvalidWebhookPayloadError("data.object manquant")

        return WebhookEvent(
            id=str(data.get("id", "")),
            type=event_type,
            data_object=event_data["object"],
            livemode=bool(data.get("livemode", False)),
        )


def _object_id(value: Any) -> Optional[str]:
    """Un champ Stripe reference un ID, ou un objet s'il est expanse."""
    if value is None or isinstance(value, str):
        return value
    return getattr(value, "id", None)
