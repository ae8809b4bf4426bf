"""
Tests unitaires pour les Entites du domaine.
"""

import pytest

from src.domain.entities import (
    SESSION_ID_PLACEHOLDER,
    CheckoutOptions,
    CheckoutSession,
    Subscription,
    WebhookEvent,
)
from src.domain.exceptions import InvalidWebhookPayloadError


class TestCheckoutSession:
    """Tests pour CheckoutSession."""

    def test_resolve_success_url_substitutes_placeholder(self):
        """Le placeholder est remplace par l'ID de session."""
        session = CheckoutSession(id="cs_test_42", url="https://checkout.stripe.com/x")

        url = session.resolve_success_url(
            f"https://shop.example/success.html?session_id={SESSION_ID_PLACEHOLDER}"
        )

        assert url == "https://shop.example/success.html?session_id=cs_test_42"

    def test_resolve_success_url_without_placeholder(self):
        """Une URL sans placeholder est inchangee."""
        session = CheckoutSession(id="cs_test_42")
        assert session.resolve_success_url("https://shop.example/") == "https://shop.example/"

    def test_checkout_options_defaults(self):
        """Quantite 1 et taxe automatique par defaut."""
        options = CheckoutOptions(success_url="s", cancel_url="c")
        assert options.quantity == 1
        assert options.automatic_tax is True
        assert options.billing_cycle_anchor == 0


class TestSubscription:
    """Tests pour Subscription.from_payload."""

    def test_from_payload_full(self):
        """Decode un abonnement Stripe."""
        sub = Subscription.from_payload({
            "id": "sub_123",
            "object": "subscription",
            "status": "active",
            "customer": "cus_456",
            "cancel_at_period_end": True,
            "trial_end": 1700000000,
        })

        assert sub.id == "sub_123"
        assert sub.status == "active"
        assert sub.customer_id == "cus_456"
        assert sub.cancel_at_period_end is True
        assert sub.trial_end == 1700000000

    def test_from_payload_expanded_customer(self):
        """Le client expanse est reduit a son ID."""
        sub = Subscription.from_payload({"id": "sub_1", "customer": {"id": "cus_9"}})
        assert sub.customer_id == "cus_9"

    def test_from_payload_without_id(self):
        """Un summary d'entitlements n'a pas d'id propre."""
        sub = Subscription.from_payload({
            "object": "entitlements.active_entitlement_summary",
            "customer": "cus_1",
        })
        assert sub.id == ""
        assert sub.customer_id == "cus_1"

    @pytest.mark.parametrize("payload", [
        "not-an-object",
        ["sub_1"],
        {"id": 123},
        {"id": "sub_1", "status": 5},
        {"id": "sub_1", "customer": 42},
        {"id": "sub_1", "trial_end": "tomorrow"},
    ])
    def test_from_payload_invalid(self, payload):
        """Un payload mal type est rejete."""
        with pytest.raises(InvalidWebhookPayloadError):
            Subscription.from_payload(payload)


class TestWebhookEvent:
    """Tests pour WebhookEvent."""

    def test_summary(self):
        """summary donne le contexte de log."""
        event = WebhookEvent(id="evt_1", type="customer.subscription.updated")
        assert event.summary == {
            "event_id": "evt_1",
            "event_type": "customer.subscription.updated",
            "livemode": False,
        }
