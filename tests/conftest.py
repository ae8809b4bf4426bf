"""
Configuration et fixtures pytest.
"""

import hashlib
import hmac
import json
import sys
import time
from pathlib import Path
from typing import Optional

import pytest

# Ajouter le repertoire racine au path
sys.path.insert(0, str(Path(__file__).parent.parent))

from fastapi.testclient import TestClient

from src.domain.entities.checkout_session import CheckoutOptions, CheckoutSession
from src.domain.entities.portal_session import PortalSession
from src.domain.entities.price import Price
from src.domain.exceptions import PaymentProviderError
from src.infrastructure.external_services.stripe_gateway import StripeGateway
from src.presentation.api.config import APISettings
from src.presentation.api.dependencies import get_payment_gateway
from src.presentation.api.main import create_app


WEBHOOK_SECRET = "whsec_test_secret"


# ═══════════════════════════════════════════════════════════════════════════════
# HELPERS - SIGNATURE STRIPE
# ═══════════════════════════════════════════════════════════════════════════════

def sign_payload(payload: str, secret: str = WEBHOOK_SECRET, timestamp: Optional[int] = None) -> str:
    """Construit un header Stripe-Signature (t=...,v1=...) pour un payload."""
    timestamp = timestamp or int(time.time())
    signature = hmac.new(
        secret.encode("utf-8"),
        f"{timestamp}.{payload}".encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()
    return f"t={timestamp},v1={signature}"


def make_event(event_type: str, data_object: Optional[dict] = None) -> str:
    """Serialise un event Stripe minimal."""
    return json.dumps({
        "id": "evt_test_123",
        "object": "event",
        "type": event_type,
        "livemode": False,
        "data": {"object": data_object if data_object is not None else {}},
    })


# ═══════════════════════════════════════════════════════════════════════════════
# FAKE GATEWAY
# ═══════════════════════════════════════════════════════════════════════════════

class FakeStripeGateway(StripeGateway):
    """
    StripeGateway sans appels reseau.

    Les prix, sessions et clients sont en memoire; construct_event
    reste celui de StripeGateway (verification de signature reelle).
    """

    def __init__(self, webhook_secret: str = WEBHOOK_SECRET):
        super().__init__(api_key="sk_test_fake", webhook_secret=webhook_secret)
        self.prices = {"standard_monthly": Price(id="price_123", lookup_key="standard_monthly")}
        self.sessions = {"cs_test_paid": CheckoutSession(id="cs_test_paid", customer_id="cus_123")}
        self.fail_on: set[str] = set()
        self.calls: list[str] = []

    def find_price_by_lookup_key(self, lookup_key):
        self.calls.append("find_price_by_lookup_key")
        return self.prices.get(lookup_key)

    def create_checkout_session(self, price: Price, options: CheckoutOptions):
        self.calls.append("create_checkout_session")
        if "create_checkout_session" in self.fail_on:
            raise PaymentProviderError("checkout.Session.create", "sk_test leaked detail")
        self.last_options = options
        return CheckoutSession(
            id="cs_test_new",
            url="https://checkout.stripe.com/c/pay/cs_test_new",
        )

    def retrieve_checkout_session(self, session_id):
        self.calls.append("retrieve_checkout_session")
        if session_id not in self.sessions:
            raise PaymentProviderError(
                "checkout.Session.retrieve",
                f"No such checkout.session: '{session_id}'",
            )
        return self.sessions[session_id]

    def create_portal_session(self, customer_id, return_url):
        self.calls.append("create_portal_session")
        if "create_portal_session" in self.fail_on:
            raise PaymentProviderError("billing_portal.Session.create", "portal not configured")
        return PortalSession(
            id="bps_123",
            url=f"https://billing.stripe.com/p/session/{customer_id}",
            customer_id=customer_id,
            return_url=return_url,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - API
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def api_settings() -> APISettings:
    """Configuration de test (sans .env)."""
    return APISettings(
        _env_file=None,
        stripe_secret_key="sk_test_fake",
        stripe_webhook_secret=WEBHOOK_SECRET,
        session_token_secret="test-session-secret",
        session_cookie_secure=False,
    )


@pytest.fixture
def fake_gateway() -> FakeStripeGateway:
    """Gateway en memoire."""
    return FakeStripeGateway()


@pytest.fixture
def client(api_settings, fake_gateway) -> TestClient:
    """Client HTTP sur une app configuree avec le fake gateway."""
    app = create_app(api_settings)
    app.dependency_overrides[get_payment_gateway] = lambda: fake_gateway
    return TestClient(app)


@pytest.fixture
def signer():
    """Signe un payload comme Stripe."""
    return sign_payload


@pytest.fixture
def event_factory():
    """Construit un event Stripe serialise."""
    return make_event
