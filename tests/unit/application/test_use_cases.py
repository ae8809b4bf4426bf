"""
Tests unitaires pour les Use Cases billing.

Le port PaymentGateway est remplace par un Mock.
"""

import pytest
from unittest.mock import Mock

from src.application.use_cases.billing import (
    CreateCheckoutSessionUseCase,
    CreatePortalSessionUseCase,
    PortalSessionRequest,
    ReceiveWebhookUseCase,
    WebhookDispatcher,
    WebhookResult,
)
from src.domain.entities.checkout_session import CheckoutOptions, CheckoutSession
from src.domain.entities.portal_session import PortalSession
from src.domain.entities.price import Price
from src.domain.entities.webhook_event import WebhookEvent
from src.domain.exceptions import (
    InvalidWebhookPayloadError,
    InvalidWebhookSignatureError,
    PaymentProviderError,
    PriceNotFoundError,
    SessionOwnershipError,
)
from src.domain.ports.payment_gateway import PaymentGateway


@pytest.fixture
def gateway():
    return Mock(spec=PaymentGateway)


@pytest.fixture
def options():
    return CheckoutOptions(
        success_url="https://shop.example/success.html?session_id={CHECKOUT_SESSION_ID}",
        cancel_url="https://shop.example/cancel.html",
        billing_cycle_anchor=1672531200,
    )


class TestCreateCheckoutSessionUseCase:
    """Tests pour CreateCheckoutSessionUseCase."""

    def test_execute_creates_session_for_price(self, gateway, options):
        """execute() resout le prix puis cree la session."""
        # Arrange
        price = Price(id="price_1", lookup_key="standard_monthly")
        gateway.find_price_by_lookup_key.return_value = price
        gateway.create_checkout_session.return_value = CheckoutSession(
            id="cs_1",
            url="https://checkout.stripe.com/c/pay/cs_1",
        )
        use_case = CreateCheckoutSessionUseCase(gateway, options, logger=Mock())

        # Act
        result = use_case.execute("standard_monthly")

        # Assert
        gateway.find_price_by_lookup_key.assert_called_once_with("standard_monthly")
        gateway.create_checkout_session.assert_called_once_with(price, options)
        assert result.redirect_url == "https://checkout.stripe.com/c/pay/cs_1"
        assert result.success_url == "https://shop.example/success.html?session_id=cs_1"

    def test_execute_unknown_lookup_key(self, gateway, options):
        """execute() leve PriceNotFoundError sans creer de session."""
        gateway.find_price_by_lookup_key.return_value = None
        use_case = CreateCheckoutSessionUseCase(gateway, options, logger=Mock())

        with pytest.raises(PriceNotFoundError):
            use_case.execute("missing_key")

        gateway.create_checkout_session.assert_not_called()

    def test_execute_rejects_one_time_price(self, gateway, options):
        """Un prix non recurrent ne peut pas ouvrir un abonnement."""
        gateway.find_price_by_lookup_key.return_value = Price(
            id="price_once", lookup_key="lifetime", recurring=False,
        )
        use_case = CreateCheckoutSessionUseCase(gateway, options, logger=Mock())

        with pytest.raises(PriceNotFoundError):
            use_case.execute("lifetime")

        gateway.create_checkout_session.assert_not_called()

    @pytest.mark.parametrize("lookup_key", ["", "   ", None])
    def test_execute_empty_lookup_key(self, gateway, options, lookup_key):
        """Une lookup key vide n'appelle pas le fournisseur."""
        use_case = CreateCheckoutSessionUseCase(gateway, options, logger=Mock())

        with pytest.raises(PriceNotFoundError):
            use_case.execute(lookup_key)

        gateway.find_price_by_lookup_key.assert_not_called()

    def test_execute_propagates_provider_error(self, gateway, options):
        """Les erreurs du fournisseur remontent telles quelles."""
        gateway.find_price_by_lookup_key.return_value = Price(id="price_1")
        gateway.create_checkout_session.side_effect = PaymentProviderError("create")
        use_case = CreateCheckoutSessionUseCase(gateway, options, logger=Mock())

        with pytest.raises(PaymentProviderError):
            use_case.execute("standard_monthly")


class TestCreatePortalSessionUseCase:
    """Tests pour CreatePortalSessionUseCase."""

    def test_execute_creates_portal_for_customer(self, gateway):
        """execute() cree le portail du client de la session."""
        # Arrange
        gateway.retrieve_checkout_session.return_value = CheckoutSession(
            id="cs_1", customer_id="cus_1",
        )
        gateway.create_portal_session.return_value = PortalSession(
            id="bps_1",
            url="https://billing.stripe.com/p/session/abc",
            customer_id="cus_1",
            return_url="https://shop.example/",
        )
        use_case = CreatePortalSessionUseCase(gateway, "https://shop.example/", logger=Mock())

        # Act
        portal = use_case.execute(PortalSessionRequest("cs_1", owned_session_id="cs_1"))

        # Assert
        gateway.retrieve_checkout_session.assert_called_once_with("cs_1")
        gateway.create_portal_session.assert_called_once_with(
            customer_id="cus_1",
            return_url="https://shop.example/",
        )
        assert portal.url == "https://billing.stripe.com/p/session/abc"

    @pytest.mark.parametrize("owned", [None, "", "cs_other"])
    def test_execute_rejects_unproven_ownership(self, gateway, owned):
        """Sans preuve d'appartenance, aucun appel au fournisseur."""
        use_case = CreatePortalSessionUseCase(gateway, "https://shop.example/", logger=Mock())

        with pytest.raises(SessionOwnershipError):
            use_case.execute(PortalSessionRequest("cs_1", owned_session_id=owned))

        gateway.retrieve_checkout_session.assert_not_called()

    def test_execute_without_ownership_check(self, gateway):
        """require_ownership=False accepte tout session_id."""
        gateway.retrieve_checkout_session.return_value = CheckoutSession(
            id="cs_1", customer_id="cus_1",
        )
        gateway.create_portal_session.return_value = PortalSession(
            id="bps_1", url="https://billing.stripe.com/p/x",
            customer_id="cus_1", return_url="r",
        )
        logger = Mock()
        use_case = CreatePortalSessionUseCase(
            gateway, "r", require_ownership=False, logger=logger,
        )

        portal = use_case.execute(PortalSessionRequest("cs_1"))

        assert portal.id == "bps_1"
        logger.warning.assert_called_once()

    def test_execute_session_without_customer(self, gateway):
        """Une session sans client est une erreur fournisseur."""
        gateway.retrieve_checkout_session.return_value = CheckoutSession(id="cs_1")
        use_case = CreatePortalSessionUseCase(gateway, "r", logger=Mock())

        with pytest.raises(PaymentProviderError):
            use_case.execute(PortalSessionRequest("cs_1", "cs_1"))

        gateway.create_portal_session.assert_not_called()

    def test_execute_unknown_session(self, gateway):
        """Une session inconnue remonte l'erreur du fournisseur."""
        gateway.retrieve_checkout_session.side_effect = PaymentProviderError(
            "checkout.Session.retrieve", "No such checkout.session",
        )
        use_case = CreatePortalSessionUseCase(gateway, "r", logger=Mock())

        with pytest.raises(PaymentProviderError):
            use_case.execute(PortalSessionRequest("cs_x", "cs_x"))


class TestReceiveWebhookUseCase:
    """Tests pour ReceiveWebhookUseCase."""

    def test_execute_dispatches_verified_event(self, gateway):
        """execute() verifie puis route l'event."""
        # Arrange
        event = WebhookEvent(id="evt_1", type="customer.subscription.created")
        gateway.construct_event.return_value = event
        dispatcher = Mock(spec=WebhookDispatcher)
        dispatcher.dispatch.return_value = WebhookResult(success=True, action_taken="x")
        use_case = ReceiveWebhookUseCase(gateway, dispatcher, logger=Mock())

        # Act
        result = use_case.execute(b"{}", "t=1,v1=abc")

        # Assert
        gateway.construct_event.assert_called_once_with(b"{}", "t=1,v1=abc")
        dispatcher.dispatch.assert_called_once_with(event)
        assert result.action_taken == "x"

    def test_execute_bad_signature_skips_dispatch(self, gateway):
        """Une signature invalide n'atteint pas le dispatcher."""
        gateway.construct_event.side_effect = InvalidWebhookSignatureError("bad")
        dispatcher = Mock(spec=WebhookDispatcher)
        use_case = ReceiveWebhookUseCase(gateway, dispatcher, logger=Mock())

        with pytest.raises(InvalidWebhookSignatureError):
            use_case.execute(b"{}", "")

        dispatcher.dispatch.assert_not_called()

    def test_execute_malformed_payload(self, gateway):
        """Un data.object invalide remonte InvalidWebhookPayloadError."""
        gateway.construct_event.return_value = WebhookEvent(
            id="evt_1",
            type="customer.subscription.updated",
            data_object="garbage",
        )
        use_case = ReceiveWebhookUseCase(gateway, WebhookDispatcher.default(Mock()), logger=Mock())

        with pytest.raises(InvalidWebhookPayloadError):
            use_case.execute(b"{}", "sig")
