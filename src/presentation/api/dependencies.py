"""
Dependencies - Injection de dependances FastAPI.

Responsabilite unique:
----------------------
Construire les services et use cases a partir de APISettings.
Les tests remplacent get_payment_gateway via app.dependency_overrides.

Usage:
------
    @router.post("/create-checkout-session")
    def create_checkout_session(
        use_case: CreateCheckoutSessionUseCase = Depends(get_checkout_use_case),
    ):
        ...
"""

from fastapi import Depends

from src.application.use_cases.billing import (
    CreateCheckoutSessionUseCase,
    CreatePortalSessionUseCase,
    ReceiveWebhookUseCase,
    WebhookDispatcher,
)
from src.domain.ports.payment_gateway import PaymentGateway
from src.infrastructure.external_services.stripe_gateway import StripeGateway
from src.presentation.api.auth.session_token import SessionTokenService
from src.presentation.api.config import APISettings, get_settings


def get_payment_gateway(
    settings: APISettings = Depends(get_settings),
) -> PaymentGateway:
    """Retourne l'adapter Stripe."""
    return StripeGateway(
        api_key=settings.stripe_secret_key,
        webhook_secret=settings.stripe_webhook_secret,
        webhook_tolerance=settings.stripe_webhook_tolerance,
    )


def get_session_token_service(
    settings: APISettings = Depends(get_settings),
) -> SessionTokenService:
    """Retourne le SessionTokenService."""
    return SessionTokenService(settings)


def get_checkout_use_case(
    settings: APISettings = Depends(get_settings),
    gateway: PaymentGateway = Depends(get_payment_gateway),
) -> CreateCheckoutSessionUseCase:
    """Retourne le use case checkout."""
    return CreateCheckoutSessionUseCase(gateway, settings.checkout_options())


def get_portal_use_case(
    settings: APISettings = Depends(get_settings),
    gateway: PaymentGateway = Depends(get_payment_gateway),
) -> CreatePortalSessionUseCase:
    """Retourne le use case portail."""
    return CreatePortalSessionUseCase(
        gateway,
        return_url=settings.portal_return_url,
        require_ownership=settings.portal_require_ownership,
    )


def get_webhook_use_case(
    gateway: PaymentGateway = Depends(get_payment_gateway),
) -> ReceiveWebhookUseCase:
    """Retourne le use case webhook."""
    return ReceiveWebhookUseCase(gateway, WebhookDispatcher.default())
