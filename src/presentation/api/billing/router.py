"""
Billing Router - Endpoints de facturation.

Responsabilite unique:
----------------------
Exposer les endpoints checkout, portal et webhook, et traduire
les exceptions du domaine en codes HTTP.

Endpoints:
----------
- POST /create-checkout-session: Redirection 303 vers Stripe Checkout
- POST /create-portal-session: Redirection 303 vers le portail client
- POST /webhook: Recevoir les events Stripe

Erreurs:
--------
Le detail des erreurs Stripe est logge cote serveur uniquement,
le client recoit un message generique.
"""

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from starlette.requests import ClientDisconnect

from src.application.use_cases.billing import (
    CreateCheckoutSessionUseCase,
    CreatePortalSessionUseCase,
    PortalSessionRequest,
    ReceiveWebhookUseCase,
)
from src.domain.exceptions import (
    InvalidWebhookPayloadError,
    InvalidWebhookSignatureError,
    PaymentProviderError,
    PriceNotFoundError,
    SessionOwnershipError,
    WebhookPayloadTooLargeError,
)
from src.infrastructure.logging import get_logger
from src.presentation.api.auth.session_token import SessionTokenService
from src.presentation.api.billing.schemas import ErrorResponse, WebhookResponse
from src.presentation.api.config import APISettings, get_settings
from src.presentation.api.dependencies import (
    get_checkout_use_case,
    get_portal_use_case,
    get_session_token_service,
    get_webhook_use_case,
)


router = APIRouter(tags=["Billing"])
logger = get_logger(__name__)


@router.post(
    "/create-checkout-session",
    status_code=status.HTTP_303_SEE_OTHER,
    response_class=RedirectResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Creer une session checkout",
    description="Redirige vers Stripe Checkout pour le prix de la lookup key.",
)
def create_checkout_session(
    lookup_key: str = Form(""),
    settings: APISettings = Depends(get_settings),
    use_case: CreateCheckoutSessionUseCase = Depends(get_checkout_use_case),
    token_service: SessionTokenService = Depends(get_session_token_service),
):
    """
    Cree une session checkout en mode abonnement.

    Returns:
        Redirection 303 vers l'URL Stripe, avec le cookie de session.
    """
    try:
        result = use_case.execute(lookup_key)
    except PriceNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Price not found",
        )
    except PaymentProviderError as e:
        logger.error("checkout_session_failed", operation=e.operation, error=e.detail)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create checkout session",
        )

    if not result.redirect_url:
        logger.error("checkout_session_without_url", session_id=result.session.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create checkout session",
        )

    response = RedirectResponse(
        result.redirect_url,
        status_code=status.HTTP_303_SEE_OTHER,
    )
    token = token_service.issue(result.session.id)
    if token is None:
        logger.warning("session_cookie_not_issued", session_id=result.session.id)
        return response

    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=token_service.max_age,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    return response


@router.post(
    "/create-portal-session",
    status_code=status.HTTP_303_SEE_OTHER,
    response_class=RedirectResponse,
    responses={403: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Portail client",
    description="Redirige vers le portail client Stripe de la session checkout.",
)
def create_portal_session(
    request: Request,
    session_id: str = Form(""),
    settings: APISettings = Depends(get_settings),
    use_case: CreatePortalSessionUseCase = Depends(get_portal_use_case),
    token_service: SessionTokenService = Depends(get_session_token_service),
):
    """
    Cree une session du portail client.

    L'appelant doit presenter le cookie signe pose au checkout.
    """
    owned_session_id = token_service.verify(
        request.cookies.get(settings.session_cookie_name)
    )

    try:
        portal = use_case.execute(
            PortalSessionRequest(session_id=session_id, owned_session_id=owned_session_id)
        )
    except SessionOwnershipError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Checkout session not owned by caller",
        )
    except PaymentProviderError as e:
        logger.error(
            "portal_session_failed",
            session_id=session_id,
            operation=e.operation,
            error=e.detail,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create portal session",
        )

    return RedirectResponse(portal.url, status_code=status.HTTP_303_SEE_OTHER)


@router.post(
    "/webhook",
    response_model=WebhookResponse,
    responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    summary="Webhook Stripe",
    description="Recoit les events Stripe (ne pas appeler manuellement).",
)
async def stripe_webhook(
    request: Request,
    settings: APISettings = Depends(get_settings),
    use_case: ReceiveWebhookUseCase = Depends(get_webhook_use_case),
):
    """
    Traite les webhooks Stripe.

    Repond 200 des que la signature est valide, quel que soit le
    type d'event, pour que Stripe ne rejoue pas la livraison.
    """
    try:
        payload = await _read_body(request, settings.webhook_max_body_bytes)
    except WebhookPayloadTooLargeError as e:
        logger.warning("webhook_body_too_large", limit=e.limit)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Request body too large",
        )
    except ClientDisconnect:
        logger.warning("webhook_body_unreadable")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Request body unreadable",
        )

    signature = request.headers.get("stripe-signature", "")

    try:
        use_case.execute(payload, signature)
    except InvalidWebhookSignatureError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid signature",
        )
    except InvalidWebhookPayloadError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid webhook payload",
        )

    return WebhookResponse(received=True)


async def _read_body(request: Request, max_bytes: int) -> bytes:
    """Lit le corps sans jamais garder plus de max_bytes en memoire."""
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > max_bytes:
        raise WebhookPayloadTooLargeError(max_bytes)

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > max_bytes:
            raise WebhookPayloadTooLargeError(max_bytes)
    return bytes(body)
