"""
Domain Layer - Coeur metier de l'application.

Ce module contient:
    - entities/: Entites transitoires du fournisseur (Price, CheckoutSession...)
    - ports/: Interface PaymentGateway
    - exceptions: Exceptions metier

Principes:
    - AUCUNE dependance vers les couches externes
    - Aucun etat persiste: tout vit le temps d'une requete
    - Testable sans infrastructure
"""

from src.domain.exceptions import (
    DomainException,
    InvalidWebhookPayloadError,
    InvalidWebhookSignatureError,
    PaymentProviderError,
    PriceNotFoundError,
    SessionOwnershipError,
    WebhookPayloadTooLargeError,
)

__all__ = [
    "DomainException",
    "PriceNotFoundError",
    "PaymentProviderError",
    "SessionOwnershipError",
    "InvalidWebhookSignatureError",
    "InvalidWebhookPayloadError",
    "WebhookPayloadTooLargeError",
]
