"""
Use Cases de l'application.

Les Use Cases orchestrent les entites du domaine et le fournisseur
de paiement pour realiser les fonctionnalites de l'application.

Chaque Use Case:
    - A une seule responsabilite
    - Utilise le port PaymentGateway pour les appels externes
    - Ne connait pas les details d'implementation (SDK, HTTP)
"""

from src.application.use_cases.billing import (
    CreateCheckoutSessionUseCase,
    CreatePortalSessionUseCase,
    ReceiveWebhookUseCase,
)

__all__ = [
    "CreateCheckoutSessionUseCase",
    "CreatePortalSessionUseCase",
    "ReceiveWebhookUseCase",
]
