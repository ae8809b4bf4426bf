"""
Entites du domaine.

Les entites sont des objets definis par le fournisseur de paiement
et observes le temps d'une requete HTTP. Aucune n'est persistee.

Entites principales:
    - Price: Prix du catalogue, resolu par lookup key
    - CheckoutSession: Session de paiement et son URL
    - PortalSession: Session du portail client
    - Subscription: Abonnement decode depuis un webhook
    - WebhookEvent: Enveloppe d'un event verifie
"""

from src.domain.entities.checkout_session import (
    SESSION_ID_PLACEHOLDER,
    CheckoutOptions,
    CheckoutSession,
)
from src.domain.entities.portal_session import PortalSession
from src.domain.entities.price import Price
from src.domain.entities.subscription import Subscription
from src.domain.entities.webhook_event import WebhookEvent

__all__ = [
    "SESSION_ID_PLACEHOLDER",
    "CheckoutOptions",
    "CheckoutSession",
    "PortalSession",
    "Price",
    "Subscription",
    "WebhookEvent",
]
