"""
Adapters pour les services externes.

Ce module expose l'adapter du fournisseur de paiement (Stripe).
"""

from src.infrastructure.external_services.stripe_gateway import StripeGateway

__all__ = [
    "StripeGateway",
]
