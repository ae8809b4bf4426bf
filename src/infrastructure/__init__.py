"""
Infrastructure Layer - Adapters pour les services externes.

Cette couche contient les implementations concretes des ports definis
dans le domaine. Elle gere les interactions avec:
- API Stripe (prix, sessions checkout, portail, webhooks)
- Logging structure (structlog)
"""

from src.infrastructure.external_services.stripe_gateway import StripeGateway
from src.infrastructure.logging import configure_logging, get_logger

__all__ = [
    "StripeGateway",
    "configure_logging",
    "get_logger",
]
