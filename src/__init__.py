"""
Subscription Checkout - Architecture Hexagonale

Backend minimal d'abonnement Stripe: session checkout, portail client
et reception des webhooks du cycle de vie des abonnements.

Structure:
    - domain/: Entites transitoires, exceptions, port PaymentGateway
    - application/: Use cases billing et dispatch des webhooks
    - infrastructure/: Adapter Stripe, logging structlog
    - presentation/: API FastAPI
"""

__version__ = "1.0.0"
