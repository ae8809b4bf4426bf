"""
Billing API - Integration Stripe.

Endpoints:
----------
- POST /create-checkout-session: Creer une session checkout
- POST /create-portal-session: Lien vers le portail client
- POST /webhook: Recevoir les events Stripe
"""

from src.presentation.api.billing.router import router

__all__ = ["router"]
