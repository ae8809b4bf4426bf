"""
API REST - FastAPI.

Presentation layer du parcours d'abonnement Stripe.

Routers disponibles:
--------------------
- pages: Accueil, succes, annulation (HTML)
- billing: Checkout, portail client, webhooks Stripe

Usage:
------
    uvicorn src.presentation.api.main:app --reload
"""

from src.presentation.api.main import create_app

__all__ = ["create_app"]
