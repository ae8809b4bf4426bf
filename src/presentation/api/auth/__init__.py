"""
Auth API - Preuve d'appartenance des sessions checkout.

Le cookie signe pose par /create-checkout-session est verifie
par /create-portal-session avant tout appel au portail Stripe.
"""

from src.presentation.api.auth.session_token import SessionTokenService

__all__ = ["SessionTokenService"]
