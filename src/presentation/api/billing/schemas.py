"""
Billing Schemas - Modeles Pydantic pour le billing.

Responsabilite unique:
----------------------
Definir les schemas de reponse des endpoints billing. Les requetes
checkout et portal sont des formulaires HTML (un seul champ chacune).
"""

from pydantic import BaseModel


class WebhookResponse(BaseModel):
    """Reponse au webhook."""

    received: bool


class ErrorResponse(BaseModel):
    """Reponse d'erreur generique (jamais le detail Stripe)."""

    detail: str
