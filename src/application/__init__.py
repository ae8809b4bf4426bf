"""
Application Layer - Orchestration des Use Cases.

Cette couche contient:
    - use_cases/billing/: Checkout, portail, reception des webhooks

Principes:
    - Depend uniquement du domaine
    - Utilise les ports definis dans le domaine
    - Orchestre les entites du domaine via les use cases
"""

__all__ = []
