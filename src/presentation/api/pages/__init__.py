"""
Pages HTML du parcours de paiement (accueil, succes, annulation).
"""

from src.presentation.api.pages.router import router

__all__ = ["router"]
