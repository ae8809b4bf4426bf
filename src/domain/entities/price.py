"""
Entite Price - Prix du catalogue Stripe.

Objet transitoire observe le temps d'une requete: il est resolu
a partir d'une lookup key puis reference par la session checkout.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Price:
    """
    Prix resolu depuis le catalogue du fournisseur.

    Attributes:
        id: Identifiant opaque du prix (price_...).
        lookup_key: Cle fournie par l'appelant pour le retrouver.
        recurring: True si le prix est un abonnement.
    """

    id: str
    lookup_key: Optional[str] = None
    recurring: bool = True
