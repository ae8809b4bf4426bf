"""
Entite PortalSession - Session du portail client Stripe.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PortalSession:
    """
    Session du portail de facturation, limitee a un client.

    Attributes:
        id: Identifiant opaque (bps_...).
        url: URL du portail.
        customer_id: Client concerne.
        return_url: URL de retour apres gestion de l'abonnement.
    """

    id: str
    url: str
    customer_id: str
    return_url: str
