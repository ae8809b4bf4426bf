"""
Entite CheckoutSession - Session de paiement hebergee par Stripe.

Une session checkout fournit l'URL vers laquelle le navigateur
est redirige, et reference le client cree lors du paiement.

Placeholder:
------------
Les URLs de succes contiennent {CHECKOUT_SESSION_ID}, remplace
par Stripe lors de la redirection. resolve_success_url() fait la
meme substitution cote serveur pour les logs et les tests.
"""

from dataclasses import dataclass
from typing import Optional


SESSION_ID_PLACEHOLDER = "{CHECKOUT_SESSION_ID}"


@dataclass(frozen=True)
class CheckoutSession:
    """
    Session checkout Stripe.

    Attributes:
        id: Identifiant opaque (cs_...).
        url: URL de paiement hebergee.
        customer_id: Client associe (None tant que non paye).
        subscription_id: Abonnement cree (None tant que non paye).
    """

    id: str
    url: Optional[str] = None
    customer_id: Optional[str] = None
    subscription_id: Optional[str] = None

    def resolve_success_url(self, template: str) -> str:
        """Remplace le placeholder de session par l'ID de cette session."""
        return template.replace(SESSION_ID_PLACEHOLDER, self.id)


@dataclass(frozen=True)
class CheckoutOptions:
    """
    Parametres fixes d'une session checkout en mode abonnement.

    Attributes:
        success_url: URL apres paiement (avec placeholder de session).
        cancel_url: URL si annulation.
        billing_cycle_anchor: Timestamp d'ancrage (0 = non envoye).
        automatic_tax: Active le calcul automatique des taxes.
        quantity: Quantite de la ligne (toujours 1).
    """

    success_url: str
    cancel_url: str
    billing_cycle_anchor: int = 0
    automatic_tax: bool = True
    quantity: int = 1
