"""
Entite Subscription - Abonnement decode depuis un webhook.

Le payload data.object d'un event Stripe est decode en Subscription
uniquement pour produire un message de log. Aucun etat n'est persiste.

Decodage:
---------
- Le payload doit etre un objet JSON (dict)
- Les champs absents prennent une valeur vide (comme un summary
  d'entitlements, qui n'a pas d'id propre)
- Un champ present mais du mauvais type rend le payload invalide
"""

from dataclasses import dataclass
from typing import Any, Optional

from src.domain.exceptions import InvalidWebhookPayloadError


@dataclass(frozen=True)
class Subscription:
    """
    Abonnement Stripe (vue minimale).

    Attributes:
        id: Identifiant opaque (sub_...), vide si absent du payload.
        status: Statut Stripe (active, trialing, canceled...).
        customer_id: Client proprietaire.
        cancel_at_period_end: True si l'annulation est programmee.
        trial_end: Timestamp de fin d'essai.
    """

    id: str
    status: Optional[str] = None
    customer_id: Optional[str] = None
    cancel_at_period_end: bool = False
    trial_end: Optional[int] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "Subscription":
        """
        Decode un data.object Stripe.

        Args:
            payload: Objet JSON decode.

        Returns:
            Subscription.

        Raises:
            InvalidWebhookPayloadError: Si le payload n'est pas decodable.
        """
        if not isinstance(payload, dict):
            raise InvalidWebhookPayloadError("data.object n'est pas un objet")

        sub_id = payload.get("id") or ""
        status = payload.get("status")
        if not isinstance(sub_id, str):
            raise InvalidWebhookPayloadError("id doit etre une chaine")
        if status is not None and not isinstance(status, str):
            raise InvalidWebhookPayloadError("status doit etre une chaine")

        trial_end = payload.get("trial_end")
        if trial_end is not None and not isinstance(trial_end, int):
            raise InvalidWebhookPayloadError("trial_end doit etre un entier")

        return cls(
            id=sub_id,
            status=status,
            customer_id=_customer_id(payload.get("customer")),
            cancel_at_period_end=bool(payload.get("cancel_at_period_end", False)),
            trial_end=trial_end,
        )


def _customer_id(value: Any) -> Optional[str]:
    """Le champ customer est un ID ou un objet expanse."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, dict) and isinstance(value.get("id"), str):
        return value["id"]
    raise InvalidWebhookPayloadError("customer invalide")
