"""
Entite WebhookEvent - Enveloppe d'un event Stripe verifie.
"""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class WebhookEvent:
    """
    Event Stripe dont la signature a ete verifiee.

    Attributes:
        id: Identifiant de l'event (evt_...).
        type: Type d'event (customer.subscription.updated...).
        data_object: Payload brut data.object.
        livemode: True si l'event vient du mode live.
    """

    id: str
    type: str
    data_object: Any = field(default_factory=dict)
    livemode: bool = False

    @property
    def summary(self) -> Dict[str, Any]:
        """Contexte de log de l'event."""
        return {"event_id": self.id, "event_type": self.type, "livemode": self.livemode}
