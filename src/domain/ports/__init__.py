"""
Ports du domaine (Hexagonal Architecture).

Les Ports sont des interfaces qui definissent les contrats
entre le domaine et le monde exterieur.

Ports disponibles:
------------------
- PaymentGateway: Appels au fournisseur de paiement (Stripe)

Pattern:
--------
Les Ports sont des abstractions (ABC) implementees
par des Adapters dans la couche Infrastructure.

Example:
    # Port (domain)
    class PaymentGateway(ABC):
        @abstractmethod
        def find_price_by_lookup_key(self, lookup_key: str) -> Optional[Price]: ...

    # Adapter (infrastructure)
    class StripeGateway(PaymentGateway):
        def find_price_by_lookup_key(self, lookup_key: str) -> Optional[Price]:
            prices = stripe.Price.list(lookup_keys=[lookup_key], api_key=self._api_key)
            ...
"""

from src.domain.ports.payment_gateway import PaymentGateway

__all__ = [
    "PaymentGateway",
]
