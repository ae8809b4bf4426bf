"""
Port PaymentGateway - Interface vers le fournisseur de paiement.

Ce port definit le contrat que doit implementer l'adapter Stripe.
Toute la logique substantielle (prix, sessions, signature) est
deleguee au fournisseur: le port ne fait que la nommer.

Responsabilite unique:
----------------------
Exposer les appels au fournisseur necessaires aux use cases billing.

Usage:
------
    class CreateCheckoutSessionUseCase:
        def __init__(self, gateway: PaymentGateway, options: CheckoutOptions):
            self._gateway = gateway

        def execute(self, lookup_key: str) -> CheckoutSession:
            price = self._gateway.find_price_by_lookup_key(lookup_key)
            ...
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.checkout_session import CheckoutOptions, CheckoutSession
from src.domain.entities.portal_session import PortalSession
from src.domain.entities.price import Price
from src.domain.entities.webhook_event import WebhookEvent


class PaymentGateway(ABC):
    """
    Interface vers le fournisseur de paiement.

    Implementee par StripeGateway. Les erreurs du fournisseur sont
    levees sous forme de PaymentProviderError.
    """

    @abstractmethod
    def find_price_by_lookup_key(self, lookup_key: str) -> Optional[Price]:
        """
        Cherche un prix par lookup key.

        Args:
            lookup_key: Cle fournie par l'appelant.

        Returns:
            Price si trouve, None sinon.
        """
        ...

    @abstractmethod
    def create_checkout_session(
        self,
        price: Price,
        options: CheckoutOptions,
    ) -> CheckoutSession:
        """
        Cree une session checkout en mode abonnement.

        Args:
            price: Prix resolu.
            options: Parametres fixes (URLs, taxe, ancrage).

        Returns:
            Session creee, avec son URL de redirection.
        """
        ...

    @abstractmethod
    def retrieve_checkout_session(self, session_id: str) -> CheckoutSession:
        """
        Recupere une session checkout existante.

        Args:
            session_id: ID de la session (cs_...).

        Returns:
            Session avec son customer_id.
        """
        ...

    @abstractmethod
    def create_portal_session(
        self,
        customer_id: str,
        return_url: str,
    ) -> PortalSession:
        """
        Cree une session du portail client.

        Args:
            customer_id: Client Stripe.
            return_url: URL de retour.

        Returns:
            Session portail avec son URL.
        """
        ...

    @abstractmethod
    def construct_event(self, payload: bytes, signature: str) -> WebhookEvent:
        """
        Verifie la signature d'un webhook et decode son enveloppe.

        Args:
            payload: Corps brut de la requete.
            signature: Header Stripe-Signature.

        Returns:
            WebhookEvent verifie.

        Raises:
            InvalidWebhookSignatureError: Si la signature est invalide.
            InvalidWebhookPayloadError: Si le corps n'est pas un event.
        """
        ...
