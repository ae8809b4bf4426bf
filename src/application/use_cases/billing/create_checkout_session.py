"""
CreateCheckoutSessionUseCase - Demarrer un paiement d'abonnement.

Responsabilite unique:
----------------------
Resoudre le prix d'une lookup key puis creer une session checkout
en mode abonnement avec les parametres fixes de l'application.

Dependances:
------------
- PaymentGateway: Catalogue de prix et creation de session

Erreurs:
--------
- PriceNotFoundError: lookup key vide, sans prix correspondant
  ou associee a un prix non recurrent
- PaymentProviderError: echec de creation chez le fournisseur
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from src.domain.entities.checkout_session import CheckoutOptions, CheckoutSession
from src.domain.entities.price import Price
from src.domain.exceptions import PriceNotFoundError
from src.domain.ports.payment_gateway import PaymentGateway


@dataclass
class CheckoutSessionResult:
    """
    Resultat de creation d'une session checkout.

    Attributes:
        session: Session creee chez le fournisseur.
        price: Prix utilise.
        success_url: URL de succes avec l'ID de session substitue.
    """
    session: CheckoutSession
    price: Price
    success_url: str

    @property
    def redirect_url(self) -> Optional[str]:
        """URL hebergee vers laquelle rediriger le navigateur."""
        return self.session.url


class CreateCheckoutSessionUseCase:
    """
    Use case de creation de session checkout.

    Example:
        >>> use_case = CreateCheckoutSessionUseCase(gateway, options)
        >>> result = use_case.execute("standard_monthly")
        >>> result.redirect_url
        'https://checkout.stripe.com/c/pay/cs_test_...'
    """

    def __init__(
        self,
        gateway: PaymentGateway,
        options: CheckoutOptions,
        logger: Optional[structlog.stdlib.BoundLogger] = None,
    ):
        """
        Initialise le use case.

        Args:
            gateway: Adapter du fournisseur de paiement.
            options: Parametres fixes de la session.
            logger: Logger a utiliser (defaut: logger du module).
        """
        self._gateway = gateway
        self._options = options
        self._logger = logger or structlog.get_logger(__name__)

    def execute(self, lookup_key: str) -> CheckoutSessionResult:
        """
        Cree la session checkout.

        Args:
            lookup_key: Lookup key du prix (champ de formulaire).

        Returns:
            CheckoutSessionResult avec l'URL de redirection.

        Raises:
            PriceNotFoundError: Si aucun prix ne correspond.
            PaymentProviderError: Si le fournisseur echoue.
        """
        lookup_key = (lookup_key or "").strip()
        if not lookup_key:
            self._logger.warning("price_lookup_key_missing")
            raise PriceNotFoundError(lookup_key)

        price = self._gateway.find_price_by_lookup_key(lookup_key)
        if price is None:
            self._logger.warning(
                "price_not_found",
                lookup_key=lookup_key,
                hint="Creer un prix avec cette lookup key dans le dashboard Stripe",
            )
            raise PriceNotFoundError(lookup_key)

        # Le mode subscription refuse les prix ponctuels
        if not price.recurring:
            self._logger.warning("price_not_recurring", lookup_key=lookup_key, price_id=price.id)
            raise PriceNotFoundError(lookup_key)

        session =self._gateway.create_checkout_session(price, self._options)
        success_url = session.resolve_success_url(self._options.success_url)

        self._logger.info(
            "checkout_session_created",
            session_id=session.id,
            price_id=price.id,
            success_url=success_url,
        )

        return CheckoutSessionResult(
            session=session,
            price=price,
            success_url=success_url,
        )
