"""
CreatePortalSessionUseCase - Ouvrir le portail client Stripe.

Responsabilite unique:
----------------------
Resoudre une session checkout en client, puis creer une session
du portail de facturation pour ce client.

Controle d'appartenance:
------------------------
L'appelant fournit un session_id. Sans controle, n'importe qui
connaissant un ID pourrait gerer l'abonnement d'un autre client.
Le use case recoit donc l'ID de session prouve par l'appelant
(cookie signe pose au checkout) et refuse s'il ne correspond pas.

Dependances:
------------
- PaymentGateway: Lecture de session et creation du portail
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from src.domain.entities.portal_session import PortalSession
from src.domain.exceptions import PaymentProviderError, SessionOwnershipError
from src.domain.ports.payment_gateway import PaymentGateway


@dataclass
class PortalSessionRequest:
    """
    Requete d'ouverture du portail.

    Attributes:
        session_id: ID de session checkout (champ de formulaire).
        owned_session_id: ID de session prouve par l'appelant (None si absent).
    """
    session_id: str
    owned_session_id: Optional[str] = None


class CreatePortalSessionUseCase:
    """
    Use case de creation de session portail.

    Example:
        >>> use_case = CreatePortalSessionUseCase(gateway, "https://app/")
        >>> portal = use_case.execute(PortalSessionRequest("cs_1", "cs_1"))
        >>> portal.url
        'https://billing.stripe.com/p/session/...'
    """

    def __init__(
        self,
        gateway: PaymentGateway,
        return_url: str,
        require_ownership: bool = True,
        logger: Optional[structlog.stdlib.BoundLogger] = None,
    ):
        """
        Initialise le use case.

        Args:
            gateway: Adapter du fournisseur de paiement.
            return_url: URL de retour du portail.
            require_ownership: Exige que l'appelant possede la session.
            logger: Logger a utiliser (defaut: logger du module).
        """
        self._gateway = gateway
        self._return_url = return_url
        self._require_ownership = require_ownership
        self._logger = logger or structlog.get_logger(__name__)

    def execute(self, request: PortalSessionRequest) -> PortalSession:
        """
        Cree la session portail.

        Args:
            request: Requete avec session_id et preuve d'appartenance.

        Returns:
            PortalSession avec son URL.

        Raises:
            SessionOwnershipError: Si l'appartenance n'est pas prouvee.
            PaymentProviderError: Si la lecture ou la creation echoue.
        """
        self._check_ownership(request)

        session = self._gateway.retrieve_checkout_session(request.session_id)
        if not session.customer_id:
            raise PaymentProviderError(
                "checkout.Session.retrieve",
                f"session {session.id} sans client",
            )

        portal = self._gateway.create_portal_session(
            customer_id=session.customer_id,
            return_url=self._return_url,
        )

        self._logger.debug(
            "portal_session_created",
            session_id=request.session_id,
            customer_id=session.customer_id,
            portal_url=portal.url,
        )
        return portal

    def _check_ownership(self, request: PortalSessionRequest) -> None:
        """Compare l'ID demande a l'ID prouve par l'appelant."""
        if not self._require_ownership:
            self._logger.warning(
                "portal_ownership_not_enforced",
                session_id=request.session_id,
            )
            return

        if not request.owned_session_id or request.owned_session_id != request.session_id:
            self._logger.warning(
                "portal_ownership_rejected",
                session_id=request.session_id,
                has_proof=bool(request.owned_session_id),
            )
            raise SessionOwnershipError(request.session_id)
