"""
Exceptions metier du domaine.

Ces exceptions representent les echecs du parcours de facturation
(prix introuvable, erreur du fournisseur, webhook invalide) et sont
independantes du framework HTTP. La couche presentation les traduit
en codes de statut.
"""

from typing import Any


class DomainException(Exception):
    """Exception de base pour toutes les erreurs du domaine."""

    def __init__(self, message: str, code: str | None = None) -> None:
        """
        Initialise une exception du domaine.

        Args:
            message: Message d'erreur descriptif.
            code: Code d'erreur optionnel pour identification programmatique.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class PriceNotFoundError(DomainException):
    """Leve quand aucun prix ne correspond a la lookup key."""

    def __init__(self, lookup_key: Any) -> None:
        super().__init__(
            f"Aucun prix pour la lookup key '{lookup_key}'. "
            "Ajouter un prix avec cette lookup key dans le catalogue Stripe.",
            code="PRICE_NOT_FOUND"
        )
        self.lookup_key = lookup_key


class PaymentProviderError(DomainException):
    """
    Leve quand un appel au fournisseur de paiement echoue.

    Le detail est destine aux logs serveur uniquement, jamais au client.
    """

    def __init__(self, operation: str, detail: str | None = None) -> None:
        message = f"Echec de l'operation '{operation}' chez le fournisseur."
        if detail:
            message += f" Detail: {detail}"
        super().__init__(message, code="PAYMENT_PROVIDER_ERROR")
        self.operation = operation
        self.detail = detail


class SessionOwnershipError(DomainException):
    """Leve quand l'appelant ne prouve pas qu'il possede la session checkout."""

    def __init__(self, session_id: Any) -> None:
        super().__init__(
            f"Session checkout '{session_id}' non rattachee a l'appelant.",
            code="SESSION_OWNERSHIP"
        )
        self.session_id = session_id


class InvalidWebhookSignatureError(DomainException):
    """Leve quand la signature Stripe-Signature ne correspond pas au payload."""

    def __init__(self, detail: str | None = None) -> None:
        message = "Signature webhook invalide."
        if detail:
            message += f" Raison: {detail}"
        super().__init__(message, code="INVALID_WEBHOOK_SIGNATURE")
        self.detail = detail


class InvalidWebhookPayloadError(DomainException):
    """Leve quand le corps d'un webhook signe ne peut pas etre decode."""

    def __init__(self, detail: str | None = None) -> None:
        message = "Payload webhook invalide."
        if detail:
            message += f" Raison: {detail}"
        super().__init__(message, code="INVALID_WEBHOOK_PAYLOAD")
        self.detail = detail


class WebhookPayloadTooLargeError(DomainException):
    """Leve quand le corps d'un webhook depasse la taille maximale."""

    def __init__(self, limit: int) -> None:
        super().__init__(
            f"Corps de webhook superieur a {limit} octets.",
            code="WEBHOOK_PAYLOAD_TOO_LARGE"
        )
        self.limit = limit
