"""
SessionTokenService - Preuve d'appartenance d'une session checkout.

Responsabilite unique:
----------------------
Signer et verifier le token JWT pose en cookie lors du checkout.
Le sub du token est l'ID de la session checkout creee: seul le
navigateur qui a lance le paiement peut ouvrir le portail client.
Sans cle de signature, aucun token n'est emis ni accepte.

Usage:
------
    service = SessionTokenService(settings)
    token = service.issue("cs_test_123")
    service.verify(token)  # "cs_test_123"
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from jwt.exceptions import PyJWTError

from src.presentation.api.config import APISettings


TOKEN_TYPE = "checkout_session"


class SessionTokenService:
    """
    Service de signature du cookie de session checkout.
    """

    def __init__(self, settings: APISettings):
        """
        Initialise le service.

        Args:
            settings: Configuration API.
        """
        self._secret = settings.session_token_secret
        self._algorithm = settings.session_token_algorithm
        self._expire_days = settings.session_token_expire_days

    @property
    def configured(self) -> bool:
        """True si une cle de signature est disponible."""
        return bool(self._secret)

    @property
    def max_age(self) -> int:
        """Duree de vie du cookie, en secondes."""
        return self._expire_days * 24 * 3600

    def issue(self, session_id: str) -> Optional[str]:
        """
        Signe un token pour une session checkout.

        Args:
            session_id: ID de la session creee.

        Returns:
            Token JWT, None si aucune cle n'est configuree.
        """
        if not self.configured:
            return None

        now = datetime.now(timezone.utc)
        return jwt.encode(
            {
                "sub": session_id,
                "type": TOKEN_TYPE,
                "iat": now,
                "exp": now + timedelta(days=self._expire_days),
            },
            self._secret,
            algorithm=self._algorithm,
        )

    def verify(self, token: Optional[str]) -> Optional[str]:
        """
        Verifie un token.

        Args:
            token: Valeur du cookie (None si absent).

        Returns:
            ID de session si le token est valide, None sinon.
        """
        if not token or not self.configured:
            return None

        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except PyJWTError:
            return None

        if payload.get("type") != TOKEN_TYPE:
            return None
        return payload.get("sub")
