"""
Configuration API - Settings Pydantic.

Responsabilite unique:
----------------------
Charger et valider la configuration depuis les variables d'env.
Une instance de APISettings est passee explicitement aux handlers
via create_app(settings): aucun secret n'est code en dur.

Variables requises:
-------------------
- STRIPE_SECRET_KEY: Cle secrete Stripe (sk_...)
- STRIPE_WEBHOOK_SECRET: Secret de l'endpoint webhook (whsec_...)
- SESSION_TOKEN_SECRET: Cle de signature du cookie de session checkout
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.entities.checkout_session import SESSION_ID_PLACEHOLDER, CheckoutOptions


class APISettings(BaseSettings):
    """
    Configuration du service de facturation.

    Chargee depuis les variables d'environnement.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API
    api_title: str = "Subscription Checkout API"
    api_version: str = "1.0.0"
    environment: str = "development"
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["*"]

    # Stripe
    stripe_secret_key: str = ""
    stripe_webhook_secret: str = ""
    stripe_webhook_tolerance: int = 300
    webhook_max_body_bytes: int = 65536

    # Checkout
    checkout_lookup_key: str = "standard_monthly"
    checkout_success_url: str = (
        f"http://localhost:8000/success.html?session_id={SESSION_ID_PLACEHOLDER}"
    )
    checkout_cancel_url: str = "http://localhost:8000/cancel.html"
    checkout_billing_cycle_anchor: int = 1672531200
    checkout_automatic_tax: bool = True

    # Portail
    portal_return_url: str = "http://localhost:8000/"
    portal_require_ownership: bool = True

    # Cookie de session checkout
    session_token_secret: str = ""
    session_token_algorithm: str = "HS256"
    session_token_expire_days: int = 30
    session_cookie_name: str = "checkout_session"
    session_cookie_secure: bool = True

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def stripe_configured(self) -> bool:
        """True si les deux secrets Stripe sont renseignes."""
        return bool(self.stripe_secret_key and self.stripe_webhook_secret)

    @property
    def session_token_configured(self) -> bool:
        """True si la cle de signature du cookie est renseignee."""
        return bool(self.session_token_secret)

    def checkout_options(self) -> CheckoutOptions:
        """Parametres fixes des sessions checkout."""
        return CheckoutOptions(
            success_url=self.checkout_success_url,
            cancel_url=self.checkout_cancel_url,
            billing_cycle_anchor=self.checkout_billing_cycle_anchor,
            automatic_tax=self.checkout_automatic_tax,
        )


@lru_cache
def get_settings() -> APISettings:
    """Retourne la configuration (cached)."""
    return APISettings()
