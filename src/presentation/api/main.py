"""
Main - Factory FastAPI.

Responsabilite unique:
----------------------
Creer et configurer l'application FastAPI a partir d'une APISettings.

Usage:
------
    # Development
    uvicorn src.presentation.api.main:app --reload

    # Production
    ENVIRONMENT=production uvicorn src.presentation.api.main:app --host 0.0.0.0 --port 8000

    # Tests
    app = create_app(APISettings(stripe_secret_key="sk_test_x", ...))
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from src.infrastructure.logging import RequestLogger, configure_logging, get_logger
from src.presentation.api.billing.router import router as billing_router
from src.presentation.api.config import APISettings, get_settings
from src.presentation.api.pages.router import router as pages_router


def create_app(settings: Optional[APISettings] = None) -> FastAPI:
    """
    Factory pour creer l'application FastAPI.

    Args:
        settings: Configuration explicite (defaut: variables d'env).

    Returns:
        Application FastAPI configuree.
    """
    settings = settings or get_settings()

    configure_logging(json_logs=settings.is_production, log_level=settings.log_level)
    logger = get_logger("api")

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Tous les handlers recoivent cette instance via Depends(get_settings)
    app.dependency_overrides[get_settings] = lambda: settings

    app.add_middleware(BaseHTTPMiddleware, dispatch=RequestLogger())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if not settings.stripe_configured:
        logger.warning(
            "stripe_not_configured",
            has_secret_key=bool(settings.stripe_secret_key),
            has_webhook_secret=bool(settings.stripe_webhook_secret),
        )

    if settings.portal_require_ownership and not settings.session_token_configured:
        logger.warning(
            "session_token_not_configured",
            effect="portal requests are refused (403)",
        )

    logger.info("app_started", version=settings.api_version, environment=settings.environment)

    @app.get("/health", tags=["Health"])
    def health():
        """Endpoint de sante."""
        return {"status": "healthy"}

    app.include_router(pages_router)
    app.include_router(billing_router)

    return app


# Instance pour uvicorn
app = create_app()
