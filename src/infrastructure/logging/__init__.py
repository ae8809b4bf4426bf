"""
Logging Infrastructure - Logging structure avec structlog.

Responsabilite:
---------------
Fournir un logging JSON structure pour production, lisible en dev.

Usage:
------
    from src.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("webhook_event_received", event_type="customer.subscription.created")
"""

from src.infrastructure.logging.config import RequestLogger, configure_logging, get_logger

__all__ = ["RequestLogger", "configure_logging", "get_logger"]
