"""
Logging Config - Configuration structlog.

Responsabilite unique:
----------------------
Configurer structlog pour tout le service (routes, use cases, adapter).

Modes:
------
- Development: Pretty print, couleurs
- Production: JSON, timestamp ISO

Usage:
------
    from src.infrastructure.logging import configure_logging, get_logger

    configure_logging(json_logs=True, log_level="INFO")
    logger = get_logger(__name__)
    logger.info("checkout_session_created", session_id="cs_123")
"""

import logging
import sys
import time
from typing import Optional

import structlog


# Loggers tiers trop bavards au niveau INFO
QUIET_LOGGERS = ("stripe", "uvicorn.access")


def configure_logging(
    json_logs: bool = False,
    log_level: str = "INFO",
) -> None:
    """
    Configure le logging global.

    Args:
        json_logs: True pour JSON (production), False pour pretty.
        log_level: Niveau minimum (DEBUG, INFO, WARNING, ERROR).
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Retourne un logger structure.

    Args:
        name: Nom du logger (module name).

    Returns:
        Logger structlog.
    """
    return structlog.get_logger(name)


class RequestLogger:
    """
    Middleware de logging pour FastAPI.

    Lie le contexte de la requete (request_id, methode, chemin, IP)
    a tous les logs emis pendant son traitement, puis log la duree.
    """

    def __init__(self, logger: Optional[structlog.stdlib.BoundLogger] = None):
        """
        Initialise le middleware.

        Args:
            logger: Logger a utiliser (defaut: cree un nouveau).
        """
        self._logger = logger or get_logger("api.requests")

    async def __call__(self, request, call_next):
        """Log la requete et la reponse."""
        start_time = time.perf_counter()

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request.headers.get("x-request-id", "-"),
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            self._logger.error(
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=_elapsed_ms(start_time),
            )
            raise

        self._logger.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=_elapsed_ms(start_time),
        )
        return response


def _elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 2)
