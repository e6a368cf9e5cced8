"""Logfire cloud observability initialization and instrumentation."""

import logging

import logfire
from fastapi import FastAPI

from goldarena import __version__
from goldarena.config import Settings

logger = logging.getLogger(__name__)


def initialize_logfire(settings: Settings, app: FastAPI | None = None) -> None:
    """
    Initialize Logfire once at startup.

    Configures cloud tracking and instruments:
    - the dashboard API (when an app is given)
    - Python logging (bridges to Logfire)

    Args:
        settings: Application settings containing Logfire token
        app: Optional FastAPI app to instrument

    Returns:
        None. Logs success or warning messages.
    """
    if not settings.logfire_token:
        logger.warning("Logfire token not set - observability disabled")
        return

    try:
        logfire.configure(
            token=settings.logfire_token,
            service_name="goldarena",
            service_version=__version__,
        )

        if app is not None:
            logfire.instrument_fastapi(app)

        root_logger = logging.getLogger()
        root_logger.addHandler(logfire.LogfireLoggingHandler())

        logger.info("✓ Logfire cloud tracking initialized")

    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")
