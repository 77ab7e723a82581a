"""Command-line entrypoint that serves the API with uvicorn.

Usage:
    workshop-api

Or with uvicorn directly:
    uvicorn workshop_api.api.app:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import logging

import uvicorn

from workshop_api.api.api_config import get_api_config
from workshop_api.common.logging import configure_logging
from workshop_api.common.settings import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging()
    settings = get_settings()
    config = get_api_config()

    logger.info(
        "Starting %s (%s) on http://%s:%s",
        config.api_name,
        config.environment,
        config.host,
        config.port,
    )
    uvicorn.run(
        "workshop_api.api.app:app",
        host=config.host,
        port=config.port,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
