"""Entry point for the Customer API.

Starts the FastAPI application under Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (see
``customer_api.app.core.config``).  The customer snapshot is loaded
during application startup, before the listening socket is bound; if
the snapshot is corrupt the process exits with a non‑zero status.

Usage:
    python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from customer_api.app.core.config import settings
from customer_api.app.main import app


async def run_api() -> bool:
    """Serve the API until shutdown.  Returns False if startup failed."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Logging is configured by create_app; see core.logging_config.
        log_config=None,
        lifespan="on",
    )
    server = Server(config)
    await server.serve()
    return server.started


def main() -> int:
    try:
        started = asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        return 0
    if not started:
        logging.getLogger(__name__).error("Customer API failed to start")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
