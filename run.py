"""Entry point for the Payment Service.

This script launches the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example inside a
container where you only specify a single Python file to run.

Host, port and log level are taken from the same environment variables
the application reads (``SERVER_HOST``, ``SERVER_PORT``, ``LOG_LEVEL``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from payment_service.app.core.config import settings
from payment_service.app.core.logging_config import resolve_level
from payment_service.app.main import app


async def run_api() -> None:
    """Serve the API until the process is interrupted."""
    # Uvicorn has no TRACE level of its own; it takes the numeric value.
    config = Config(
        app=app,
        host=settings.server_host,
        port=settings.server_port,
        reload=False,
        log_level=resolve_level(settings.log_level),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Payment Service stopped")
