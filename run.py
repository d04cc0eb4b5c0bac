"""Entry point for the e-government portal API.

Starts the FastAPI application with uvicorn.  Host, port and log level
come from the environment (``HOST``, ``PORT``, ``LOG_LEVEL``); the
defaults serve on ``0.0.0.0:3000``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from egov_portal_api.app.core.config import settings
from egov_portal_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Portal API listening on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
