"""Entry point for the Items API.

Launches the FastAPI application with Uvicorn.  Host, port and log
level are read from the environment through ``Settings`` (``API_HOST``,
``API_PORT``, ``LOG_LEVEL``); see ``items_api/app/core/config.py`` for
the full list of supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from items_api.app.core.config import settings
from items_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        # Keep the handlers installed by setup_logging.
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving on %s:%s", settings.api_host, settings.api_port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
