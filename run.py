"""Serve the middleware and dependency injection example over HTTP.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables via ``Settings``.  Defaults are ``127.0.0.1`` and ``8000``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from guide_examples.app.core.config import settings
from guide_examples.app.main import app


async def main() -> None:
    """Start the application using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving on http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
