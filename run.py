"""Entry point for the Risk Registry API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run, or via the
``risk-registry-api`` console script.

Configuration comes from environment variables (see
``risk_registry_api.app.core.config``); ``APP_PORT`` selects the
listening port and defaults to ``8080``.

Uvicorn handles SIGINT and SIGTERM: it stops accepting connections,
gives in-flight requests ``SHUTDOWN_GRACE_SECONDS`` to finish and then
closes the listening socket.

Usage:
    python run.py
"""
import asyncio
import logging
import time

from uvicorn import Config, Server

from risk_registry_api.app.core.config import settings
from risk_registry_api.app.core.logging_config import setup_logging

logger = logging.getLogger("risk_registry_api.run")


class GracefulServer(Server):
    """Uvicorn server that records whether shutdown ran out of time.

    Uvicorn cancels whatever requests are still running once
    ``timeout_graceful_shutdown`` has passed and then returns normally.
    ``forced_shutdown`` is set when the shutdown took at least that long.
    """

    forced_shutdown = False

    async def shutdown(self, sockets=None) -> None:
        start = time.monotonic()
        await super().shutdown(sockets=sockets)
        grace = self.config.timeout_graceful_shutdown
        if grace and time.monotonic() - start >= grace:
            self.forced_shutdown = True


async def run_api() -> None:
    """Serve the API until the process is asked to stop.

    Raises ``SystemExit(1)`` when the server never came up, e.g.
    because the port could not be bound, or when in-flight requests had
    to be cancelled because they outlived the shutdown grace period.
    """
    config = Config(
        app="risk_registry_api.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,
        access_log=False,
        timeout_graceful_shutdown=settings.shutdown_grace_seconds,
    )
    server = GracefulServer(config)
    await server.serve()
    if not server.started:
        logger.critical("Server failed to start", extra={"port": settings.port})
        raise SystemExit(1)
    if server.forced_shutdown:
        logger.critical(
            "Server forced to shutdown",
            extra={"grace_seconds": config.timeout_graceful_shutdown},
        )
        raise SystemExit(1)


def main() -> None:
    setup_logging(settings.log_level, settings.log_format)
    try:
        asyncio.run(run_api())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
