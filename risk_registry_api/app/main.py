"""
Main entrypoint for the Risk Registry API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds
and configures the app, which is then instantiated at module
import time as ``app``.  Importing the app here makes it easy to
run with uvicorn or another ASGI server, e.g.::

    uvicorn risk_registry_api.app.main:app

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import install_exception_handlers
from .core.logging_config import setup_logging
from .core.store import RiskStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("Server starting", extra={"port": settings.port})
    yield
    logger.info("Server shutting down...")
    logger.info("Server exited", extra={"risks_in_memory": len(app.state.store)})


def create_app(store: Optional[RiskStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    This function performs one-time setup tasks such as configuring
    logging, creating the record store and including versioned API
    routers.  It returns a fully configured FastAPI instance ready to
    be served.

    Parameters
    ----------
    store : Optional[RiskStore]
        Store the handlers should use.  A new, empty store is created
        when omitted; tests pass their own to inspect it directly.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the rest of the
    # setup can safely log messages.
    setup_logging(settings.log_level, settings.log_format)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.store = store if store is not None else RiskStore()

    install_exception_handlers(app)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "Request handled",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - start) * 1000, 3),
            },
        )
        return response

    app.include_router(v1_router, prefix="/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
