"""
Main entrypoint for the Customer API.

This module assembles the FastAPI application, sets up logging and
includes the versioned router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``::

    uvicorn customer_api.app.main:app

The customer store is created in the application lifespan, before
the server accepts connections.  A snapshot file that exists but
cannot be loaded aborts startup.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.middleware import BodySizeLimitMiddleware
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import SnapshotError
from .core.logging_config import setup_logging
from .core.store import CustomerStore

logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 Bad Request."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module‑level settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            app.state.store = CustomerStore.from_snapshot(settings.data_file)
        except SnapshotError as exc:
            logger.critical("Refusing to start: %s", exc)
            raise
        yield
        # The store is memory only; dropping it discards all changes.
        del app.state.store

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)

    # The customer routes live at the root (``/customers``) rather than
    # under a version prefix.
    app.include_router(v1_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
