"""
Main entrypoint for the Payment Service API.

This module assembles the FastAPI application, sets up logging, wires
the service configuration and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn or
another ASGI server, e.g.::

    uvicorn payment_service.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import settings
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .schemas.service_config import ServiceConfiguration


logger = logging.getLogger(__name__)


def create_app(
    service_config: Optional[ServiceConfiguration] = None,
    wire_config: bool = True,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    service_config : Optional[ServiceConfiguration]
        Configuration shared by all requests.  When omitted it is
        built from the environment via ``Settings``.
    wire_config : bool
        When ``False`` no configuration is attached at all, which is
        how the endpoints see a service whose configuration is not
        available yet.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the steps below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    if wire_config and service_config is None:
        service_config = ServiceConfiguration.from_settings(settings)
    app.state.service_config = service_config if wire_config else None
    if app.state.service_config is None:
        logger.warning("Service configuration is not wired; diagnostic endpoints will answer 404")
    else:
        logger.info(
            "Service configuration wired for %s (api path %s)",
            app.state.service_config.service_name,
            app.state.service_config.service_api_path,
        )

    register_error_handlers(app)

    # Mount versioned routes under /api/v1.
    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
