"""
Main entrypoint for the public e-services portal API.

This module assembles the FastAPI application, sets up logging, loads
the in-memory data store and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn egov_portal_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import DataStore, build_store


def create_app(store: Optional[DataStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    This function performs one-time setup tasks such as configuring
    logging, loading the dataset and including versioned API routers.
    It returns a fully configured FastAPI instance ready to be served.

    Parameters
    ----------
    store : Optional[DataStore]
        Store to serve data from.  When omitted, one is loaded from
        ``settings.data_dir``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that loading the
    # dataset below is logged.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store if store is not None else build_store()

    register_exception_handlers(app)

    # Portal pages call the unversioned /api prefix, so v1 is mounted
    # there.  A future v2 would get its own prefix.
    app.include_router(v1_router, prefix="/api")

    logging.getLogger(__name__).info("%s %s ready", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
