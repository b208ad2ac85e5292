"""
Main entrypoint for the User Directory API.

This module assembles the FastAPI application, sets up logging, wires
the repository and service together and includes versioned routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``.  Importing the app
here makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn user_directory_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .core.db import get_database_path, init_db
from .repositories.user_repository import UserRepository
from .services.user_service import UserService


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to build the app from.  Defaults to the
        module-level settings read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the wiring below
    # can safely log messages.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings

    repository = UserRepository(settings.database_url)
    app.state.user_service = UserService(repository)

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Create or check the schema before the first request is served.
        version = init_db(settings.database_url, settings.schema_mode)
        logger.info(
            "Database %s ready at schema version %s",
            get_database_path(settings.database_url),
            version,
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
