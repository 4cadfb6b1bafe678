"""
Main entrypoint for the Student Registry API.

This module assembles the FastAPI application, sets up logging and
includes the routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn student_registry_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .services.storage_service import StorageService


def create_app(
    storage: Optional[StorageService] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    storage : Optional[StorageService]
        Store to serve.  When omitted a new store is created with the
        configured course capacity and, if ``seed_on_startup`` is set,
        loaded with the seed dataset.  An injected store is used as is.
    app_settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    cfg = app_settings or settings
    setup_logging(cfg.log_level, cfg.log_file)
    logger = logging.getLogger(__name__)

    if storage is None:
        storage = StorageService(course_capacity=cfg.course_capacity)
        if cfg.seed_on_startup:
            storage.seed()

    app = FastAPI(title=cfg.project_name, version=cfg.api_version, debug=cfg.debug)
    app.state.storage = storage
    app.include_router(router)

    logger.info("%s %s ready", cfg.project_name, cfg.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
