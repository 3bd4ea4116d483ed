"""
Main entrypoint for the Items API.

This module assembles the FastAPI application: it sets up logging,
wires the data, service and controller layers together, registers the
exception handlers and includes the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app`` so that it can be run
with uvicorn, e.g.::

    uvicorn items_api.app.main:app --reload

Each call to ``create_app`` builds its own repository, so separate
applications (for example in tests) never share items.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .controllers.item_controller import ItemController
from .core.config import Settings, settings as default_settings
from .core.exceptions import register_exception_handlers
from .core.logging_config import setup_logging
from .repositories.base import ItemRepository
from .repositories.memory import SEED_ITEMS, InMemoryItemRepository
from .services.item_service import ItemService


def build_repository(settings: Settings) -> ItemRepository:
    """Create the default in-memory repository described by ``settings``."""
    seed = SEED_ITEMS if settings.seed_sample_items else ()
    return InMemoryItemRepository(seed=seed, raise_on_empty=settings.empty_list_is_error)


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[ItemRepository] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Application settings.  Defaults to the module-level settings
        read from the environment.
    repository : Optional[ItemRepository]
        Data backend to use.  When omitted, an in-memory repository is
        built from ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the setup below
    # can log messages.
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    if repository is None:
        repository = build_repository(settings)
    app.state.settings = settings
    app.state.item_controller = ItemController(ItemService(repository))

    register_exception_handlers(app)

    # Mount versioned routes under /api/v1.
    app.include_router(v1_router, prefix="/api/v1")

    @app.get("/", include_in_schema=False)
    async def read_root() -> dict:
        return {"hello": "world"}

    logger.info("%s %s ready (%s)", settings.project_name, settings.api_version, type(repository).__name__)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
