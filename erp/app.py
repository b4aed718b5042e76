"""FastAPI application factory for the ERP master-data backend."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from erp.core.config import Settings, get_settings
from erp.core.logging import configure_logging
from erp.repositories.backing_store import KeyValueStore, open_backing_store
from erp.repositories.registry import StoreRegistry
from erp.routers import masters as masters_router
from erp.services.seed_service import SeedService

logger = logging.getLogger(__name__)

_UNSET = object()


def create_app(settings: Settings | None = None, backing: Optional[KeyValueStore] | object = _UNSET) -> FastAPI:
    """
    Build the app. ``backing`` overrides the configured store; pass None to
    run without one.
    """
    settings = settings or get_settings()
    configure_logging(settings)
    if backing is _UNSET:
        backing = open_backing_store(settings)
    registry = StoreRegistry(backing, settings=settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.seed_on_startup:
            SeedService(registry).seed()
        yield

    app = FastAPI(title="ERP Master Data API", lifespan=lifespan)
    app.state.settings = settings
    app.state.registry = registry
    app.include_router(masters_router.router)

    @app.get("/health")
    def health():
        return {"ok": True, "storage": settings.storage_backend, "available": backing is not None}

    logger.info("ERP API ready (storage=%s, available=%s)", settings.storage_backend, backing is not None)
    return app
