"""FastAPI application factory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import FastAPI

from campuscoffee import __version__

from .errors import register_error_handlers
from .pos import router as pos_router
from .users import router as users_router

if TYPE_CHECKING:
    from campuscoffee.app import Services


def create_app(services: Services | None = None) -> FastAPI:
    """Build the API around ``services`` (default: SQLAlchemy + live OSM adapters)."""

    if services is None:
        from campuscoffee.app import build_services  # noqa: PLC0415

        services = build_services()

    app = FastAPI(title="CampusCoffee", version=__version__)
    app.state.services = services
    register_error_handlers(app)
    app.include_router(pos_router)
    app.include_router(users_router)

    @app.get("/health")
    def health() -> dict[str, bool]:
        return {"ok": True}

    return app
