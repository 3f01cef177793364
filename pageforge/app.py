"""FastAPI application factories."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api import api_router, preview_router
from .services import close_services


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_services()


def create_api_app() -> FastAPI:
    """Create the API application (mounted at /api)."""
    app = FastAPI(title="Pageforge API")
    app.include_router(api_router)
    return app


def create_app() -> FastAPI:
    """Create the application without the designer UI: API plus public pages."""
    app = FastAPI(title="Pageforge", lifespan=lifespan)
    app.mount("/api", create_api_app())
    app.include_router(preview_router)
    return app
