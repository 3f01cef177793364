"""Main API router."""

from fastapi import APIRouter

from pageforge import __version__

from .pages import router as pages_router
from .sessions import router as sessions_router

api_router = APIRouter()


@api_router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


api_router.include_router(pages_router)
api_router.include_router(sessions_router)
