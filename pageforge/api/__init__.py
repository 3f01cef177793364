"""Pageforge HTTP API."""

from .preview import preview_router
from .router import api_router

__all__ = ["api_router", "preview_router"]
