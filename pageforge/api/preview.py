"""Public landing page route (not under /api)."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from pageforge.errors import GatewayError
from pageforge.gateway import DocumentGateway
from pageforge.media import MediaDirectory
from pageforge.rendering import render_not_available, render_page
from pageforge.services import get_gateway, get_media_directory

logger = logging.getLogger(__name__)

preview_router = APIRouter(tags=["preview"])


@preview_router.get("/album-preview/{album_id}", response_class=HTMLResponse)
async def album_preview(
    album_id: str,
    gateway: DocumentGateway = Depends(get_gateway),
    media: MediaDirectory = Depends(get_media_directory),
) -> HTMLResponse:
    """Render the published landing page of an album."""
    try:
        document = await gateway.load_published(album_id)
    except GatewayError as e:
        logger.warning(f"Error loading published page for album {album_id}: {e}")
        document = None

    if document is None:
        return HTMLResponse(render_not_available(), status_code=404)

    resolved = await media.resolve_for_album(album_id)
    return HTMLResponse(render_page(document, resolved))
