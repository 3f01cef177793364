"""Landing page API endpoints.

All album-scoped operations use the URL pattern:
/api/albums/{album_id}/...
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel

from pageforge.errors import DocumentValidationError, GatewayError
from pageforge.formats import LandingPageDocument, create_default_document
from pageforge.gateway import DocumentGateway
from pageforge.media import MediaDirectory
from pageforge.palette import PALETTE
from pageforge.services import get_gateway, get_media_directory

logger = logging.getLogger(__name__)

router = APIRouter(tags=["landing-pages"])


# --- Request/Response Models ---


class PublishRequest(BaseModel):
    """Request body for publishing or unpublishing."""

    published: bool


# --- Helper Functions ---


def _gateway_failure(e: GatewayError) -> HTTPException:
    logger.warning(f"Gateway error: {e}")
    return HTTPException(status_code=502, detail=str(e))


async def _load(gateway: DocumentGateway, album_id: str) -> Optional[LandingPageDocument]:
    try:
        return await gateway.load(album_id)
    except GatewayError as e:
        raise _gateway_failure(e)


# --- Endpoints ---


@router.get("/palette")
async def get_palette() -> dict:
    """List the element types that can be placed on a page."""
    return {"entries": [entry.to_dict() for entry in PALETTE]}


@router.get("/albums/{album_id}/landing-page")
async def get_landing_page(
    album_id: str,
    gateway: DocumentGateway = Depends(get_gateway),
    media: MediaDirectory = Depends(get_media_directory),
) -> dict:
    """Get the stored landing page of an album, or the default one for a new page."""
    document = await _load(gateway, album_id)
    stored = document is not None
    if document is None:
        try:
            album = await media.get_album(album_id)
        except GatewayError as e:
            raise _gateway_failure(e)
        document = create_default_document(album_id, album.title if album else None)
    return {"document": document.to_record(), "stored": stored}


@router.put("/albums/{album_id}/landing-page")
async def save_landing_page(
    album_id: str,
    record: dict[str, Any] = Body(...),
    user_id: Optional[str] = None,
    gateway: DocumentGateway = Depends(get_gateway),
) -> dict:
    """Save a landing page document (insert or update)."""
    try:
        document = LandingPageDocument.from_record({**record, "album_id": album_id})
        document_id = await gateway.save(document, user_id=user_id)
    except DocumentValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except GatewayError as e:
        raise _gateway_failure(e)

    saved = document.model_copy(update={"id": document_id})
    return {"id": document_id, "document": saved.to_record()}


@router.post("/albums/{album_id}/landing-page/publish")
async def publish_landing_page(
    album_id: str,
    request: PublishRequest,
    gateway: DocumentGateway = Depends(get_gateway),
) -> dict:
    """Publish or unpublish the stored landing page of an album."""
    document = await _load(gateway, album_id)
    if document is None:
        raise HTTPException(status_code=404, detail=f"No landing page for album '{album_id}'")
    try:
        document = await gateway.set_published(document, request.published)
    except GatewayError as e:
        raise _gateway_failure(e)
    return {"document": document.to_record()}


@router.get("/albums/{album_id}/landing-page/published")
async def get_published_landing_page(
    album_id: str,
    gateway: DocumentGateway = Depends(get_gateway),
) -> dict:
    """Get the published landing page of an album."""
    try:
        document = await gateway.load_published(album_id)
    except GatewayError as e:
        raise _gateway_failure(e)
    if document is None:
        raise HTTPException(
            status_code=404, detail="No published landing page found for this album"
        )
    return {"document": document.to_record()}


@router.get("/albums/{album_id}/media")
async def get_album_media(
    album_id: str,
    media: MediaDirectory = Depends(get_media_directory),
) -> dict:
    """List the tracks and videos elements of this album can reference."""
    resolved = await media.resolve_for_album(album_id)
    return resolved.to_dict()
