"""Document gateway: load, save and publish landing pages.

All three operations go through a PersistenceBackend. Failures surface as
GatewayError and never touch the caller's in-memory document; callers get
new document instances back instead.
"""

import logging
from typing import Optional

from pageforge.config import settings
from pageforge.errors import DocumentValidationError, GatewayError
from pageforge.formats import LandingPageDocument

from .backends import PersistenceBackend

logger = logging.getLogger(__name__)


class DocumentGateway:
    """Persistence operations for landing page documents."""

    def __init__(self, backend: PersistenceBackend, table: str | None = None):
        self._backend = backend
        self._table = table or settings.PAGES_TABLE

    @property
    def backend(self) -> PersistenceBackend:
        return self._backend

    def _parse(self, row: dict) -> LandingPageDocument:
        try:
            return LandingPageDocument.from_record(row)
        except DocumentValidationError as e:
            raise GatewayError(f"Stored landing page {row.get('id')!r} is unreadable: {e}") from e

    async def load(self, album_id: str) -> Optional[LandingPageDocument]:
        """
        Load the landing page of an album.

        Args:
            album_id: Owning album

        Returns:
            Stored document, or None if the album has none yet

        Raises:
            GatewayError: If the store cannot be read
        """
        logger.debug(f"Loading landing page for album {album_id}")
        row = await self._backend.select_one(self._table, {"album_id": album_id})
        return self._parse(row) if row else None

    async def load_published(self, album_id: str) -> Optional[LandingPageDocument]:
        """
        Load the landing page of an album only if it is published.

        Returns:
            Published document, or None (missing or unpublished)
        """
        row = await self._backend.select_one(
            self._table, {"album_id": album_id, "is_published": True}
        )
        return self._parse(row) if row else None

    async def save(self, document: LandingPageDocument, *, user_id: str | None = None) -> str:
        """
        Insert or update a document.

        Args:
            document: Document to persist
            user_id: Owner recorded on insert (when known)

        Returns:
            The document id (newly assigned on insert)

        Raises:
            DocumentValidationError: If album or title are missing (nothing is sent)
            GatewayError: If the store rejects the write
        """
        document.validate_for_save()

        record = document.to_record()
        record.pop("id", None)

        if document.id:
            row = await self._backend.update(self._table, document.id, record)
            if row is not None:
                logger.info(f"Updated landing page {document.id} (album {document.album_id})")
                return document.id
            logger.warning(f"Landing page {document.id} vanished, inserting it again")
            record["id"] = document.id

        if user_id:
            record["user_id"] = user_id
        row = await self._backend.insert(self._table, record)
        document_id = str(row["id"])
        logger.info(f"Created landing page {document_id} (album {document.album_id})")
        return document_id

    async def set_published(
        self, document: LandingPageDocument, value: bool, *, user_id: str | None = None
    ) -> LandingPageDocument:
        """
        Set the publish flag of a document.

        Unsaved documents are saved first. Setting the value the stored
        document already has makes no further call.

        Args:
            document: Document to (un)publish
            value: New publish state

        Returns:
            Document with `id` and `is_published` set

        Raises:
            DocumentValidationError: If the document must be saved but is invalid
            GatewayError: If the store rejects a write
        """
        if not document.id:
            document_id = await self.save(document, user_id=user_id)
            document = document.model_copy(update={"id": document_id})

        if document.is_published == value:
            return document

        row = await self._backend.update(self._table, document.id, {"is_published": value})
        if row is None:
            raise GatewayError(f"Landing page {document.id} not found")
        logger.info(f"Landing page {document.id} {'published' if value else 'unpublished'}")
        return document.model_copy(update={"is_published": value})
