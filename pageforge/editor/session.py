"""Designer session: the editing state of one browser tab."""

import logging
from datetime import datetime
from typing import Any, Callable, Optional, Union

from markupsafe import Markup

from pageforge.canvas import CanvasEngine, PointerListeners
from pageforge.elements import BaseElement, ElementType
from pageforge.errors import (
    DocumentValidationError,
    ElementNotFoundError,
    GatewayError,
    PageforgeError,
)
from pageforge.formats import LandingPageDocument, create_default_document
from pageforge.gateway import DocumentGateway
from pageforge.media import Album, MediaDirectory, ResolvedMedia
from pageforge.palette import add_element as palette_add_element
from pageforge.properties import PropertyField, change_property, change_size, property_fields
from pageforge.rendering import render_canvas

logger = logging.getLogger(__name__)

# (message, type) with NiceGUI notification types: positive, negative, warning, info
NotifyCallback = Callable[[str, str], None]


def _log_notification(message: str, type: str) -> None:
    logger.info(f"[{type}] {message}")


class DesignerSession:
    """
    One open designer: selected album, its document and the canvas state.

    Persistence runs at most one save/publish at a time. Results are merged
    into the document current when they complete, so edits made meanwhile
    are kept.
    """

    def __init__(
        self,
        session_id: str,
        gateway: DocumentGateway,
        media_directory: MediaDirectory,
        notify: NotifyCallback | None = None,
        user_id: str | None = None,
        listeners: PointerListeners | None = None,
    ):
        self.id = session_id
        self.user_id = user_id
        self.gateway = gateway
        self.media_directory = media_directory
        self.notify: NotifyCallback = notify or _log_notification

        self.document: LandingPageDocument | None = None
        self.media = ResolvedMedia()
        self.albums: list[Album] = []
        self.engine = CanvasEngine(self._elements, self.update_element, listeners)

        self.created_at = datetime.now()
        self.last_activity = datetime.now()
        self._in_flight: str | None = None

    def update_activity(self) -> None:
        """Update last activity timestamp."""
        self.last_activity = datetime.now()

    def _elements(self) -> tuple[BaseElement, ...]:
        return self.document.elements if self.document else ()

    def _require_document(self) -> LandingPageDocument:
        if self.document is None:
            raise PageforgeError("No album selected")
        return self.document

    @property
    def album_id(self) -> str | None:
        return self.document.album_id if self.document else None

    @property
    def is_saving(self) -> bool:
        return self._in_flight == "save"

    # --- Loading ---

    async def load_albums(self) -> list[Album]:
        """Load the albums of the signed-in artist for the album picker."""
        if not self.user_id:
            return self.albums
        try:
            self.albums = await self.media_directory.list_albums(self.user_id)
        except GatewayError as e:
            logger.warning(f"Error fetching albums for user {self.user_id}: {e}")
            self.notify("Failed to load albums", "negative")
        return self.albums

    async def _album_title(self, album_id: str) -> str | None:
        for album in self.albums:
            if album.id == album_id:
                return album.title
        try:
            album = await self.media_directory.get_album(album_id)
        except GatewayError as e:
            logger.warning(f"Error fetching album {album_id}: {e}")
            return None
        return album.title if album else None

    async def select_album(self, album_id: str) -> bool:
        """
        Open the landing page of an album.

        Loads the stored document, or starts a default one when the album
        has none. On a load failure the previous album stays open.

        Returns:
            True if the album's document is now open
        """
        try:
            document = await self.gateway.load(album_id)
        except GatewayError as e:
            logger.warning(f"Error loading landing page for album {album_id}: {e}")
            self.notify("Failed to load landing page", "negative")
            return False

        if document is None:
            document = create_default_document(album_id, await self._album_title(album_id))

        media = await self.media_directory.resolve_for_album(album_id)

        drag = self.engine.drag
        if drag is not None:
            self.engine.forget(drag.element_id)
        self.engine.clear_selection()
        self.document = document
        self.media = media
        self.update_activity()
        logger.debug(f"Session {self.id} opened album {album_id} ({len(document.elements)} elements)")
        return True

    # --- Editing ---

    def add_element(self, element_type: Union[str, ElementType]) -> BaseElement:
        """Add an element from the palette and select it."""
        self.document, element = palette_add_element(self._require_document(), element_type)
        self.engine.select(element.id)
        self.update_activity()
        return element

    def update_element(self, element_id: str, updates: dict[str, Any]) -> BaseElement:
        """Apply a partial update (position, size or properties) to an element."""
        document = self._require_document().with_element_updated(element_id, updates)
        self.document = document
        self.update_activity()
        return document.get_element(element_id)

    def delete_element(self, element_id: str) -> None:
        """Remove an element (and its selection)."""
        self.document = self._require_document().with_element_removed(element_id)
        self.engine.forget(element_id)
        self.update_activity()

    def set_title(self, title: str) -> None:
        self.document = self._require_document().with_changes(title=title)

    def set_theme(self, **colors: str) -> bool:
        """
        Change theme colors, e.g. set_theme(accent_color='#ff0000').

        Colors that are not hex colors are reported through notify and
        change nothing.
        """
        document = self._require_document()
        theme = {**document.theme.model_dump(), **colors}
        try:
            self.document = document.with_changes(theme=theme)
        except DocumentValidationError as e:
            logger.debug(f"Rejected theme change {colors}: {e}")
            self.notify("Theme colors must be hex colors like #3b82f6", "warning")
            return False
        self.update_activity()
        return True

    def selected_element(self) -> Optional[BaseElement]:
        return self.engine.selected_element()

    def property_fields(self) -> list[PropertyField]:
        """Editor fields of the selected element."""
        element = self.selected_element()
        return property_fields(element, self.media) if element else []

    def _element(self, element_id: str) -> BaseElement:
        element = self._require_document().get_element(element_id)
        if element is None:
            raise ElementNotFoundError(f"Element '{element_id}' not found")
        return element

    def change_property(self, element_id: str, key: str, value: Any) -> bool:
        """
        Change one property of an element.

        Invalid values are reported through notify and change nothing.
        """
        try:
            change_property(self._element(element_id), key, value, self.update_element)
        except DocumentValidationError as e:
            self.notify(str(e), "warning")
            return False
        return True

    def change_size(
        self, element_id: str, width: float | None = None, height: float | None = None
    ) -> bool:
        """Resize an element. Invalid sizes are reported through notify."""
        try:
            change_size(self._element(element_id), self.update_element, width=width, height=height)
        except DocumentValidationError as e:
            self.notify(str(e), "warning")
            return False
        return True

    # --- Persistence ---

    def _merge_result(self, snapshot: LandingPageDocument, **changes: Any) -> None:
        current = self.document
        if current is None or current.album_id != snapshot.album_id:
            # The artist switched albums while the request was pending
            return
        self.document = current.model_copy(update=changes)

    async def save(self) -> bool:
        """
        Persist the current document.

        Returns:
            True if saved; False if skipped, invalid or failed
        """
        if self._in_flight is not None:
            logger.debug(f"Session {self.id}: {self._in_flight} in flight, save skipped")
            return False

        snapshot = self.document
        try:
            if snapshot is None:
                raise DocumentValidationError("Please select an album")
            snapshot.validate_for_save()
        except DocumentValidationError:
            self.notify("Please select an album and enter a title", "warning")
            return False

        self._in_flight = "save"
        try:
            document_id = await self.gateway.save(snapshot, user_id=self.user_id)
        except GatewayError as e:
            logger.warning(f"Error saving landing page for album {snapshot.album_id}: {e}")
            self.notify("Failed to save landing page", "negative")
            return False
        finally:
            self._in_flight = None

        self._merge_result(snapshot, id=document_id)
        self.notify("Landing page saved successfully", "positive")
        return True

    async def set_published(self, value: bool) -> bool:
        """
        Publish or unpublish the current document (saving it first if new).

        Returns:
            True if the publish state was applied
        """
        if self._in_flight is not None:
            logger.debug(f"Session {self.id}: {self._in_flight} in flight, publish skipped")
            return False

        snapshot = self.document
        if snapshot is None:
            self.notify("Please select an album and enter a title", "warning")
            return False

        self._in_flight = "publish"
        try:
            result = await self.gateway.set_published(snapshot, value, user_id=self.user_id)
        except DocumentValidationError:
            self.notify("Please select an album and enter a title", "warning")
            return False
        except GatewayError as e:
            logger.warning(f"Error publishing landing page for album {snapshot.album_id}: {e}")
            self.notify("Failed to publish landing page", "negative")
            return False
        finally:
            self._in_flight = None

        self._merge_result(snapshot, id=result.id, is_published=result.is_published)
        state = "published" if value else "unpublished"
        self.notify(f"Landing page {state} successfully", "positive")
        return True

    async def toggle_publish(self) -> bool:
        document = self._require_document()
        return await self.set_published(not document.is_published)

    # --- Output ---

    def preview_url(self) -> str | None:
        """Public preview path of the open album."""
        if self.document is None or not self.document.album_id:
            return None
        return f"/album-preview/{self.document.album_id}"

    def render_canvas(self) -> Markup:
        """Render the editable canvas with the current selection."""
        return render_canvas(
            self.document or LandingPageDocument(),
            self.media,
            selected_id=self.engine.selected_id,
            editable=True,
        )

    def to_summary(self) -> dict:
        """Get summary dict for API response."""
        document = self.document
        return {
            "id": self.id,
            "user_id": self.user_id,
            "album_id": self.album_id,
            "document_id": document.id if document else None,
            "title": document.title if document else None,
            "element_count": len(document.elements) if document else 0,
            "selected_id": self.engine.selected_id,
            "is_published": document.is_published if document else False,
            "created_at": self.created_at.isoformat(),
            "last_activity": self.last_activity.isoformat(),
        }
