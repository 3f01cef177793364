"""
LandingPageDocument - The landing page of one album.

A document contains:
- Identity (id, assigned by the store on first save)
- Owning album reference
- Title
- Theme (background, text and accent colors)
- Elements (ordered; order is the z-order, last = topmost)
- Publish flag

Documents are frozen. Editing operations return a new document in which
only the touched element has been replaced.
"""

import logging
import re
from typing import Any, Iterable, Mapping, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    SerializeAsAny,
    ValidationError,
    field_validator,
)

from pageforge.elements import BaseElement, element_from_dict
from pageforge.errors import DocumentValidationError, ElementNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_BACKGROUND_COLOR = '#ffffff'
DEFAULT_TEXT_COLOR = '#000000'
DEFAULT_ACCENT_COLOR = '#3b82f6'

# #rgb, #rrggbb or #rrggbbaa
HEX_COLOR_PATTERN = r'^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$'


class Theme(BaseModel):
    """Three-color palette applied to the page background and all elements."""
    background_color: str = Field(
        default=DEFAULT_BACKGROUND_COLOR, alias='backgroundColor', pattern=HEX_COLOR_PATTERN
    )
    text_color: str = Field(
        default=DEFAULT_TEXT_COLOR, alias='textColor', pattern=HEX_COLOR_PATTERN
    )
    accent_color: str = Field(
        default=DEFAULT_ACCENT_COLOR, alias='accentColor', pattern=HEX_COLOR_PATTERN
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra='ignore')

    def to_dict(self) -> dict[str, str]:
        """Serialize with camelCase keys."""
        return self.model_dump(by_alias=True, mode='json')

    @classmethod
    def repair(cls, data: Mapping[str, Any]) -> dict[str, Any]:
        """
        Replace stored colors that are not hex colors with the defaults.

        Args:
            data: Persisted theme (camelCase or snake_case keys)

        Returns:
            Theme dict with camelCase keys
        """
        repaired = cls().to_dict()
        for name, field in cls.model_fields.items():
            value = data.get(field.alias, data.get(name))
            if value is None:
                continue
            if isinstance(value, str) and re.fullmatch(HEX_COLOR_PATTERN, value):
                repaired[field.alias] = value
            else:
                logger.warning(f"Ignoring invalid theme color {field.alias}={value!r}")
        return repaired


class LandingPageDocument(BaseModel):
    """
    Landing page document matching the persisted record.

    Serialization format:
    {
        "id": "uuid" | null,
        "album_id": "uuid",
        "title": "Album - Landing Page",
        "elements": [...],
        "theme": {"backgroundColor": "#ffffff", "textColor": "#000000", "accentColor": "#3b82f6"},
        "is_published": false
    }
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra='ignore',
    )

    id: Optional[str] = Field(default=None)
    album_id: str = Field(default='', validation_alias=AliasChoices('album_id', 'albumId'))
    title: str = Field(default='')
    elements: tuple[SerializeAsAny[BaseElement], ...] = Field(default=())
    theme: Theme = Field(default_factory=Theme)
    is_published: bool = Field(
        default=False, validation_alias=AliasChoices('is_published', 'isPublished')
    )

    @field_validator('elements', mode='before')
    @classmethod
    def _coerce_elements(cls, v: Any) -> Any:
        """Accept dicts and coerce them to typed element instances."""
        if v is None:
            return ()
        if not isinstance(v, (list, tuple)):
            return v
        return tuple(
            item if isinstance(item, BaseElement) else element_from_dict(item)
            for item in v
        )

    # --- Serialization ---

    def to_record(self) -> dict[str, Any]:
        """
        Convert to the persisted record.

        Returns:
            JSON-ready dict; elements and theme use camelCase keys
        """
        return self.model_dump(by_alias=True, mode='json')

    @classmethod
    def migrate(cls, data: Mapping[str, Any]) -> dict[str, Any]:
        """
        Fill in fields that older or partial records leave out.

        Args:
            data: Persisted record

        Returns:
            Record with theme, elements and publish flag present
        """
        data = dict(data)
        theme = data.get('theme')
        if isinstance(theme, Mapping) and theme:
            data['theme'] = Theme.repair(theme)
        elif not isinstance(theme, Theme):
            data['theme'] = Theme().to_dict()
        if data.get('elements') is None:
            data['elements'] = []
        if data.get('is_published') is None and data.get('isPublished') is None:
            data['is_published'] = False
        return data

    @classmethod
    def from_record(cls, data: Mapping[str, Any]) -> 'LandingPageDocument':
        """
        Create a document from a persisted record.

        Raises:
            DocumentValidationError: If document-level fields are invalid
                (bad elements never raise; they load as UnknownElement)
        """
        try:
            return cls.model_validate(cls.migrate(data))
        except ValidationError as e:
            raise DocumentValidationError(f"Invalid landing page record: {e}") from e

    # --- Element access ---

    def get_element(self, element_id: str) -> Optional[BaseElement]:
        """
        Get an element by ID.

        Args:
            element_id: Element ID to find

        Returns:
            Element or None if not found
        """
        for element in self.elements:
            if element.id == element_id:
                return element
        return None

    def index_of(self, element_id: str) -> int:
        """
        Get the z-order index of an element.

        Raises:
            ElementNotFoundError: If the element is not in the document
        """
        for index, element in enumerate(self.elements):
            if element.id == element_id:
                return index
        raise ElementNotFoundError(f"Element '{element_id}' not found")

    # --- Functional edits ---

    def with_changes(self, **changes: Any) -> 'LandingPageDocument':
        """
        Return a copy with document-level fields replaced.

        Values are validated, so dicts are accepted for `theme` and `elements`.
        """
        data = {
            'id': self.id,
            'album_id': self.album_id,
            'title': self.title,
            'elements': self.elements,
            'theme': self.theme,
            'is_published': self.is_published,
        }
        data.update(changes)
        try:
            return type(self).model_validate(data)
        except ValidationError as e:
            raise DocumentValidationError(f"Invalid document change: {e}") from e

    def with_element_added(self, element: BaseElement) -> 'LandingPageDocument':
        """Append an element at the end of the sequence (topmost)."""
        return self.model_copy(update={'elements': self.elements + (element,)})

    def with_element_updated(
        self, element_id: str, updates: Mapping[str, Any]
    ) -> 'LandingPageDocument':
        """
        Apply a partial update to one element.

        Args:
            element_id: Element to update
            updates: Partial element update (see BaseElement.with_updates)

        Returns:
            New document; all other elements are the same instances
        """
        index = self.index_of(element_id)
        updated = self.elements[index].with_updates(updates)
        elements = self.elements[:index] + (updated,) + self.elements[index + 1:]
        return self.model_copy(update={'elements': elements})

    def with_element_removed(self, element_id: str) -> 'LandingPageDocument':
        """Remove an element by id."""
        self.index_of(element_id)
        return self.model_copy(
            update={'elements': tuple(e for e in self.elements if e.id != element_id)}
        )

    # --- Checks ---

    def validate_for_save(self) -> None:
        """
        Check the fields required to persist the document.

        Raises:
            DocumentValidationError: If no album is set or the title is blank
        """
        if not self.album_id:
            raise DocumentValidationError("Please select an album")
        if not self.title.strip():
            raise DocumentValidationError("Please enter a title")

    @property
    def is_saved(self) -> bool:
        """True once the store has assigned an id."""
        return self.id is not None


def create_default_document(
    album_id: str,
    album_title: Optional[str] = None,
    elements: Iterable[BaseElement] = (),
) -> LandingPageDocument:
    """
    Create the in-memory document for an album without a stored page.

    Args:
        album_id: Owning album
        album_title: Album title used to derive the page title

    Returns:
        Unsaved document with the default theme
    """
    title = f"{album_title} - Landing Page" if album_title else "Landing Page"
    logger.debug(f"Creating default landing page for album {album_id}")
    return LandingPageDocument(album_id=album_id, title=title, elements=tuple(elements))
