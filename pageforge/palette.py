"""Element palette: the catalog of placeable element types."""

from dataclasses import dataclass
from typing import Union

from pageforge.elements import BaseElement, ElementType, create_element
from pageforge.errors import UnknownElementTypeError
from pageforge.formats import LandingPageDocument


@dataclass(frozen=True)
class PaletteEntry:
    """One palette button."""

    element_type: str
    label: str
    description: str
    icon: str  # Material icon name

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return {
            "type": self.element_type,
            "label": self.label,
            "description": self.description,
            "icon": self.icon,
        }


PALETTE: tuple[PaletteEntry, ...] = (
    PaletteEntry(ElementType.TEXT.value, "Text", "Add text content", "text_fields"),
    PaletteEntry(ElementType.IMAGE.value, "Image", "Add images", "image"),
    PaletteEntry(ElementType.MUSIC_PLAYER.value, "Music Player", "Add music player", "music_note"),
    PaletteEntry(ElementType.VIDEO.value, "Video", "Add video content", "videocam"),
    PaletteEntry(ElementType.BUTTON.value, "Button", "Add interactive button", "smart_button"),
)


def get_entry(element_type: Union[str, ElementType]) -> PaletteEntry:
    """
    Get the palette entry of an element type.

    Raises:
        UnknownElementTypeError: If the type has no entry
    """
    key = element_type.value if isinstance(element_type, ElementType) else element_type
    for entry in PALETTE:
        if entry.element_type == key:
            return entry
    raise UnknownElementTypeError(element_type)


def add_element(
    document: LandingPageDocument, element_type: Union[str, ElementType]
) -> tuple[LandingPageDocument, BaseElement]:
    """
    Create an element with its defaults and append it on top of the document.

    Args:
        document: Current document
        element_type: Type to add

    Returns:
        (new document, created element)

    Raises:
        UnknownElementTypeError: If the type is not placeable
    """
    element = create_element(element_type)
    return document.with_element_added(element), element
