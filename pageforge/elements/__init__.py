"""
Pageforge Element Models

Pydantic models for the content blocks placed on a landing page.

Element Hierarchy:
    BaseElement
    ├── TextElement (type: 'text')
    ├── ImageElement (type: 'image')
    ├── MusicPlayerElement (type: 'music_player')
    ├── VideoElement (type: 'video')
    ├── ButtonElement (type: 'button')
    └── UnknownElement (anything else, kept verbatim)

The type set is closed: create_element() rejects other types, while
element_from_dict() degrades persisted foreign data to UnknownElement.
"""

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from pageforge.config import settings
from pageforge.errors import UnknownElementTypeError

from .base import (
    BaseElement,
    ElementProperties,
    ElementType,
    Position,
    Size,
    new_element_id,
    type_key,
)
from .button_element import ButtonElement, ButtonProperties
from .image_element import ImageElement, ImageProperties
from .media_elements import (
    MusicPlayerElement,
    MusicPlayerProperties,
    VideoElement,
    VideoProperties,
)
from .text_element import TextElement, TextProperties
from .unknown_element import UnknownElement

logger = logging.getLogger(__name__)

# Element type registry for creation and deserialization
_ELEMENT_REGISTRY: dict[str, type[BaseElement]] = {
    'text': TextElement,
    'image': ImageElement,
    'music_player': MusicPlayerElement,
    'video': VideoElement,
    'button': ButtonElement,
}

ELEMENT_TYPES: tuple[str, ...] = tuple(_ELEMENT_REGISTRY)


def get_element_class(element_type: Union[str, ElementType]) -> type[BaseElement]:
    """
    Get the element class for a type.

    Args:
        element_type: Element type string or ElementType

    Returns:
        Element class, UnknownElement for types outside the closed set
    """
    return _ELEMENT_REGISTRY.get(type_key(element_type), UnknownElement)


def create_element(
    element_type: Union[str, ElementType],
    *,
    position: Optional[Position] = None,
    size: Optional[Size] = None,
) -> BaseElement:
    """
    Create a new element with a fresh id and the type's default properties.

    Args:
        element_type: One of ELEMENT_TYPES
        position: Initial position (default from settings)
        size: Initial size (default from settings)

    Returns:
        New element instance

    Raises:
        UnknownElementTypeError: If the type is not one of ELEMENT_TYPES
    """
    key = type_key(element_type)
    element_class = _ELEMENT_REGISTRY.get(key) if isinstance(key, str) else None
    if element_class is None:
        raise UnknownElementTypeError(element_type)

    return element_class(
        id=new_element_id(),
        position=position or Position(
            x=settings.DEFAULT_ELEMENT_X,
            y=settings.DEFAULT_ELEMENT_Y,
        ),
        size=size or Size(
            width=settings.DEFAULT_ELEMENT_WIDTH,
            height=settings.DEFAULT_ELEMENT_HEIGHT,
        ),
    )


def element_from_dict(data: Any) -> BaseElement:
    """
    Create an element instance from a persisted dictionary.

    Never raises for bad data: unknown types and records that fail
    validation come back as UnknownElement.

    Args:
        data: Serialized element data

    Returns:
        Element instance of the appropriate type
    """
    if not isinstance(data, Mapping):
        logger.warning(f"Skipping typing of non-object element record: {data!r}")
        return UnknownElement.from_raw(data, reason='element record is not an object')

    element_type = data.get('type')
    element_class = _ELEMENT_REGISTRY.get(element_type) if isinstance(element_type, str) else None
    if element_class is None:
        logger.warning(f"Unknown element type {element_type!r} (id={data.get('id')!r})")
        return UnknownElement.from_raw(data, reason=f"unknown element type {element_type!r}")

    try:
        return element_class.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Invalid {element_type} element {data.get('id')!r}: {e}")
        return UnknownElement.from_raw(data, reason=f"invalid {element_type} element")


__all__ = [
    # Base
    'BaseElement',
    'ElementProperties',
    'ElementType',
    'Position',
    'Size',
    # Element types
    'TextElement',
    'TextProperties',
    'ImageElement',
    'ImageProperties',
    'MusicPlayerElement',
    'MusicPlayerProperties',
    'VideoElement',
    'VideoProperties',
    'ButtonElement',
    'ButtonProperties',
    'UnknownElement',
    # Utilities
    'ELEMENT_TYPES',
    'create_element',
    'element_from_dict',
    'get_element_class',
    'new_element_id',
]
