"""
BaseElement - Base model for all landing-page element types.

Provides shared properties for all elements:
- Identity: id, type
- Placement: position {x, y}, size {width, height}
- Content: properties (one concrete shape per element type)

Uses Pydantic v2 with camelCase aliases for JS serialization compatibility.
Elements are frozen. Every change produces a new element via with_updates(),
so the document's element sequence is only ever replaced, never edited.
"""

from enum import Enum
from typing import Any, Mapping
import uuid

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pageforge.errors import ConfigurationError, DocumentValidationError


class ElementType(str, Enum):
    """Element type identifiers matching the persisted `type` values."""
    TEXT = "text"
    IMAGE = "image"
    MUSIC_PLAYER = "music_player"
    VIDEO = "video"
    BUTTON = "button"


# Fields that may be replaced through with_updates()
UPDATABLE_FIELDS = frozenset({'position', 'size', 'properties'})
# Fields that are fixed for the element's lifetime
FIXED_FIELDS = frozenset({'id', 'type'})


def new_element_id() -> str:
    """Generate a fresh element id."""
    return f"element_{uuid.uuid4().hex}"


def type_key(element_type: Any) -> Any:
    """Return the plain string for an ElementType (other values unchanged)."""
    return element_type.value if isinstance(element_type, Enum) else element_type


class Position(BaseModel):
    """Canvas position in pixels. Both axes are non-negative."""
    model_config = ConfigDict(frozen=True)

    x: float = Field(default=0, ge=0)
    y: float = Field(default=0, ge=0)


class Size(BaseModel):
    """Element box size in pixels."""
    model_config = ConfigDict(frozen=True)

    width: float = Field(default=200, gt=0)
    height: float = Field(default=100, gt=0)


class ElementProperties(BaseModel):
    """
    Base for the per-type property shapes.

    Keys that are not declared on the concrete shape are kept, so records
    written by other clients (e.g. `showControls`, `autoplay`) survive a
    load/save cycle unchanged.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra='allow',
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys."""
        return self.model_dump(by_alias=True, mode='json')


def merge_updates(data: dict[str, Any], updates: Mapping[str, Any]) -> dict[str, Any]:
    """
    Shallow-merge a partial element update into serialized element data.

    Args:
        data: Serialized element (modified in place and returned)
        updates: Partial update, e.g. {"position": {"x": 10, "y": 0}}

    Returns:
        The merged data

    Raises:
        ConfigurationError: If the update tries to change `id` or `type`,
            or names a field that is not part of an element
    """
    for key, value in updates.items():
        value = type_key(value)
        if key in FIXED_FIELDS:
            if value != data.get(key):
                raise ConfigurationError(
                    f"Element {key} cannot change ({data.get(key)!r} -> {value!r}); "
                    "delete and recreate the element instead"
                )
            continue
        if key not in UPDATABLE_FIELDS:
            raise ConfigurationError(f"Unknown element field: {key!r}")
        if isinstance(value, BaseModel):
            value = value.model_dump(by_alias=True, mode='json')
        data[key] = value
    return data


class BaseElement(BaseModel):
    """
    Base model for all element types.

    Serializes to the persisted element format:
    {
        "type": "text",
        "id": "element_...",
        "position": {"x": 100, "y": 100},
        "size": {"width": 200, "height": 100},
        "properties": {...type specific...}
    }
    """

    model_config = ConfigDict(
        # Allow both snake_case and camelCase input
        populate_by_name=True,
        # Elements are replaced, never edited in place
        frozen=True,
        # Allow extra fields for forward compatibility
        extra='ignore',
        use_enum_values=True,
    )

    # Element type (overridden in subclasses with Literal types)
    element_type: str = Field(default='', alias='type')
    id: str = Field(default_factory=new_element_id)
    position: Position = Field(default_factory=Position)
    size: Size = Field(default_factory=Size)
    properties: ElementProperties = Field(default_factory=ElementProperties)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to the persisted dictionary.

        Returns:
            Dict with camelCase keys, JSON-ready
        """
        return self.model_dump(by_alias=True, mode='json')

    def with_updates(self, updates: Mapping[str, Any]) -> 'BaseElement':
        """
        Return a copy with a partial update applied.

        Args:
            updates: Any of `position`, `size`, `properties` (models or dicts).
                Each given field is replaced as a whole.

        Returns:
            New element of the same class

        Raises:
            ConfigurationError: On attempts to change `id`/`type`
            DocumentValidationError: If the merged element does not validate
        """
        data = merge_updates(self.to_dict(), updates)
        try:
            return type(self).model_validate(data)
        except ValidationError as e:
            raise DocumentValidationError(f"Invalid update for element {self.id}: {e}") from e

    def contains(self, x: float, y: float) -> bool:
        """Check whether a canvas point lies inside the element box (inclusive)."""
        return (
            self.position.x <= x <= self.position.x + self.size.width
            and self.position.y <= y <= self.position.y + self.size.height
        )

    @property
    def is_known(self) -> bool:
        """True for elements of the closed type set."""
        return True
