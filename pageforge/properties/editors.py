"""Per-type property editors.

Each element type has one field builder in the editor registry; the UI
renders the returned PropertyField list and reports every field change
through change_property(), which applies it immediately via the
`on_update(element_id, partial_update)` callback.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from pageforge.elements import BaseElement
from pageforge.errors import ConfigurationError, DocumentValidationError
from pageforge.media import ResolvedMedia

UpdateCallback = Callable[[str, dict[str, Any]], None]


class FieldKind(str, Enum):
    """Input control used for a property."""
    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    SELECT = "select"
    URL = "url"


@dataclass(frozen=True)
class FieldOption:
    """A choice of a select field."""

    value: str
    label: str


@dataclass(frozen=True)
class PropertyField:
    """Description of one editable property."""

    key: str
    label: str
    kind: FieldKind
    value: Any
    placeholder: str = ""
    options: tuple[FieldOption, ...] = ()
    # Shown instead of the control when a picker has nothing to choose from
    empty_message: Optional[str] = None

    @property
    def is_empty_picker(self) -> bool:
        return self.empty_message is not None

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return {
            "key": self.key,
            "label": self.label,
            "kind": self.kind.value,
            "value": self.value,
            "placeholder": self.placeholder,
            "options": [{"value": o.value, "label": o.label} for o in self.options],
            "empty_message": self.empty_message,
        }


FieldBuilder = Callable[[BaseElement, ResolvedMedia], list[PropertyField]]


def _text_fields(element: BaseElement, media: ResolvedMedia) -> list[PropertyField]:
    properties = element.properties
    return [
        PropertyField("content", "Content", FieldKind.TEXTAREA, properties.content,
                      placeholder="Enter text content"),
        PropertyField("fontSize", "Font size", FieldKind.NUMBER, properties.font_size,
                      placeholder="Font size"),
        PropertyField("fontWeight", "Font weight", FieldKind.SELECT, properties.font_weight,
                      options=(FieldOption("normal", "Normal"), FieldOption("bold", "Bold"))),
    ]


def _image_fields(element: BaseElement, media: ResolvedMedia) -> list[PropertyField]:
    properties = element.properties
    return [
        PropertyField("src", "Image URL", FieldKind.URL, properties.src, placeholder="Image URL"),
        PropertyField("alt", "Alt text", FieldKind.TEXT, properties.alt, placeholder="Alt text"),
    ]


def _music_player_fields(element: BaseElement, media: ResolvedMedia) -> list[PropertyField]:
    options = tuple(FieldOption(track.id, track.title) for track in media.tracks.values())
    return [
        PropertyField(
            "trackId", "Track", FieldKind.SELECT, element.properties.track_id,
            placeholder="Select track",
            options=options,
            empty_message=None if options else "No tracks available",
        ),
    ]


def _video_fields(element: BaseElement, media: ResolvedMedia) -> list[PropertyField]:
    options = tuple(FieldOption(video.id, video.title) for video in media.videos.values())
    return [
        PropertyField(
            "videoId", "Video", FieldKind.SELECT, element.properties.video_id,
            placeholder="Select video",
            options=options,
            empty_message=None if options else "No videos available",
        ),
    ]


def _button_fields(element: BaseElement, media: ResolvedMedia) -> list[PropertyField]:
    properties = element.properties
    return [
        PropertyField("text", "Button text", FieldKind.TEXT, properties.text,
                      placeholder="Button text"),
        PropertyField("link", "Link", FieldKind.URL, properties.link,
                      placeholder="Link URL (optional)"),
    ]


# Editor registry, one field builder per element type
_EDITORS: dict[str, FieldBuilder] = {
    "text": _text_fields,
    "image": _image_fields,
    "music_player": _music_player_fields,
    "video": _video_fields,
    "button": _button_fields,
}


def property_fields(
    element: BaseElement, media: ResolvedMedia | None = None
) -> list[PropertyField]:
    """
    Describe the editable properties of an element.

    Args:
        element: Element being edited
        media: Track/video listings for the picker fields

    Returns:
        Fields in display order (empty for unknown elements)
    """
    builder = _EDITORS.get(element.element_type)
    if builder is None or not element.is_known:
        return []
    return builder(element, media or ResolvedMedia())


def _to_number(value: Any) -> int | float:
    if isinstance(value, bool) or value is None:
        raise DocumentValidationError(f"Not a number: {value!r}")
    if isinstance(value, (int, float)):
        number = value
    else:
        text = str(value).strip()
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError as e:
                raise DocumentValidationError(f"Not a number: {value!r}") from e
    if not math.isfinite(number):
        raise DocumentValidationError(f"Not a number: {value!r}")
    return number


def _to_str(value: Any) -> str:
    return "" if value is None else str(value)


_COERCERS: dict[FieldKind, Callable[[Any], Any]] = {
    FieldKind.TEXT: _to_str,
    FieldKind.TEXTAREA: _to_str,
    FieldKind.URL: lambda value: _to_str(value).strip(),
    FieldKind.SELECT: _to_str,
    FieldKind.NUMBER: _to_number,
}


def change_property(
    element: BaseElement, key: str, value: Any, on_update: UpdateCallback
) -> dict[str, Any]:
    """
    Apply one field change immediately.

    Args:
        element: Current element
        key: Property key as persisted (e.g. "fontSize")
        value: Raw value from the input control
        on_update: Called as (element_id, {"properties": {...}})

    Returns:
        The partial update that was sent

    Raises:
        ConfigurationError: If the element type has no such property
        DocumentValidationError: If the value is invalid for the property
    """
    field = next((f for f in property_fields(element) if f.key == key), None)
    if field is None:
        raise ConfigurationError(
            f"{element.element_type!r} elements have no editable property {key!r}"
        )

    properties = {**element.properties.to_dict(), key: _COERCERS[field.kind](value)}
    update = {"properties": properties}
    # Validate before anything leaves the editor
    element.with_updates(update)
    on_update(element.id, update)
    return update


def change_size(
    element: BaseElement,
    on_update: UpdateCallback,
    width: float | None = None,
    height: float | None = None,
) -> dict[str, Any]:
    """
    Resize an element.

    Args:
        element: Current element
        on_update: Called as (element_id, {"size": {...}})
        width: New width (unchanged if None)
        height: New height (unchanged if None)

    Returns:
        The partial update that was sent

    Raises:
        DocumentValidationError: If a dimension is not positive
    """
    size = {
        "width": element.size.width if width is None else width,
        "height": element.size.height if height is None else height,
    }
    update = {"size": size}
    element.with_updates(update)
    on_update(element.id, update)
    return update
