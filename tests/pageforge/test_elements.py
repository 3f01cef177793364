"""Tests for the element model."""

import pytest
from pydantic import ValidationError

from pageforge.elements import (
    ELEMENT_TYPES,
    ButtonElement,
    ElementType,
    MusicPlayerElement,
    Position,
    TextElement,
    UnknownElement,
    create_element,
    element_from_dict,
    get_element_class,
)
from pageforge.errors import ConfigurationError, DocumentValidationError, UnknownElementTypeError


class TestCreateElement:
    """Tests for create_element()."""

    @pytest.mark.parametrize("element_type", ELEMENT_TYPES)
    def test_defaults_for_every_type(self, element_type):
        element = create_element(element_type)
        assert element.element_type == element_type
        assert element.id.startswith("element_")
        assert element.position.x == 100
        assert element.position.y == 100
        assert element.size.width == 200
        assert element.size.height == 100

    def test_type_specific_defaults(self):
        text = create_element("text").to_dict()["properties"]
        assert text == {"content": "Enter your text", "fontSize": 16, "fontWeight": "normal"}
        assert create_element("image").to_dict()["properties"] == {"src": "", "alt": "Image"}
        assert create_element("music_player").to_dict()["properties"] == {"trackId": ""}
        assert create_element("video").to_dict()["properties"] == {"videoId": ""}
        assert create_element("button").to_dict()["properties"] == {"text": "Click me", "link": ""}

    def test_accepts_enum(self):
        element = create_element(ElementType.BUTTON)
        assert isinstance(element, ButtonElement)

    def test_ids_are_unique(self):
        ids = {create_element("text").id for _ in range(50)}
        assert len(ids) == 50

    @pytest.mark.parametrize("element_type", ["carousel", "", None, 3])
    def test_unknown_type_raises(self, element_type):
        with pytest.raises(UnknownElementTypeError):
            create_element(element_type)

    def test_unknown_type_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            create_element("carousel")


class TestElementFromDict:
    """Tests for element_from_dict()."""

    def test_known_type(self):
        element = element_from_dict({
            "type": "music_player",
            "id": "element_1",
            "position": {"x": 10, "y": 20},
            "size": {"width": 300, "height": 80},
            "properties": {"trackId": "track-9"},
        })
        assert isinstance(element, MusicPlayerElement)
        assert element.properties.track_id == "track-9"

    def test_unknown_type_degrades(self):
        data = {
            "type": "carousel",
            "id": "element_c",
            "position": {"x": 5, "y": 6},
            "size": {"width": 50, "height": 60},
            "properties": {"slides": [1, 2, 3]},
        }
        element = element_from_dict(data)
        assert isinstance(element, UnknownElement)
        assert element.is_known is False
        assert element.element_type == "carousel"
        assert element.position == Position(x=5, y=6)
        assert element.to_dict() == data

    def test_invalid_known_type_degrades(self):
        data = {
            "type": "text",
            "id": "element_t",
            "position": {"x": 0, "y": 0},
            "size": {"width": 100, "height": 40},
            "properties": {"content": "Hi", "fontSize": -4},
        }
        element = element_from_dict(data)
        assert isinstance(element, UnknownElement)
        assert element.to_dict() == data

    def test_missing_id_is_generated(self):
        element = element_from_dict({"type": "hologram"})
        assert element.id.startswith("element_")
        assert element.to_dict()["id"] == element.id

    def test_non_mapping_record(self):
        element = element_from_dict(["not", "an", "element"])
        assert isinstance(element, UnknownElement)
        assert element.id.startswith("element_")
        assert element.to_dict() == ["not", "an", "element"]

    def test_edited_scalar_record_becomes_object(self):
        element = element_from_dict(42)
        moved = element.with_updates({"position": {"x": 3, "y": 4}})
        assert isinstance(moved, UnknownElement)
        assert moved.to_dict() == {
            "type": "unknown",
            "id": element.id,
            "position": {"x": 3, "y": 4},
            "size": {"width": 200, "height": 100},
            "properties": {},
        }

    def test_fractional_font_size_is_kept(self):
        element = element_from_dict(
            {"type": "text", "id": "element_t", "properties": {"content": "Hello", "fontSize": 14.5}}
        )
        assert isinstance(element, TextElement)
        assert element.properties.font_size == 14.5
        assert element.to_dict()["properties"]["fontSize"] == 14.5

    @pytest.mark.parametrize("font_size", [None, "", "large", True, [12]])
    def test_missing_font_size_defaults(self, font_size):
        element = element_from_dict(
            {"type": "text", "id": "element_t", "properties": {"content": "Hello", "fontSize": font_size}}
        )
        assert isinstance(element, TextElement)
        assert element.properties.font_size == 16

    def test_get_element_class_falls_back(self):
        assert get_element_class("text") is TextElement
        assert get_element_class("hologram") is UnknownElement


class TestWithUpdates:
    """Tests for functional element updates."""

    def test_position_update_returns_new_element(self):
        element = create_element("text")
        moved = element.with_updates({"position": {"x": 5, "y": 7}})
        assert moved.position == Position(x=5, y=7)
        assert element.position == Position(x=100, y=100)
        assert moved.id == element.id

    def test_properties_are_replaced_whole(self):
        element = create_element("text")
        updated = element.with_updates({"properties": {"content": "Hello"}})
        assert updated.properties.content == "Hello"
        assert updated.properties.font_size == 16

    def test_type_change_rejected(self):
        element = create_element("text")
        with pytest.raises(ConfigurationError):
            element.with_updates({"type": "image"})

    def test_id_change_rejected(self):
        element = create_element("text")
        with pytest.raises(ConfigurationError):
            element.with_updates({"id": "element_other"})

    def test_same_id_is_allowed(self):
        element = create_element("text")
        assert element.with_updates({"id": element.id}).id == element.id

    def test_unknown_field_rejected(self):
        with pytest.raises(ConfigurationError):
            create_element("text").with_updates({"rotation": 45})

    def test_negative_position_rejected(self):
        with pytest.raises(DocumentValidationError):
            create_element("text").with_updates({"position": {"x": -1, "y": 0}})

    def test_unknown_element_update_keeps_raw(self):
        element = element_from_dict({"type": "carousel", "id": "element_c", "extra": True})
        moved = element.with_updates({"position": {"x": 1, "y": 2}})
        assert isinstance(moved, UnknownElement)
        assert moved.to_dict()["extra"] is True
        assert moved.to_dict()["position"] == {"x": 1, "y": 2}

    def test_elements_are_frozen(self):
        element = create_element("text")
        with pytest.raises(ValidationError):
            element.id = "element_x"


class TestContains:
    """Tests for hit testing of a single element."""

    def test_edges_are_inside(self):
        element = create_element("text")
        assert element.contains(100, 100)
        assert element.contains(300, 200)
        assert not element.contains(301, 150)
        assert not element.contains(99, 150)
