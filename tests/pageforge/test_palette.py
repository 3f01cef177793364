"""Tests for the element palette."""

import pytest

from pageforge.elements import ELEMENT_TYPES, ElementType
from pageforge.errors import UnknownElementTypeError
from pageforge.formats import create_default_document
from pageforge.palette import PALETTE, add_element, get_entry


class TestPalette:
    """Tests for the palette catalog."""

    def test_one_entry_per_element_type(self):
        assert [entry.element_type for entry in PALETTE] == list(ELEMENT_TYPES)

    def test_labels(self):
        assert [entry.label for entry in PALETTE] == [
            "Text", "Image", "Music Player", "Video", "Button",
        ]
        assert get_entry(ElementType.VIDEO).description == "Add video content"

    def test_to_dict(self):
        assert get_entry("button").to_dict() == {
            "type": "button",
            "label": "Button",
            "description": "Add interactive button",
            "icon": "smart_button",
        }

    def test_unknown_entry(self):
        with pytest.raises(UnknownElementTypeError):
            get_entry("carousel")


class TestAddElement:
    """Tests for adding elements from the palette."""

    def test_add_text_to_empty_page(self):
        document = create_default_document("album-1", "Night Drive")

        document, element = add_element(document, "text")

        assert len(document.elements) == 1
        record = document.to_record()["elements"][0]
        assert record["type"] == "text"
        assert record["position"] == {"x": 100, "y": 100}
        assert record["size"] == {"width": 200, "height": 100}
        assert record["properties"] == {
            "content": "Enter your text",
            "fontSize": 16,
            "fontWeight": "normal",
        }
        assert record["id"] == element.id

    def test_new_element_is_topmost(self):
        document = create_default_document("album-1", "A")
        document, first = add_element(document, "image")
        document, second = add_element(document, "button")
        assert document.elements[-1].id == second.id
        assert first.id != second.id

    def test_original_document_unchanged(self):
        document = create_default_document("album-1", "A")
        add_element(document, "video")
        assert document.elements == ()

    def test_unknown_type(self):
        document = create_default_document("album-1", "A")
        with pytest.raises(UnknownElementTypeError):
            add_element(document, "carousel")
