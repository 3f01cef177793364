"""Tests for the per-type property editors."""

import pytest

from pageforge.elements import create_element, element_from_dict
from pageforge.errors import ConfigurationError, DocumentValidationError
from pageforge.media import ResolvedMedia
from pageforge.properties import FieldKind, change_property, change_size, property_fields


class Recorder:
    """Collects on_update calls."""

    def __init__(self):
        self.calls = []

    def __call__(self, element_id, update):
        self.calls.append((element_id, update))


class TestPropertyFields:
    """Tests for property_fields()."""

    def test_text_fields(self):
        fields = property_fields(create_element("text"))
        assert [(f.key, f.kind) for f in fields] == [
            ("content", FieldKind.TEXTAREA),
            ("fontSize", FieldKind.NUMBER),
            ("fontWeight", FieldKind.SELECT),
        ]
        assert [o.value for o in fields[2].options] == ["normal", "bold"]

    def test_track_picker_lists_tracks(self, media):
        field = property_fields(create_element("music_player"), media)[0]
        assert field.key == "trackId"
        assert [(o.value, o.label) for o in field.options] == [
            ("track-1", "Opening"),
            ("track-2", "Closing"),
        ]
        assert not field.is_empty_picker

    def test_empty_track_picker(self):
        field = property_fields(create_element("music_player"), ResolvedMedia())[0]
        assert field.is_empty_picker
        assert field.empty_message == "No tracks available"

    def test_empty_video_picker(self):
        field = property_fields(create_element("video"))[0]
        assert field.empty_message == "No videos available"

    def test_unknown_element_has_no_editor(self):
        element = element_from_dict({"type": "carousel", "id": "element_c"})
        assert property_fields(element) == []

    def test_to_dict(self):
        data = property_fields(create_element("button"))[1].to_dict()
        assert data["key"] == "link"
        assert data["kind"] == "url"
        assert data["value"] == ""


class TestChangeProperty:
    """Tests for change_property()."""

    def test_update_is_applied_immediately_with_all_properties(self):
        element = create_element("text")
        recorder = Recorder()

        update = change_property(element, "content", "Out now", recorder)

        assert recorder.calls == [(element.id, update)]
        assert update == {
            "properties": {"content": "Out now", "fontSize": 16, "fontWeight": "normal"}
        }

    def test_number_is_coerced(self):
        recorder = Recorder()
        update = change_property(create_element("text"), "fontSize", "24", recorder)
        assert update["properties"]["fontSize"] == 24

    @pytest.mark.parametrize("value, expected", [("16.5", 16.5), (12.25, 12.25), (" 18 ", 18)])
    def test_decimal_number_accepted(self, value, expected):
        recorder = Recorder()
        update = change_property(create_element("text"), "fontSize", value, recorder)
        assert update["properties"]["fontSize"] == expected

    @pytest.mark.parametrize("value", ["big", "0", -3, None, True])
    def test_invalid_number_rejected(self, value):
        recorder = Recorder()
        with pytest.raises(DocumentValidationError):
            change_property(create_element("text"), "fontSize", value, recorder)
        assert recorder.calls == []

    def test_invalid_choice_rejected(self):
        recorder = Recorder()
        with pytest.raises(DocumentValidationError):
            change_property(create_element("text"), "fontWeight", "heavy", recorder)
        assert recorder.calls == []

    def test_url_is_stripped(self):
        update = change_property(create_element("button"), "link", "  https://x.test  ", Recorder())
        assert update["properties"]["link"] == "https://x.test"

    def test_track_selection(self):
        update = change_property(create_element("music_player"), "trackId", "track-2", Recorder())
        assert update == {"properties": {"trackId": "track-2"}}

    def test_foreign_property_keys_survive(self):
        element = element_from_dict({
            "type": "video",
            "id": "element_v",
            "properties": {"videoId": "", "autoplay": True},
        })
        update = change_property(element, "videoId", "video-1", Recorder())
        assert update["properties"] == {"videoId": "video-1", "autoplay": True}

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError):
            change_property(create_element("image"), "width", 10, Recorder())


class TestChangeSize:
    """Tests for change_size()."""

    def test_partial_resize(self):
        element = create_element("image")
        recorder = Recorder()
        update = change_size(element, recorder, width=320)
        assert update == {"size": {"width": 320, "height": 100}}
        assert recorder.calls == [(element.id, update)]

    def test_non_positive_rejected(self):
        recorder = Recorder()
        with pytest.raises(DocumentValidationError):
            change_size(create_element("image"), recorder, height=0)
        assert recorder.calls == []
