"""Tests for element, canvas and page rendering."""

from unittest.mock import patch

import pytest

from pageforge.elements import Position, create_element, element_from_dict
from pageforge.formats import LandingPageDocument, Theme, create_default_document
from pageforge.media import ResolvedMedia
from pageforge.rendering import renderer
from pageforge.rendering import (
    render_canvas,
    render_element,
    render_page,
    safe_link,
)


def published(*elements) -> LandingPageDocument:
    document = create_default_document("album-1", "Night Drive", elements)
    return document.with_changes(is_published=True)


class TestRenderElement:
    """Tests for render_element()."""

    def test_text_uses_theme_and_typography(self):
        element = create_element("text").with_updates(
            {"properties": {"content": "Out now", "fontSize": 28, "fontWeight": "bold"}}
        )
        html = render_element(element, Theme(textColor="#123456"))
        assert "Out now" in html
        assert "font-size: 28px" in html
        assert "font-weight: bold" in html
        assert "color: #123456" in html

    def test_text_is_escaped(self):
        element = create_element("text").with_updates(
            {"properties": {"content": "<script>alert(1)</script>"}}
        )
        html = render_element(element, Theme())
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_image_placeholder_when_src_empty(self):
        html = render_element(create_element("image"), Theme())
        assert 'src="/placeholder.svg"' in html
        assert 'alt="Image"' in html

    def test_music_player_resolves_track(self, media):
        element = create_element("music_player").with_updates({"properties": {"trackId": "track-2"}})
        html = render_element(element, Theme(), media)
        assert "Closing" in html
        assert "<audio controls" in html
        assert "https://cdn.example.com/closing.mp3" in html

    def test_track_not_found(self):
        # An element pointing at a deleted track with an empty listing
        element = element_from_dict(
            {"id": "a", "type": "music_player", "properties": {"trackId": "missing"}}
        )
        html = render_element(element, Theme(), ResolvedMedia())
        assert "Track not found" in html
        assert "<audio" not in html

    def test_no_track_selected(self, media):
        html = render_element(create_element("music_player"), Theme(), media)
        assert "No track selected" in html

    def test_video_states(self, media):
        video = create_element("video")
        assert "No video selected" in render_element(video, Theme(), media)
        missing = video.with_updates({"properties": {"videoId": "gone"}})
        assert "Video not found" in render_element(missing, Theme(), media)
        found = video.with_updates({"properties": {"videoId": "video-1"}})
        html = render_element(found, Theme(), media)
        assert "Live at the Club" in html
        assert "<video controls" in html

    def test_button_with_link(self):
        element = create_element("button").with_updates(
            {"properties": {"text": "Buy", "link": "https://shop.example.com"}}
        )
        html = render_element(element, Theme(accentColor="#ff0066"))
        assert '<a class="pf-button" href="https://shop.example.com"' in html
        assert 'target="_blank"' in html
        assert "background-color: #ff0066" in html

    @pytest.mark.parametrize("link", ["", "   ", "javascript:alert(1)", "data:text/html,hi"])
    def test_button_without_usable_link_is_inert(self, link):
        element = create_element("button").with_updates(
            {"properties": {"text": "Soon", "link": link}}
        )
        html = render_element(element, Theme())
        assert "<a " not in html
        assert "disabled" in html
        assert "Soon" in html

    def test_text_with_fractional_font_size(self):
        element = element_from_dict(
            {"type": "text", "id": "element_t", "properties": {"content": "Hello", "fontSize": 14.5}}
        )
        html = render_element(element, Theme())
        assert "Hello" in html
        assert "font-size: 14.5px" in html
        assert "Unknown element" not in html

    def test_text_with_cleared_font_size(self):
        element = element_from_dict(
            {"type": "text", "id": "element_t", "properties": {"content": "Hello", "fontSize": None}}
        )
        assert "font-size: 16px" in render_element(element, Theme())

    def test_button_with_empty_text(self):
        element = create_element("button").with_updates(
            {"properties": {"text": "", "link": ""}}
        )
        html = render_element(element, Theme())
        assert "Click me" in html
        assert "disabled" in html

    def test_unknown_element_placeholder(self):
        element = element_from_dict({"type": "carousel", "id": "element_c"})
        assert "Unknown element" in render_element(element, Theme())

    def test_render_failure_falls_back_to_placeholder(self):
        element = create_element("text")
        def broken(element, media):
            raise RuntimeError("boom")

        with patch.dict(renderer._RENDERERS, {"text": ("elements/text.html", broken)}):
            html = render_element(element, Theme())
        assert "Unknown element" in html


class TestSafeLink:
    """Tests for safe_link()."""

    @pytest.mark.parametrize("link", [
        "https://example.com",
        "http://example.com/a?b=c",
        "mailto:band@example.com",
        "/album-preview/album-1",
        "tickets.html",
    ])
    def test_allowed(self, link):
        assert safe_link(link) == link

    @pytest.mark.parametrize("link", [None, "", "javascript:alert(1)", "JAVASCRIPT:x", "ftp://x"])
    def test_rejected(self, link):
        assert safe_link(link) is None


class TestRenderCanvas:
    """Tests for render_canvas()."""

    def test_empty_editable_canvas(self):
        html = render_canvas(create_default_document("album-1", "A"))
        assert "Empty Canvas" in html
        assert "pf-element" not in html

    def test_elements_in_array_order(self):
        a = create_element("text", position=Position(x=12.5, y=30))
        b = create_element("image")
        html = render_canvas(create_default_document("album-1", "A", [a, b]))
        assert html.index(a.id) < html.index(b.id)
        assert "left: 12.5px; top: 30px;" in html

    def test_selection_affordances(self):
        a, b = create_element("text"), create_element("image")
        html = render_canvas(create_default_document("album-1", "A", [a, b]), selected_id=b.id)
        assert html.count("pf-element--selected") == 1
        assert 'data-action="delete"' in html
        assert 'data-action="move"' in html
        assert 'data-action="properties"' in html

    def test_read_only_canvas_has_no_affordances(self):
        element = create_element("text")
        html = render_canvas(
            create_default_document("album-1", "A", [element]),
            selected_id=element.id,
            editable=False,
        )
        assert "data-element-id" not in html
        assert "data-action" not in html
        assert "pf-element--selected" not in html

    def test_empty_read_only_canvas_has_no_empty_state(self):
        html = render_canvas(create_default_document("album-1", "A"), editable=False)
        assert "Empty Canvas" not in html

    def test_element_fragment_shared_by_editor_and_page(self, media):
        element = create_element("music_player").with_updates({"properties": {"trackId": "track-1"}})
        document = published(element)
        fragment = str(render_element(element, document.theme, media))

        assert fragment in render_canvas(document, media, selected_id=element.id)
        assert fragment in render_page(document, media)

    def test_unknown_element_does_not_break_canvas(self):
        good = create_element("text")
        bad = element_from_dict({"type": "carousel", "id": "element_c"})
        html = render_canvas(create_default_document("album-1", "A", [good, bad]))
        assert "Enter your text" in html
        assert "Unknown element" in html


class TestRenderPage:
    """Tests for render_page()."""

    def test_published_page(self, media):
        document = published(create_element("text")).with_changes(
            theme={"backgroundColor": "#101010", "textColor": "#eeeeee"}
        )
        html = render_page(document, media)
        assert html.startswith("<!DOCTYPE html>")
        assert "<h1" in html
        assert "Night Drive - Landing Page" in html
        assert "background-color: #101010" in html
        assert "Enter your text" in html

    def test_unpublished_page_is_not_rendered(self):
        document = create_default_document("album-1", "Secret")
        html = render_page(document)
        assert "Page Not Available" in html
        assert "Secret" not in html

    def test_missing_page(self):
        assert "Page Not Available" in render_page(None)

    def test_title_is_escaped(self):
        document = published().with_changes(title="<b>Loud</b>")
        html = render_page(document)
        assert "<b>Loud</b>" not in html
        assert "&lt;b&gt;Loud&lt;/b&gt;" in html

    def test_stored_css_in_theme_is_not_rendered(self):
        record = published().to_record()
        record["theme"]["backgroundColor"] = "red; background-image: url(https://evil.example.com/x)"
        html = render_page(LandingPageDocument.from_record(record))
        assert "evil.example.com" not in html
        assert "background-color: #ffffff" in html
