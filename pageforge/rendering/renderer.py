"""
Element and page rendering.

One renderer serves both the designer canvas and the public preview: the
element fragment is identical in both, only the canvas wrapper adds the
editing affordances (selection outline, handle toolbar, empty state).

Rendering never fails for a single element. Unknown elements and elements
whose template raises are drawn as a placeholder.
"""

import logging
from typing import Any, Callable, Optional
from urllib.parse import urlsplit

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from pageforge.config import settings
from pageforge.elements import BaseElement
from pageforge.formats import LandingPageDocument, Theme
from pageforge.media import ResolvedMedia

logger = logging.getLogger(__name__)

SAFE_LINK_SCHEMES = ("http", "https", "mailto")

NOT_AVAILABLE_MESSAGE = "This album page is not available or has not been published yet."

_environment: Environment | None = None


def get_environment() -> Environment:
    """Get the shared Jinja2 environment (created on first use)."""
    global _environment
    if _environment is None:
        _environment = Environment(
            loader=FileSystemLoader(str(settings.TEMPLATES_DIR)),
            autoescape=select_autoescape(["html", "css"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
    return _environment


def _px(value: float) -> str:
    return f"{value:g}"


def safe_link(link: str | None) -> Optional[str]:
    """
    Check a button target.

    Args:
        link: URL entered by the artist

    Returns:
        The stripped URL when it is http(s), mailto or relative, else None
    """
    if not link:
        return None
    link = link.strip()
    if not link:
        return None
    try:
        parts = urlsplit(link)
    except ValueError:
        return None
    if parts.scheme == "":
        return link
    if parts.scheme.lower() in SAFE_LINK_SCHEMES:
        return link
    return None


# --- Per-type template contexts ---

def _text_context(element: BaseElement, media: ResolvedMedia) -> dict[str, Any]:
    properties = element.properties
    return {
        "content": properties.content or "Enter your text",
        "font_size": _px(properties.font_size),
        "font_weight": properties.font_weight,
    }


def _image_context(element: BaseElement, media: ResolvedMedia) -> dict[str, Any]:
    properties = element.properties
    return {
        "src": properties.src or settings.PLACEHOLDER_IMAGE,
        "alt": properties.alt or "Image",
    }


def _music_player_context(element: BaseElement, media: ResolvedMedia) -> dict[str, Any]:
    track_id = element.properties.track_id
    track = media.track(track_id)
    return {
        "track": track,
        "message": "No track selected" if not track_id else "Track not found",
    }


def _video_context(element: BaseElement, media: ResolvedMedia) -> dict[str, Any]:
    video_id = element.properties.video_id
    video = media.video(video_id)
    return {
        "video": video,
        "message": "No video selected" if not video_id else "Video not found",
    }


def _button_context(element: BaseElement, media: ResolvedMedia) -> dict[str, Any]:
    return {
        "text": element.properties.text or "Click me",
        "href": safe_link(element.properties.link),
    }


ContextBuilder = Callable[[BaseElement, ResolvedMedia], dict[str, Any]]

# Template registry, one entry per element type
_RENDERERS: dict[str, tuple[str, ContextBuilder]] = {
    "text": ("elements/text.html", _text_context),
    "image": ("elements/image.html", _image_context),
    "music_player": ("elements/music_player.html", _music_player_context),
    "video": ("elements/video.html", _video_context),
    "button": ("elements/button.html", _button_context),
}


def _render_placeholder(element: BaseElement, reason: str) -> Markup:
    template = get_environment().get_template("elements/unknown.html")
    return Markup(template.render(element=element, reason=reason))


def render_element(
    element: BaseElement,
    theme: Theme,
    media: ResolvedMedia | None = None,
) -> Markup:
    """
    Render the content of one element.

    Args:
        element: Element to render
        theme: Document theme
        media: Tracks and videos used to resolve references

    Returns:
        HTML fragment (placeholder for unknown or unrenderable elements)
    """
    entry = _RENDERERS.get(element.element_type) if element.is_known else None
    if entry is None:
        return _render_placeholder(element, getattr(element, "reason", ""))

    template_name, build_context = entry
    try:
        context = build_context(element, media or ResolvedMedia())
        template = get_environment().get_template(template_name)
        return Markup(template.render(theme=theme, **context))
    except Exception:
        logger.exception(f"Failed to render {element.element_type} element {element.id}")
        return _render_placeholder(element, "render failed")


def render_canvas(
    document: LandingPageDocument,
    media: ResolvedMedia | None = None,
    *,
    selected_id: str | None = None,
    editable: bool = True,
) -> Markup:
    """
    Render the positioned elements of a document.

    Args:
        document: Document to render
        media: Tracks and videos used to resolve references
        selected_id: Element drawn with the selection outline and handles
        editable: Include editing affordances (False for the public page)

    Returns:
        HTML fragment of the canvas
    """
    items = []
    for element in document.elements:
        items.append({
            "id": element.id,
            "type": element.element_type if element.is_known else "unknown",
            "x": _px(element.position.x),
            "y": _px(element.position.y),
            "width": _px(element.size.width),
            "height": _px(element.size.height),
            "selected": editable and element.id == selected_id,
            "html": render_element(element, document.theme, media),
        })

    template = get_environment().get_template("canvas.html")
    return Markup(template.render(
        items=items,
        theme=document.theme,
        editable=editable,
        height=settings.CANVAS_HEIGHT,
    ))


def render_not_available(message: str = NOT_AVAILABLE_MESSAGE) -> str:
    """Render the page shown when no published landing page exists."""
    return get_environment().get_template("not_available.html").render(message=message)


def render_page(
    document: LandingPageDocument | None,
    media: ResolvedMedia | None = None,
) -> str:
    """
    Render the public landing page of an album.

    Args:
        document: Published document, or None
        media: Tracks and videos used to resolve references

    Returns:
        Full HTML page; the not-available page unless the document is published
    """
    if document is None or not document.is_published:
        return render_not_available()

    canvas = render_canvas(document, media, editable=False)
    return get_environment().get_template("page.html").render(
        title=document.title,
        theme=document.theme,
        canvas=canvas,
    )


def element_stylesheet() -> Markup:
    """Stylesheet used by the canvas and page markup."""
    return Markup(get_environment().get_template("styles.css").render())
