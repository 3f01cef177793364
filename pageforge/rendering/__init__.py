"""HTML rendering of elements, the designer canvas and the public page."""

from .renderer import (
    NOT_AVAILABLE_MESSAGE,
    element_stylesheet,
    render_canvas,
    render_element,
    render_not_available,
    render_page,
    safe_link,
)

__all__ = [
    "NOT_AVAILABLE_MESSAGE",
    "element_stylesheet",
    "render_canvas",
    "render_element",
    "render_not_available",
    "render_page",
    "safe_link",
]
