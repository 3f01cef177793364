"""Pageforge document format.

This module contains the landing page document and its record serialization.
"""

from .document import (
    DEFAULT_ACCENT_COLOR,
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_TEXT_COLOR,
    LandingPageDocument,
    Theme,
    create_default_document,
)

__all__ = [
    'LandingPageDocument',
    'Theme',
    'create_default_document',
    'DEFAULT_ACCENT_COLOR',
    'DEFAULT_BACKGROUND_COLOR',
    'DEFAULT_TEXT_COLOR',
]
