"""
ButtonElement - Call-to-action button styled with the theme's accent color.
"""

from typing import Literal

from pydantic import Field

from .base import BaseElement, ElementProperties


class ButtonProperties(ElementProperties):
    """Label and optional target URL. An empty link makes the button inert."""
    text: str = Field(default='Click me')
    link: str = Field(default='')


class ButtonElement(BaseElement):
    """Button element."""

    element_type: Literal['button'] = Field(default='button', alias='type')
    properties: ButtonProperties = Field(default_factory=ButtonProperties)
