"""
ImageElement - Image block; falls back to a placeholder asset when `src` is empty.
"""

from typing import Literal

from pydantic import Field

from .base import BaseElement, ElementProperties


class ImageProperties(ElementProperties):
    """Image source URL and alternative text."""
    src: str = Field(default='')
    alt: str = Field(default='Image')


class ImageElement(BaseElement):
    """Image element."""

    element_type: Literal['image'] = Field(default='image', alias='type')
    properties: ImageProperties = Field(default_factory=ImageProperties)
