"""
TextElement - Static text block rendered in the theme's text color.
"""

import math
from typing import Any, Literal, Union

from pydantic import Field, field_validator

from .base import BaseElement, ElementProperties

DEFAULT_FONT_SIZE = 16


class TextProperties(ElementProperties):
    """Typography and content of a text element."""
    content: str = Field(default='Enter your text')
    font_size: Union[int, float] = Field(default=DEFAULT_FONT_SIZE, gt=0, alias='fontSize')
    font_weight: Literal['normal', 'bold'] = Field(default='normal', alias='fontWeight')

    @field_validator('font_size', mode='before')
    @classmethod
    def _default_font_size(cls, v: Any) -> Any:
        """Cleared or non-numeric sizes (stored as null by other clients) fall back to 16."""
        if isinstance(v, str):
            try:
                v = float(v.strip())
            except ValueError:
                return DEFAULT_FONT_SIZE
        if v is None or isinstance(v, bool) or not isinstance(v, (int, float)):
            return DEFAULT_FONT_SIZE
        if not math.isfinite(v):
            return DEFAULT_FONT_SIZE
        return v


class TextElement(BaseElement):
    """
    Text element.

    Serialization format:
    {
        "type": "text",
        "properties": {"content": "Enter your text", "fontSize": 16, "fontWeight": "normal"},
        ...base element properties
    }
    """

    element_type: Literal['text'] = Field(default='text', alias='type')
    properties: TextProperties = Field(default_factory=TextProperties)
