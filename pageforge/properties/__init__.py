"""Property editors for landing page elements."""

from .editors import (
    FieldKind,
    FieldOption,
    PropertyField,
    change_property,
    change_size,
    property_fields,
)

__all__ = [
    "FieldKind",
    "FieldOption",
    "PropertyField",
    "change_property",
    "change_size",
    "property_fields",
]
