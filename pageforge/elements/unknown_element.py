"""
UnknownElement - Stand-in for persisted elements the model cannot type.

Covers elements with a `type` outside the closed set (data written by a newer
or foreign client) and known types whose fields fail validation. The raw
record (even one that is not an object) is kept and written back unchanged;
the renderer shows a placeholder.
"""

import copy
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, model_serializer

from .base import BaseElement, Position, Size, merge_updates, new_element_id


def _lenient(model: type[BaseModel], value: Any) -> Optional[BaseModel]:
    """Validate a nested value, returning None instead of raising."""
    if value is None:
        return None
    try:
        return model.model_validate(value)
    except ValidationError:
        return None


class UnknownElement(BaseElement):
    """
    Element of an unrecognized type (or with invalid fields).

    Position and size are read best-effort so the placeholder can still be
    placed and dragged; everything else is only carried along.
    """

    element_type: str = Field(default='unknown', alias='type')
    properties: dict[str, Any] = Field(default_factory=dict)

    # Raw persisted record, re-emitted verbatim on serialization
    raw: Any = Field(default=None, exclude=True)
    verbatim: bool = Field(default=False, exclude=True)
    # Why the record could not be typed (for logs and the placeholder)
    reason: str = Field(default='', exclude=True)

    @model_serializer(mode='wrap')
    def _serialize(self, handler):
        if self.verbatim:
            return copy.deepcopy(self.raw)
        return handler(self)

    @classmethod
    def from_raw(cls, data: Any, reason: str = '') -> 'UnknownElement':
        """
        Wrap a raw element record.

        Records that are not objects (a bare number, string or list) are
        written back unchanged too; the placeholder gets a generated id and
        default geometry until it is edited.

        Args:
            data: Persisted element record
            reason: Human-readable cause (unknown type, validation message)

        Returns:
            UnknownElement keeping `data` for re-serialization
        """
        if not isinstance(data, Mapping):
            return cls(id=new_element_id(), raw=copy.deepcopy(data), verbatim=True, reason=reason)

        raw = copy.deepcopy(dict(data))
        element_id = raw.get('id')
        if not isinstance(element_id, str) or not element_id:
            element_id = new_element_id()
            raw['id'] = element_id

        properties = raw.get('properties')
        return cls(
            element_type=str(raw.get('type', 'unknown')),
            id=element_id,
            position=_lenient(Position, raw.get('position')) or Position(),
            size=_lenient(Size, raw.get('size')) or Size(),
            properties=properties if isinstance(properties, dict) else {},
            raw=raw,
            verbatim=True,
            reason=reason,
        )

    def with_updates(self, updates: Mapping[str, Any]) -> BaseElement:
        """Apply the update to the raw record and re-type it."""
        # Import here to avoid circular imports
        from pageforge.elements import element_from_dict

        if isinstance(self.raw, dict):
            record = copy.deepcopy(self.raw)
        else:
            # An edited non-object record becomes a regular element record
            record = {
                'type': self.element_type,
                'id': self.id,
                'position': self.position.model_dump(by_alias=True, mode='json'),
                'size': self.size.model_dump(by_alias=True, mode='json'),
                'properties': copy.deepcopy(self.properties),
            }
        return element_from_dict(merge_updates(record, updates))

    @property
    def is_known(self) -> bool:
        return False
