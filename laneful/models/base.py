"""
Base model for request payloads sent to the Laneful API.

Optional fields are omitted from the wire body when they hold an empty
value instead of being sent as null or "".
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, SerializationInfo, model_serializer


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    if isinstance(value, int):
        return value == 0
    return False


class WireModel(BaseModel):
    """
    Frozen pydantic model with empty-field omission on serialization.

    Subclasses list fields that must always be present in
    ``always_serialized`` and fields that are dropped only when None in
    ``omit_when_none``. Nested models are dropped only when None.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    always_serialized: ClassVar[frozenset[str]] = frozenset()
    omit_when_none: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _omit_empty_fields(self, handler, info: SerializationInfo) -> dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            key = field.alias if info.by_alias and field.alias else name
            if key not in data or name in self.always_serialized:
                continue
            value = getattr(self, name)
            if value is None:
                data.pop(key)
            elif name in self.omit_when_none or isinstance(value, BaseModel):
                continue
            elif _is_empty(value):
                data.pop(key)
        return data
