"""
Wire decoding helpers.

Display names and chat bodies arrive base64-encoded. Models list those keys
in ``wire_text_fields``; from_wire() decodes them (nested models included),
while normal construction takes plain text.
"""

import base64
from typing import Any, ClassVar

from pydantic import BaseModel, ValidationInfo, model_validator


def decode_base64_text(value: Any) -> str:
    if not isinstance(value, (str, bytes)):
        raise ValueError(f"expected base64 string, got {type(value).__name__}")
    try:
        return base64.b64decode(value, validate=True).decode("utf-8")
    except ValueError as e:
        raise ValueError(f"invalid base64 text: {e}")


class WireModel(BaseModel):
    wire_text_fields: ClassVar[dict[str, str]] = {}

    model_config = {"populate_by_name": True, "frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _decode_wire_text(cls, data: Any, info: ValidationInfo) -> Any:
        if not cls.wire_text_fields or not isinstance(data, dict):
            return data
        if not (info.context or {}).get("wire"):
            return data
        data = dict(data)
        for wire_key, field_name in cls.wire_text_fields.items():
            if data.get(wire_key) is not None:
                data[field_name] = decode_base64_text(data.pop(wire_key))
        return data

    @classmethod
    def from_wire(cls, data: Any):
        """Validate a decoded-JSON body as it arrives from the meeting socket."""
        return cls.model_validate(data, context={"wire": True})
