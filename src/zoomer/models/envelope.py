"""
Generic inbound envelope: an event code plus an opaque body.
"""

from typing import Any

from pydantic import BaseModel, Field


class Envelope(BaseModel):
    kind: int = Field(alias="evt")
    seq: int = 0
    payload: Any = Field(default=None, alias="body")

    model_config = {"populate_by_name": True, "frozen": True}
