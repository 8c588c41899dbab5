"""Envelope — what every sequencer message travels in."""

import time
import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from routine.models.messages import MessageType


class Envelope(BaseModel):
    """Header fields plus a typed payload dict.

    ``sender`` is written as ``"from"`` on the wire; use ``to_wire`` and
    ``from_wire`` rather than dumping the model by hand.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    sender: str = Field(alias="from")
    topic: str
    type: MessageType
    tick: int = Field(default=0, ge=0)
    timestamp: float = Field(default_factory=time.time)
    payload: dict[str, Any] = Field(default_factory=dict)

    def to_wire(self) -> bytes:
        return self.model_dump_json(by_alias=True).encode()

    @classmethod
    def from_wire(cls, data: bytes) -> "Envelope":
        return cls.model_validate_json(data)
