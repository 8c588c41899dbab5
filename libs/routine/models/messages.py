"""Message types and payload models exchanged by sequencer services."""

from enum import StrEnum

from pydantic import BaseModel, Field


class MessageType(StrEnum):
    """All message types on the sequencer bus."""

    TICK = "tick"
    BLOCK_STATUS = "block_status"


class Tick(BaseModel):
    """Clock broadcast; each one drives a single Routine tick."""

    tick_number: int = Field(gt=0)
    timestamp: float


class BlockStatus(BaseModel):
    """A Block's activity or playhead changed during a tick."""

    routine: str
    block_id: str
    active: bool
    index: int = Field(ge=0)
    tick: int = Field(ge=0)


# Registry mapping message types to their payload models
PAYLOAD_REGISTRY: dict[MessageType, type[BaseModel]] = {
    MessageType.TICK: Tick,
    MessageType.BLOCK_STATUS: BlockStatus,
}
