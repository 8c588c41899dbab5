"""Builders for the messages sequencer services exchange."""

import time
from typing import Any

from pydantic import BaseModel

from routine.engine.block import Block
from routine.models.envelope import Envelope
from routine.models.messages import PAYLOAD_REGISTRY, BlockStatus, MessageType, Tick
from routine.models.topics import Topics


def create_message(
    *,
    sender: str,
    topic: str,
    msg_type: MessageType,
    payload: BaseModel | dict[str, Any],
    tick: int = 0,
) -> Envelope:
    """Wrap a typed or dict payload in an Envelope."""
    body = payload.model_dump() if isinstance(payload, BaseModel) else dict(payload)
    return Envelope(sender=sender, topic=topic, type=msg_type, tick=tick, payload=body)


def tick_message(sender: str, tick_number: int) -> Envelope:
    """A Tick broadcast for `/system/tick`."""
    tick = Tick(tick_number=tick_number, timestamp=time.time())
    return create_message(
        sender=sender, topic=Topics.TICK, msg_type=MessageType.TICK, payload=tick, tick=tick_number
    )


def block_status_message(sender: str, block: Block, tick: int) -> Envelope:
    """Report a Block's activity and playhead on `/routine/status`.

    Block ids of any type are sent as their string form.
    """
    status = BlockStatus(
        routine=sender,
        block_id=str(block.id),
        active=block.is_active,
        index=block.index,
        tick=tick,
    )
    return create_message(
        sender=sender,
        topic=Topics.STATUS,
        msg_type=MessageType.BLOCK_STATUS,
        payload=status,
        tick=tick,
    )


def parse_payload(envelope: Envelope) -> BaseModel:
    """Validate the payload against the model registered for its type.

    Raises pydantic's ValidationError (a ValueError) for a bad payload.
    """
    return PAYLOAD_REGISTRY[envelope.type].model_validate(envelope.payload)
