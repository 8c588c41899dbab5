"""Envelope validation."""

from pydantic import ValidationError

from routine.models.envelope import Envelope
from routine.models.messages import PAYLOAD_REGISTRY, MessageType
from routine.models.topics import Topics

# Where each message type is allowed to travel
_TOPIC_FOR_TYPE: dict[MessageType, str] = {
    MessageType.TICK: Topics.TICK,
    MessageType.BLOCK_STATUS: Topics.STATUS,
}


def validate_message(envelope: Envelope) -> list[str]:
    """Return the problems found with ``envelope``; empty means valid."""
    errors: list[str] = []

    if not envelope.sender.strip():
        errors.append("'from' field must not be empty")

    expected_topic = _TOPIC_FOR_TYPE.get(envelope.type)
    if expected_topic is not None and envelope.topic != expected_topic:
        errors.append(
            f"{envelope.type} messages belong on {expected_topic}, not {envelope.topic!r}"
        )

    model_class = PAYLOAD_REGISTRY[envelope.type]
    try:
        model_class.model_validate(envelope.payload)
    except ValidationError as e:
        errors.extend(
            f"payload.{'.'.join(str(x) for x in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )

    return errors
