from routine.models.envelope import Envelope
from routine.models.messages import PAYLOAD_REGISTRY, BlockStatus, MessageType, Tick
from routine.models.topics import Topics, from_nats_subject, to_nats_subject

__all__ = [
    "BlockStatus",
    "Envelope",
    "MessageType",
    "PAYLOAD_REGISTRY",
    "Tick",
    "Topics",
    "from_nats_subject",
    "to_nats_subject",
]
