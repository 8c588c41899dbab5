"""routine — a cooperative, frame-driven action sequencer."""

from routine.actions import (
    Collection,
    Function,
    Gate,
    GateOption,
    Label,
    Timing,
    TimingPair,
    Wait,
    finish,
    jump_to,
    loop,
    pause_block,
    run_block,
    set_index,
    stop_block,
    switch_block,
    wait_ticks,
    wait_ticks_random,
)
from routine.client.nats_client import RoutineBusClient
from routine.clock import Clock, FakeClock, MonotonicClock
from routine.engine import (
    Action,
    Block,
    EndBehavior,
    Flow,
    InvalidDefinitionError,
    Properties,
    Routine,
)
from routine.helpers import (
    block_status_message,
    create_message,
    parse_payload,
    tick_message,
    validate_message,
)
from routine.models import (
    PAYLOAD_REGISTRY,
    BlockStatus,
    Envelope,
    MessageType,
    Tick,
    Topics,
    from_nats_subject,
    to_nats_subject,
)
from routine.runner import run_routine

__all__ = [
    # Engine
    "Action",
    "Block",
    "EndBehavior",
    "Flow",
    "InvalidDefinitionError",
    "Properties",
    "Routine",
    # Actions
    "Collection",
    "Function",
    "Gate",
    "GateOption",
    "Label",
    "Timing",
    "TimingPair",
    "Wait",
    "finish",
    "jump_to",
    "loop",
    "pause_block",
    "run_block",
    "set_index",
    "stop_block",
    "switch_block",
    "wait_ticks",
    "wait_ticks_random",
    # Time
    "Clock",
    "FakeClock",
    "MonotonicClock",
    "run_routine",
    # Client
    "RoutineBusClient",
    # Models
    "BlockStatus",
    "Envelope",
    "MessageType",
    "PAYLOAD_REGISTRY",
    "Tick",
    "Topics",
    # Helpers
    "block_status_message",
    "create_message",
    "from_nats_subject",
    "parse_payload",
    "tick_message",
    "to_nats_subject",
    "validate_message",
]
