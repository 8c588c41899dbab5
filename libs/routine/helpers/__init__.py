from routine.helpers.factory import (
    block_status_message,
    create_message,
    parse_payload,
    tick_message,
)
from routine.helpers.validation import validate_message

__all__ = [
    "block_status_message",
    "create_message",
    "parse_payload",
    "tick_message",
    "validate_message",
]
