"""Unit tests for message builders and validation."""

import pytest
from routine import (
    BlockStatus,
    Envelope,
    Flow,
    Function,
    MessageType,
    Routine,
    Tick,
    Topics,
    block_status_message,
    create_message,
    parse_payload,
    tick_message,
    validate_message,
)

# --- Builders ---


class TestCreateMessage:
    def test_from_model(self):
        env = create_message(
            sender="seq",
            topic=Topics.TICK,
            msg_type=MessageType.TICK,
            payload=Tick(tick_number=1, timestamp=10.0),
            tick=1,
        )
        assert env.sender == "seq"
        assert env.payload == {"tick_number": 1, "timestamp": 10.0}
        assert env.tick == 1

    def test_from_dict(self):
        env = create_message(
            sender="seq",
            topic=Topics.TICK,
            msg_type=MessageType.TICK,
            payload={"tick_number": 2, "timestamp": 0.0},
        )
        assert env.payload["tick_number"] == 2


class TestTickMessage:
    def test_builds_valid_tick(self):
        env = tick_message("seq", 7)
        assert env.topic == Topics.TICK
        assert env.type == MessageType.TICK
        assert env.tick == 7
        assert validate_message(env) == []
        assert parse_payload(env).tick_number == 7


class TestBlockStatusMessage:
    def test_reports_block(self, routine: Routine):
        block = routine.define(3, Function(lambda b: Flow.IDLE), Function(lambda b: Flow.IDLE))
        block.activate()
        block.set_index(1)
        env = block_status_message("seq", block, tick=4)
        assert env.topic == Topics.STATUS
        status = parse_payload(env)
        assert isinstance(status, BlockStatus)
        assert status.block_id == "3"
        assert status.active
        assert status.index == 1
        assert status.tick == 4
        assert status.routine == "seq"


# --- Validation ---


def _envelope(**overrides) -> Envelope:
    fields = {
        "from": "seq",
        "topic": Topics.TICK,
        "type": MessageType.TICK,
        "payload": {"tick_number": 1, "timestamp": 0.0},
    }
    fields.update(overrides)
    return Envelope(**fields)


class TestValidateMessage:
    def test_valid(self):
        assert validate_message(_envelope()) == []

    def test_empty_sender(self):
        errors = validate_message(_envelope(**{"from": "  "}))
        assert any("'from'" in e for e in errors)

    def test_wrong_topic(self):
        errors = validate_message(_envelope(topic=Topics.STATUS))
        assert len(errors) == 1
        assert Topics.TICK in errors[0]

    def test_bad_payload(self):
        errors = validate_message(_envelope(payload={"tick_number": 0}))
        assert any(e.startswith("payload.tick_number:") for e in errors)
        assert any(e.startswith("payload.timestamp:") for e in errors)


class TestParsePayload:
    def test_invalid_payload_raises(self):
        with pytest.raises(ValueError):
            parse_payload(_envelope(payload={}))
