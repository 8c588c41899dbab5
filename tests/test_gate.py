"""Tests for Gate and GateOption — commit-once branch selection."""

import pytest
from routine import (
    Block,
    Collection,
    Flow,
    Function,
    Gate,
    GateOption,
    InvalidDefinitionError,
    Label,
    Routine,
    jump_to,
    loop,
)


def _record(out: list, text: str, flow: Flow = Flow.ADVANCE) -> Function:
    def _poll(block: Block) -> Flow:
        out.append(text)
        return flow

    return Function(_poll)


def _idle() -> Function:
    return Function(lambda _block: Flow.IDLE)


def _flag(name: str):
    return lambda block: bool(block.properties.get(name))


class TestGateOption:
    def test_empty_option_rejected(self):
        with pytest.raises(InvalidDefinitionError):
            GateOption(None)

    def test_no_guard_always_matches(self, routine: Routine):
        block = routine.define("g", _idle())
        assert GateOption(None, _idle()).matches(block)

    def test_guard_receives_block(self, routine: Routine):
        block = routine.define("g", _idle())
        routine.properties["open"] = True
        assert GateOption(_flag("open"), _idle()).matches(block)
        routine.properties["open"] = False
        assert not GateOption(_flag("open"), _idle()).matches(block)

    def test_init_inits_first_step_only(self, routine: Routine):
        inits: list = []
        first = Function(lambda b: Flow.ADVANCE, init=lambda b: inits.append("first"))
        second = Function(lambda b: Flow.ADVANCE, init=lambda b: inits.append("second"))
        option = GateOption(None, first, second)
        option.init(routine.define("g", _idle()))
        assert inits == ["first"]

    def test_steps_flattened(self):
        a, b = _idle(), _idle()
        option = GateOption(None, Collection(a, b))
        assert option.steps == (a, b)


class TestGate:
    def test_commit_tick_is_idle_then_branch_runs(self, routine: Routine):
        out: list = []
        routine.properties["go"] = True
        gate = Gate(
            GateOption(_flag("go"), _record(out, "x"), _record(out, "y")),
            GateOption(None, _record(out, "else")),
        )
        block = routine.define("g", gate, _record(out, "after"), _idle())
        block.activate()

        routine.tick()
        assert out == []
        assert gate.chosen is gate.options[0]

        routine.tick()
        assert out == ["x"]
        assert block.index == 0

        routine.tick()
        assert out == ["x", "y"]
        assert block.index == 1
        assert gate.chosen is None

        routine.tick()
        assert out == ["x", "y", "after"]

    def test_first_matching_option_wins(self, routine: Routine):
        out: list = []
        gate = Gate(
            GateOption(lambda b: False, _record(out, "never")),
            GateOption(None, _record(out, "second")),
            GateOption(None, _record(out, "third")),
        )
        routine.define("g", gate, _idle()).activate()
        routine.tick()
        routine.tick()
        assert out == ["second"]

    def test_no_match_keeps_checking(self, routine: Routine):
        idles: list = []
        gate = Gate(GateOption(_flag("go"), _idle())).set_on_idle(
            lambda block: idles.append(block.id)
        )
        block = routine.define("g", gate)
        block.activate()
        for _ in range(3):
            routine.tick()
        assert idles == ["g", "g", "g"]
        assert gate.chosen is None
        assert block.index == 0

    def test_guards_not_rechecked_after_commit(self, routine: Routine):
        out: list = []
        routine.properties["go"] = True
        gate = Gate(
            GateOption(_flag("go"), _record(out, "held", Flow.IDLE)),
            GateOption(None, _record(out, "else")),
        )
        routine.define("g", gate).activate()
        routine.tick()
        routine.properties["go"] = False
        routine.tick()
        routine.tick()
        assert out == ["held", "held"]

    def test_callbacks(self, routine: Routine):
        events: list = []
        routine.properties["go"] = False
        gate = (
            Gate()
            .add_option(GateOption(_flag("go"), _idle()))
            .set_on_idle(lambda block: events.append("idle"))
            .set_on_choose(lambda block: events.append("choose"))
        )
        routine.define("g", gate).activate()
        routine.tick()
        routine.properties["go"] = True
        routine.tick()
        routine.tick()
        assert events == ["idle", "idle", "choose"]

    def test_gate_without_options_idles(self, routine: Routine):
        block = routine.define("g", Gate(), _idle())
        block.activate()
        routine.tick()
        routine.tick()
        assert block.index == 0

    def test_finish_in_branch_finishes_block(self, routine: Routine):
        gate = Gate(GateOption(None, Function(lambda b: Flow.FINISH)))
        block = routine.define("g", gate, _idle())
        block.activate()
        routine.tick()
        routine.tick()
        assert not block.is_active
        assert gate.chosen is None
        assert gate.options[0].index == 0

    def test_rechooses_after_revisit(self, routine: Routine):
        out: list = []
        routine.properties["pick"] = "a"

        def _swap(block: Block) -> Flow:
            block.properties["pick"] = "b"
            return Flow.ADVANCE

        gate = Gate(
            GateOption(lambda b: b.properties["pick"] == "a", _record(out, "a")),
            GateOption(lambda b: b.properties["pick"] == "b", _record(out, "b")),
        )
        routine.define("g", gate, Function(_swap), loop()).activate()
        for _ in range(7):
            routine.tick()
        assert out == ["a", "b"]

    def test_branch_jump_moves_block(self, routine: Routine):
        out: list = []
        gate = Gate(GateOption(None, jump_to("out")))
        block = routine.define("g", gate, _record(out, "skipped"), Label("out"), _idle())
        block.activate()
        routine.tick()
        routine.tick()
        assert block.index == 2
        assert out == []
