"""Tests for the async drive loop."""

from routine import Flow, Function, Routine, finish, run_routine, wait_ticks


class TestRunRoutine:
    async def test_runs_until_no_block_active(self, routine: Routine):
        routine.define("a", wait_ticks(3), finish()).activate()
        ticks = await run_routine(routine, interval=0)
        # three idle polls, the advance, then finish
        assert ticks == 5
        assert not routine.is_active()
        assert routine.ticks == 5

    async def test_nothing_active_runs_nothing(self, routine: Routine):
        routine.define("a", finish())
        assert await run_routine(routine, interval=0) == 0

    async def test_tick_limit(self, routine: Routine):
        routine.define("a", Function(lambda _b: Flow.IDLE)).activate()
        ticks = await run_routine(routine, interval=0, max_ticks=10)
        assert ticks == 10
        assert routine.is_active()
