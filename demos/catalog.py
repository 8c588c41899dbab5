"""Every demo by name, each a ``build(say, clock) -> Routine`` function."""

from collections.abc import Callable

from routine import Routine

from demos import frames, gates, jumps, loops, parallel, progress, simple, slow_type

DEMOS: dict[str, Callable[..., Routine]] = {
    "simple": simple.build,
    "frames": frames.build,
    "loops": loops.build,
    "jumps": jumps.build,
    "gates": gates.build,
    "collections": slow_type.build,
    "parallel": parallel.build,
    "progress": progress.build,
}
