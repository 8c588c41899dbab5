"""Entry point: python -m services.sequencer"""

import asyncio
import logging
import os
import signal

from demos.catalog import DEMOS
from services.sequencer.sequencer import SequencerService

logger = logging.getLogger(__name__)


async def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    demo = os.environ.get("SEQUENCER_DEMO", "parallel")
    if demo not in DEMOS:
        raise SystemExit(f"Unknown SEQUENCER_DEMO {demo!r}; pick one of {sorted(DEMOS)}")

    # set by a signal or when the demo runs out of active blocks
    shutdown = asyncio.Event()
    for sig in (signal.SIGINT, signal.SIGTERM):
        asyncio.get_running_loop().add_signal_handler(sig, shutdown.set)

    service = SequencerService(
        DEMOS[demo](),
        nats_url=os.environ.get("NATS_URL", "nats://localhost:4222"),
        on_finished=shutdown.set,
    )

    await service.start()
    logger.info("Sequencer running demo %r. Press Ctrl+C to stop.", demo)
    await shutdown.wait()
    logger.info("Stopping sequencer (demo %r ended or shutdown signal received)", demo)
    await service.stop()


if __name__ == "__main__":
    asyncio.run(main())
