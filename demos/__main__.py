"""Entry point: python -m demos <name>"""

import argparse
import asyncio
import logging

from routine import run_routine

from demos.catalog import DEMOS


def main() -> None:
    parser = argparse.ArgumentParser(description="Run one of the routine demos.")
    parser.add_argument("name", choices=sorted(DEMOS))
    parser.add_argument("--interval", type=float, default=0.05, help="seconds per tick")
    parser.add_argument("--debug", action="store_true", help="log block transitions")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    routine = DEMOS[args.name]()
    ticks = asyncio.run(run_routine(routine, args.interval))
    logging.getLogger(__name__).info("Demo %s ran for %d ticks", args.name, ticks)


if __name__ == "__main__":
    main()
