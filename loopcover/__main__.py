"""Command-line entry: cover one or more loops and print a summary line each.

Usage:
    python -m loopcover --radial 5 --concentric 15 --count 4 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from loopcover.analysis import analyze
from loopcover.config import Settings, settings
from loopcover.engine import EngineConfig, LoopState, NumpyRandomSource, series
from loopcover.models.report import LoopReport
from loopcover.models.snapshot import LoopSnapshot

load_dotenv()

logger = logging.getLogger("loopcover")


def build_parser(defaults: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loopcover",
        description="Deform self-avoiding loops on an annular grid until they are stuck",
    )
    parser.add_argument("--radial", type=int, default=defaults.radial_divisions)
    parser.add_argument("--concentric", type=int, default=defaults.concentric_divisions)
    parser.add_argument(
        "--iterations",
        type=int,
        default=defaults.cover_max_iterations,
        help="pull budget per loop (default: run until stuck)",
    )
    parser.add_argument("--count", type=int, default=1, help="independent loops to cover")
    parser.add_argument("--seed", type=int, default=defaults.random_seed)
    parser.add_argument("--json", action="store_true", help="print loop snapshots as JSON")
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=getattr(logging, settings.loopcover_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    args = build_parser(settings).parse_args(argv)

    logger.info("Covering %d loop(s) on a %dx%d grid", args.count, args.radial, args.concentric)

    try:
        state = LoopState(
            args.radial,
            args.concentric,
            rng=NumpyRandomSource(args.seed),
            config=EngineConfig.from_settings(settings),
        )
        if args.iterations is None:
            instances = [state.clone() for _ in range(args.count)]
            for instance in instances:
                instance.cover()
        else:
            instances = series(state, count=args.count, iterations=args.iterations)
    except ValueError as e:
        logger.error("Cover failed: %s", e)
        return 1

    for instance in instances:
        if args.json:
            print(LoopSnapshot.from_state(instance).model_dump_json())
        else:
            print(LoopReport.from_context(analyze(instance)).summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
