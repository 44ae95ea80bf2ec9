"""Command line entry point: run the bubble simulation headlessly."""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from bubble_sim.__version__ import __version__
from bubble_sim.config import ENV, FPS, OUTPUT_DIR, RESOLUTION, SEED
from bubble_sim.logging_config import setup_logging
from bubble_sim.runtime import initializer
from bubble_sim.runtime.simulation_loop import run_loop


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bubble-sim", description=__doc__)
    parser.add_argument("--frames", type=int, default=600, help="number of frames to simulate")
    parser.add_argument("--fps", type=int, default=FPS, help="nominal frame rate")
    parser.add_argument("--size", type=str, default=f"{RESOLUTION[0]}x{RESOLUTION[1]}",
                        help="surface size as WIDTHxHEIGHT")
    parser.add_argument("--seed", type=int, default=SEED)
    parser.add_argument("--config", type=Path, default=None, help="JSON file of tuning overrides")
    parser.add_argument("--orbit", action="store_true", help="move a scripted pointer in a circle")
    parser.add_argument("--press-frame", type=int, default=None,
                        help="press a bubble's center on this frame")
    parser.add_argument("--press-bubble", type=int, default=0)
    parser.add_argument("--save-every", type=int, default=0,
                        help="write every n-th snapshot as JSON (0 disables)")
    parser.add_argument("--out", type=Path, default=OUTPUT_DIR)
    parser.add_argument("--log-level", type=str, default=None)
    return parser


def parse_size(text: str):
    width, _, height = text.lower().partition("x")
    return (float(width), float(height))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logging("bubble_sim", level=args.log_level)
    logger.debug(f"bubble-sim {__version__} ({ENV} environment)")

    try:
        size = parse_size(args.size)
    except ValueError:
        logger.error(f"Invalid --size {args.size!r}, expected WIDTHxHEIGHT")
        return 2

    if args.config is not None:
        config = initializer.initialize(args.config.resolve())
    else:
        config = initializer.initialize()

    summary = run_loop(
        iterations=args.frames,
        dt=1.0 / max(args.fps, 1),
        bounds=size,
        config=config,
        seed=args.seed,
        orbit=args.orbit,
        press_frame=args.press_frame,
        press_bubble=args.press_bubble,
        save_every=args.save_every,
        out_dir=args.out,
    )
    print(json.dumps(summary, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
