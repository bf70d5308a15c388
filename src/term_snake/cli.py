"""Command-line launcher for the terminal snake."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from term_snake.config import GameConfig
from term_snake.display import CursesDisplay, DisplayError
from term_snake.engine import GameLoop

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="term-snake",
        description=(
            "A snake that wanders a bordered terminal screen. "
            "Arrow keys steer, q quits."
        ),
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    parser.add_argument(
        "--tick-ms", type=_positive_int, default=None,
        help="Delay between ticks in milliseconds (default: 200).",
    )
    parser.add_argument("--length", type=_positive_int, default=None)
    parser.add_argument(
        "--write-config", type=str, default=None,
        help="Save the effective config as JSON to this path and exit.",
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs to this file instead of stderr.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging.",
    )
    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    if args.tick_ms is not None:
        overrides["tick_interval"] = args.tick_ms / 1000
    if args.length is not None:
        overrides["snake_length"] = args.length
    if overrides:
        config = replace(config, **overrides)
    return config


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``term-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        filename=args.log_file,
    )

    try:
        config = _load_config(args)
    except (OSError, ValueError, TypeError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    if args.write_config:
        try:
            config.save(args.write_config)
        except OSError as exc:
            logger.error("Cannot write config: %s", exc)
            return 1
        return 0

    loop = GameLoop(CursesDisplay(), config)
    try:
        loop.run()
    except DisplayError as exc:
        logger.error("Terminal unavailable: %s", exc)
        return 1
    except ValueError as exc:
        logger.error("Cannot start: %s", exc)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted.")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
