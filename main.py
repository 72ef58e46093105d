# main.py
"""CLI entry point for the comprehensive episode engines."""

from __future__ import annotations

import argparse
import sys

from config import settings
from orchestration.cli_runner import RunOptions, run

from models.engine_models import GenerationMode


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"{value!r} must be a positive integer")
    return number


def positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not a number") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"{value!r} must be greater than zero")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run the comprehensive enhancement engines over one episode."
    )
    parser.add_argument("--episode", required=True, help="Episode YAML/JSON file")
    parser.add_argument(
        "--story-bible", required=True, help="Story bible YAML/JSON file"
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in GenerationMode],
        default=GenerationMode.BEAST.value,
        help="Generation tier",
    )
    parser.add_argument("--output", default=None, help="Write notes JSON here")
    parser.add_argument(
        "--no-genre-engines",
        action="store_true",
        help="Skip the conditional genre engines",
    )
    parser.add_argument(
        "--timeout",
        type=positive_float,
        default=None,
        help="Per-attempt timeout in seconds for every engine",
    )
    parser.add_argument(
        "--max-concurrency",
        type=positive_int,
        default=settings.ENGINE_MAX_CONCURRENCY,
        help="Maximum engines in flight at once",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse command-line arguments and run the engines."""
    args = build_parser().parse_args(argv)
    result = run(
        RunOptions(
            episode_path=args.episode,
            story_bible_path=args.story_bible,
            mode=GenerationMode(args.mode),
            output_path=args.output,
            include_genre_engines=(
                settings.INCLUDE_GENRE_ENGINES and not args.no_genre_engines
            ),
            timeout_override=args.timeout,
            max_concurrency=args.max_concurrency,
        )
    )
    return 0 if result is not None else 1


if __name__ == "__main__":
    sys.exit(main())
