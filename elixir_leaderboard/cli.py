"""CLI for leaderboard collection."""

import argparse
import logging
import sys
from pathlib import Path

logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

DEFAULT_OUTPUT_DIR = Path(__file__).parent.parent / "results"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Collect the Elixir points leaderboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--format",
        choices=["parquet", "json"],
        default="parquet",
        help="Output format (default: parquet)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help="Output directory for results",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output file (default: <output-dir>/leaderboard.<format>)",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=None,
        help="Ranks per request (default: 5000)",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=None,
        help="Seconds to wait between requests (default: 0.5)",
    )
    parser.add_argument(
        "--no-verify-count",
        action="store_true",
        help="Warn instead of failing when the fetched count differs from totalCount",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    from .export import write_output
    from .fetch_ranks import fetch_all_ranks
    from .settings import get_settings
    from .throttle import Throttle

    output = args.output or (args.output_dir / f"leaderboard.{args.format}")

    try:
        settings = get_settings()
        interval = args.interval if args.interval is not None else settings.request_interval
        ranks = fetch_all_ranks(
            page_size=args.page_size,
            throttle=Throttle(interval),
            verify_count=False if args.no_verify_count else None,
        )
        print(f"Retrieved {len(ranks)} total ranks", flush=True)

        path = write_output(ranks, output, args.format)
        print(f"Saved leaderboard data to {path}", flush=True)
    except KeyboardInterrupt:
        sys.stderr.write("Interrupted\n")
        return 130
    except Exception as e:
        sys.stderr.write(f"Error: {e}\n")
        sys.stderr.flush()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
