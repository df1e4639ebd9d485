"""Command-line interface for the group draw."""

# Bucket Draw
# Copyright (C) 2025  Bucket Draw developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import logging
import sys
from collections import Counter
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import PathCompleter

from bucketdraw.config import DrawConfig, load_configuration
from bucketdraw.constants import OUTPUT_FORMATS
from bucketdraw.draw import create_draw
from bucketdraw.exceptions import BucketDrawException
from bucketdraw.files import read_entrants, write_report
from bucketdraw.models import Draw
from bucketdraw.utils import set_log_level, setup_logger

logger = setup_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="bucket-draw",
        description="Draw 36 entrants into four buckets and schedule their matches",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Draw from the bundled example list
  bucket-draw

  # Custom files and a reproducible draw
  bucket-draw --input teams.txt --output results.txt --seed 2025

  # JSON output for other tools
  bucket-draw --format json --output results.json

  # Use configuration file
  bucket-draw --config draw_config.json
        """,
    )

    parser.add_argument("--input", help="Entrant list, one per line")
    parser.add_argument("--output", help="Report destination")
    parser.add_argument("--seed", type=int, help="Random seed for reproducibility")
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        help="Report format (default: text)",
    )
    parser.add_argument("--config", help="Load configuration from JSON file")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject entrant lists with duplicate names",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print groups and per-entrant match counts after the draw",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Prompt for the input and output paths",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    return parser


def resolve_config(args: argparse.Namespace) -> DrawConfig:
    """Combine defaults, the optional config file and explicit flags."""
    config = load_configuration(args.config) if args.config else DrawConfig()
    return config.merged(
        {
            "input_path": args.input,
            "output_path": args.output,
            "seed": args.seed,
            "output_format": args.output_format,
            "strict": args.strict,
        }
    )


def prompt_for_paths(
    config: DrawConfig, session: Optional[PromptSession] = None
) -> DrawConfig:
    """Ask for the input and output paths, keeping the current values as defaults."""
    if session is None:
        session = PromptSession()
    completer = PathCompleter(expanduser=True)

    input_path = session.prompt(
        "Entrant list: ", default=config.input_path, completer=completer
    ).strip()
    output_path = session.prompt(
        "Report file: ", default=config.output_path, completer=completer
    ).strip()
    return config.merged(
        {"input_path": input_path or None, "output_path": output_path or None}
    )


def run_draw(config: DrawConfig) -> Draw:
    """Read the entrants, draw and write the report.

    Nothing is written unless the whole draw succeeds.
    """
    entrants = read_entrants(config.input_path)
    draw = create_draw(entrants, seed=config.seed, strict=config.strict)
    write_report(draw, config.output_path, config.output_format)
    return draw


def print_summary(draw: Draw) -> None:
    """Print the groups and how many matches each entrant plays."""
    print("\n" + "=" * 50)
    print("DRAW SUMMARY")
    print("=" * 50)
    for group in draw.groups:
        print(f"{group.header} {', '.join(group.members)}")

    counts = draw.match_counts()
    print(f"\nTotal matches: {len(draw.pairings)}")
    for matches, entrants in sorted(Counter(counts.values()).items()):
        print(f"  {entrants} entrants play {matches} matches")
    print("=" * 50 + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging
    if args.verbose:
        set_log_level(logging.DEBUG)

    try:
        config = resolve_config(args)
        if args.interactive:
            config = prompt_for_paths(config)
        draw = run_draw(config)
    except KeyboardInterrupt:
        logger.info("Draw interrupted by user")
        return 130
    except BucketDrawException as e:
        logger.error("Draw failed: %s", e)
        return 1
    except Exception as e:
        logger.error("Draw failed: %s", e, exc_info=True)
        return 1

    if args.summary:
        print_summary(draw)
    return 0


if __name__ == "__main__":
    sys.exit(main())
