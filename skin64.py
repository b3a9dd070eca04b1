"""
Skin64 command-line tool.

Upgrades legacy 64x32 skins to the 64x64 layout and backfills the left
arm and leg of 64x64 skins that only draw the right limbs.

Usage:
    python skin64.py <file.png>           # writes <file>_converted.png / <file>_fixed.png
    python skin64.py <folder>             # writes into <folder>/converted/
"""

from pathlib import Path
from typing import List, Optional
import argparse
import logging
import sys

from S64_Libs.BatchLib import BatchConfig, format_outcome, process_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skin64",
        description="Convert 64x32 skins to 64x64 and fill in missing left limbs on 64x64 skins.",
    )
    parser.add_argument("path", type=Path, help="PNG file or folder of PNG files")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Output folder for folder input (default: <folder>/converted)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of worker threads for folder input (default: 1)",
    )
    parser.add_argument(
        "--no-overwrite",
        action="store_true",
        help="Skip files whose output already exists",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any file failed",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the skin converter."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.workers < 1:
        print(f"Error: --workers must be at least 1, got {args.workers}")
        return 2

    config = BatchConfig(
        overwrite=not args.no_overwrite,
        use_threading=args.workers > 1,
        max_workers=args.workers,
    )

    try:
        report = process_path(args.path, config, args.output_dir)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1 if args.strict else 0
    except OSError as e:
        print(f"Failed to create output directory: {e}")
        return 1 if args.strict else 0

    for outcome in report.outcomes:
        print(format_outcome(outcome))

    if args.strict and report.failed_count:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
