"""Command line entry point for grouping pair files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .pipeline import GroupingConfig
from .runner import group_file


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Merge element pairs into disjoint groups.")
    parser.add_argument("input", type=Path, help="Path to the input CSV or Excel file of pairs")
    parser.add_argument("output", type=Path, help="Path where the element assignments will be written")
    parser.add_argument("--left-column", default="left", help="Column holding the first element id (default: left)")
    parser.add_argument("--right-column", default="right", help="Column holding the second element id (default: right)")
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help="Number of elements; defaults to the largest id found in the pairs",
    )
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars even if tqdm is installed",
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress stage-by-stage progress output")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    config = GroupingConfig(
        left_column=args.left_column,
        right_column=args.right_column,
        size=args.size,
        use_tqdm=not args.disable_tqdm,
        verbose=not args.quiet,
    )

    result = group_file(args.input, args.output, config)
    return 0 if result is not None else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
