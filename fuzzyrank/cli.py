"""
Fuzzy-filter lines of text from the command line.

Reads one candidate per line (from a file or stdin), ranks them against QUERY
and prints the matches best first.

Usage:
    ls ~ | fuzzyrank doc
    find ~/src -maxdepth 2 -type d | fuzzyrank --basename --scores gh
    fuzzyrank --file names.txt --max-results 5 --config options.json jd

Options are taken from --config when given, otherwise from FUZZYRANK_*
environment variables (or a .env file in the working directory).
"""

import argparse
import logging
import os
import sys
from typing import List, Optional, TextIO

from .errors import ConfigError
from .ranking import filter_items, sort_items
from .settings import load_options, options_from_env

logger = logging.getLogger(__name__)


def _read_lines(stream: TextIO) -> List[str]:
    return [line.rstrip("\r\n") for line in stream if line.strip()]


def _basename(path: str) -> str:
    return os.path.basename(path.rstrip("/")) or path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fuzzyrank",
        description="Fuzzy-sort lines of text against a query",
    )
    parser.add_argument("query", help="Search query")
    parser.add_argument(
        "--file",
        "-f",
        default=None,
        help="Read candidates from this file instead of stdin",
    )
    parser.add_argument(
        "--basename",
        action="store_true",
        help="Match against the last path component of each line",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Print non-matching lines too (ranked after matches by score)",
    )
    parser.add_argument(
        "--min-score",
        type=float,
        default=None,
        help="Drop matches scoring below this",
    )
    parser.add_argument(
        "--max-results",
        "-n",
        type=int,
        default=0,
        help="Print at most this many lines (0 = no limit)",
    )
    parser.add_argument(
        "--scores",
        action="store_true",
        help="Prefix each line with its score",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON file with sort options",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        options = load_options(args.config) if args.config else options_from_env()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.file:
        try:
            with open(args.file, encoding="utf-8") as f:
                lines = _read_lines(f)
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
            return 1
    else:
        try:
            lines = _read_lines(sys.stdin)
        except UnicodeDecodeError as e:
            print(f"Error: cannot read stdin: {e}", file=sys.stderr)
            return 1

    key = _basename if args.basename else str
    if args.all:
        results = sort_items(lines, args.query, key, options)
        ranked = list(zip(lines, results))
        if args.max_results > 0:
            ranked = ranked[: args.max_results]
    else:
        ranked = filter_items(
            lines,
            args.query,
            key=key,
            options=options,
            min_score=args.min_score,
            max_results=args.max_results,
        )

    logger.info("[cli] %d of %d lines printed for %r", len(ranked), len(lines), args.query)
    for line, res in ranked:
        if args.scores:
            print(f"{res.score:7.1f}  {line}")
        else:
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
