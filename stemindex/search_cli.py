"""
Command-line driver: build an index from text files, run queries, and write
the index, word counts and search results as pretty JSON.

Usage:
    python -m stemindex.search_cli \
        --text data/ \
        --index index.json \
        --counts \
        --query queries.txt --partial \
        --results

An output flag given without a path writes to its default file name.
Steps run in order (build, index, counts, query, results); a failing step is
logged and the remaining steps still run. Exit status is 1 if any step
failed.
"""

import argparse
import logging
from pathlib import Path
from typing import Iterable

from . import json_writer
from .index_builder import build_index
from .inverted_index import InvertedIndex
from .query_processor import QueryProcessor

logger = logging.getLogger(__name__)

DEFAULT_INDEX_PATH = Path("index.json")
DEFAULT_COUNTS_PATH = Path("counts.json")
DEFAULT_RESULTS_PATH = Path("results.json")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build a stem index and search it.")
    parser.add_argument(
        "--text",
        type=Path,
        default=None,
        help="Text file or directory to index.",
    )
    parser.add_argument(
        "--index",
        type=Path,
        nargs="?",
        const=DEFAULT_INDEX_PATH,
        default=None,
        help=f"Write the inverted index (default: {DEFAULT_INDEX_PATH}).",
    )
    parser.add_argument(
        "--counts",
        type=Path,
        nargs="?",
        const=DEFAULT_COUNTS_PATH,
        default=None,
        help=f"Write word counts per location (default: {DEFAULT_COUNTS_PATH}).",
    )
    parser.add_argument(
        "--query",
        type=Path,
        default=None,
        help="File with one query per line.",
    )
    parser.add_argument(
        "--partial",
        action="store_true",
        help="Match terms that start with a query stem instead of exact stems.",
    )
    parser.add_argument(
        "--results",
        type=Path,
        nargs="?",
        const=DEFAULT_RESULTS_PATH,
        default=None,
        help=f"Write search results (default: {DEFAULT_RESULTS_PATH}).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output.",
    )
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    index = InvertedIndex()
    processor = QueryProcessor(index, partial=args.partial)
    failed = False

    if args.text is not None:
        try:
            build_index(args.text, index)
        except (OSError, ValueError) as e:
            logger.error("Unable to build index from %s: %s", args.text, e)
            failed = True

    if args.index is not None:
        try:
            json_writer.nested_object_to_file(index.view(), args.index)
            print(f"Index saved to: {args.index}")
        except OSError as e:
            logger.error("Unable to write index to %s: %s", args.index, e)
            failed = True

    if args.counts is not None:
        try:
            json_writer.object_to_file(index.word_counts(), args.counts)
            print(f"Word counts saved to: {args.counts}")
        except OSError as e:
            logger.error("Unable to write counts to %s: %s", args.counts, e)
            failed = True

    if args.query is not None:
        try:
            processor.process_file(args.query)
        except (OSError, ValueError) as e:
            logger.error("Unable to search queries from %s: %s", args.query, e)
            failed = True

    if args.results is not None:
        try:
            json_writer.results_to_file(processor.results(), args.results)
            print(f"Results saved to: {args.results}")
        except OSError as e:
            logger.error("Unable to write results to %s: %s", args.results, e)
            failed = True

    print(f"| Unique stems | {index.term_count()} |")
    print(f"| Locations    | {len(index.word_counts())} |")
    print(f"| Queries      | {processor.query_count()} |")
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
