"""
Command-line search over an in-memory inverted index.

The index is built at startup from a data directory (or the sample
documents) and queried one term at a time, using the same lowercasing and
stemming as indexing.

Usage:
    python -m invindex.search_cli --sample Romans Caesar
    python -m invindex.search_cli --data data/
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, TextIO

from . import config
from .corpus import load_corpus
from .index_builder import build_index_from_documents
from .log import configure_logging
from .posting import InvertedIndex
from .tokenizer import SUPPORTED_ALGORITHMS, StemmerConfig, normalize_term


def format_result(index: InvertedIndex, query: str) -> str:
    """Render one query's result the way the search loop prints it."""
    stemmed = normalize_term(query, index.stemmer_config)
    lines = [f"--- Searching for: '{query}' (Stemmed: '{stemmed}') ---"]
    postings = index.search(query)
    if postings is None:
        lines.append("Term not found in index.")
    else:
        lines.append(f"Found in {len(postings)} documents: {list(postings)}")
    return "\n".join(lines)


def run_search_loop(
    index: InvertedIndex,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
) -> None:
    """
    Interactive query loop. Empty line or EOF exits.
    """
    print("Enter one term per query. Empty line or Ctrl+C to exit.", file=stdout)
    while True:
        print("query> ", end="", file=stdout, flush=True)
        try:
            line = stdin.readline()
        except KeyboardInterrupt:
            print(file=stdout)
            break
        if not line:
            print(file=stdout)
            break
        raw_query = line.strip()
        if not raw_query:
            break
        print(format_result(index, raw_query), file=stdout)


def non_negative_int(value: str) -> int:
    """argparse type for counts that may be zero but not negative."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {number}")
    return number


def add_corpus_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by the command-line tools for picking documents and stemmer."""
    parser.add_argument(
        "--data",
        type=Path,
        default=Path(config.DATA_DIR),
        help="Directory of .txt/.html/.json documents; the sample documents are used if it is missing (default: %(default)s).",
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Index the built-in sample documents instead of --data.",
    )
    parser.add_argument(
        "--algorithm",
        choices=SUPPORTED_ALGORITHMS,
        default=config.STEM_ALGORITHM,
        help="Stemming algorithm (default: %(default)s).",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        help="Logging level (default: %(default)s).",
    )


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Inverted index term search.")
    add_corpus_arguments(parser)
    parser.add_argument(
        "queries",
        nargs="*",
        help="Terms to search for. Without any, read queries interactively.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    configure_logging(args.log_level)
    stemmer_config = StemmerConfig(algorithm=args.algorithm)
    documents, _doc_paths = load_corpus(None if args.sample else args.data)
    index, stats = build_index_from_documents(documents, stemmer_config)
    print(f"Indexed {stats.num_docs} documents ({stats.num_terms} terms).")

    if args.queries:
        for query in args.queries:
            print(format_result(index, query))
        return
    run_search_loop(index)


if __name__ == "__main__":
    main()
