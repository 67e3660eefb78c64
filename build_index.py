"""
Build the inverted index and print its analytics and dictionary.

Usage:
    python build_index.py --sample
    python build_index.py --data data/ --top 50 --prefix ca

Documents are read from the data/ folder (.txt, .html, .json with a
"content" field); --sample indexes the built-in Julius Caesar lines.
The index lives in memory only.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from invindex import config
from invindex.corpus import load_corpus
from invindex.index_builder import build_index_from_documents
from invindex.log import configure_logging
from invindex.search_cli import add_corpus_arguments, non_negative_int
from invindex.tokenizer import StemmerConfig


def main() -> None:
    import argparse
    parser = argparse.ArgumentParser(description="Build an in-memory inverted index and report on it")
    add_corpus_arguments(parser)
    parser.add_argument(
        "--top",
        type=non_negative_int,
        default=config.TOP_TERMS,
        help="Number of dictionary rows to print (default: %(default)s)",
    )
    parser.add_argument(
        "--prefix",
        default="",
        help="Only print dictionary rows whose stem starts with this prefix",
    )
    args = parser.parse_args()

    configure_logging(args.log_level)
    stemmer_config = StemmerConfig(algorithm=args.algorithm)

    documents, doc_paths = load_corpus(None if args.sample else args.data)
    if not documents:
        print(f"No .txt, .html or .json documents found in {args.data}.")
        sys.exit(1)

    index, stats = build_index_from_documents(documents, stemmer_config)

    print("\n" + "=" * 50)
    print("INDEX ANALYTICS")
    print("=" * 50)
    print()
    print("| Metric                          | Value |")
    print("|---------------------------------|-------|")
    print(f"| Number of indexed documents     | {stats.num_docs} |")
    print(f"| Total tokens processed          | {stats.num_tokens} |")
    print(f"| Number of terms (dictionary)    | {stats.num_terms} |")
    print(f"| Stemming algorithm              | {stemmer_config.algorithm} |")
    print()

    terms = index.terms_with_prefix(args.prefix) if args.prefix else index.terms()
    shown = terms[: args.top]
    print(f"Dictionary ({len(shown)} of {len(terms)} terms):")
    for term in shown:
        postings = index.get_postings(term)
        print(f"  {term:<20} df={len(postings):<4} {list(postings)}")
    print()
    print("Documents:")
    for doc_id, path in doc_paths.items():
        print(f"  {doc_id:>4}  {path}")
    print()


if __name__ == "__main__":
    main()
