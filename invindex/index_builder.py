"""
Index builder: tokenizes documents, sorts (stem, doc_id) pairs and folds
them into an InvertedIndex (sort-based construction).
"""

import logging
from dataclasses import dataclass
from itertools import chain
from typing import Iterable, Iterator

from .posting import InvertedIndex
from .tokenizer import StemmerConfig, TaggedStemPair, tokenize_document

logger = logging.getLogger(__name__)


@dataclass
class IndexStats:
    """
    Counts reported after a build.
    - num_docs: documents tokenized
    - num_tokens: (stem, doc_id) pairs produced, before deduplication
    - num_terms: distinct stems in the dictionary
    """

    num_docs: int
    num_tokens: int
    num_terms: int


def collect_pairs(
    documents: Iterable[tuple[int, str]],
    stemmer_config: StemmerConfig | None = None,
) -> Iterator[TaggedStemPair]:
    """Concatenate each document's pairs, documents in the given order."""
    return chain.from_iterable(
        tokenize_document(doc_id, text, stemmer_config) for doc_id, text in documents
    )


def sort_pairs(pairs: Iterable[TaggedStemPair]) -> list[TaggedStemPair]:
    """
    Order pairs by stem, then doc_id. Every pair is kept, including repeats
    of the same (stem, doc_id); deduplication happens in build.
    """
    return sorted(pairs)


def build_index(
    sorted_pairs: Iterable[TaggedStemPair],
    stemmer_config: StemmerConfig | None = None,
) -> InvertedIndex:
    """
    Build a fresh index from pairs already sorted by sort_pairs().
    stemmer_config must be the one used to tokenize, so queries normalize alike.
    """
    index = InvertedIndex(stemmer_config)
    index.build(sorted_pairs)
    return index


def build_index_from_documents(
    documents: Iterable[tuple[int, str]],
    stemmer_config: StemmerConfig | None = None,
) -> tuple[InvertedIndex, IndexStats]:
    """
    Run the whole pipeline over (doc_id, text) pairs.
    Returns (index, stats).
    """
    documents = list(documents)
    pairs = sort_pairs(collect_pairs(documents, stemmer_config))
    logger.info("Tokenized %d documents into %d pairs", len(documents), len(pairs))

    index = build_index(pairs, stemmer_config)
    stats = IndexStats(
        num_docs=len(documents),
        num_tokens=len(pairs),
        num_terms=index.term_count(),
    )
    logger.info("Index has %d terms", stats.num_terms)
    return index, stats
