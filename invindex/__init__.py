"""In-memory inverted index with stemmed term lookup."""

from .tokenizer import (
    StemmerConfig,
    TaggedStemPair,
    UnsupportedAlgorithm,
    normalize_term,
    tokenize,
    tokenize_document,
)
from .posting import InvertedIndex, IndexAlreadyBuilt, UnsortedInput
from .index_builder import (
    IndexStats,
    build_index,
    build_index_from_documents,
    collect_pairs,
    sort_pairs,
)
