"""
Tokenizer and normalizer for the inverted index.
Lowercases text, extracts alphabetic runs and stems them (Snowball English or Porter).
The same normalization is used for documents and for queries.
"""

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterator

from nltk.stem import PorterStemmer, SnowballStemmer

# Maximal runs of letters, matched after lowercasing.
_WORD_RE = re.compile(r"[a-z]+")

SUPPORTED_ALGORITHMS = ("english", "porter")


class UnsupportedAlgorithm(ValueError):
    """Raised when a stemmer configuration names an unknown algorithm."""


@dataclass(frozen=True)
class StemmerConfig:
    """
    Stemmer selection shared by indexing and querying.
    - algorithm: "english" (Snowball English / Porter2) or "porter" (original Porter)
    """

    algorithm: str = "english"

    def __post_init__(self) -> None:
        if self.algorithm not in SUPPORTED_ALGORITHMS:
            raise UnsupportedAlgorithm(
                f"Unsupported stemming algorithm: {self.algorithm!r} "
                f"(expected one of {', '.join(SUPPORTED_ALGORITHMS)})"
            )


DEFAULT_CONFIG = StemmerConfig()


@dataclass(frozen=True, order=True)
class TaggedStemPair:
    """
    One occurrence of a stem in a document.
    Ordered by stem, then doc_id; token is kept for display only and
    takes no part in comparisons.
    """

    stem: str
    doc_id: int
    token: str = field(default="", compare=False)


@lru_cache(maxsize=None)
def _get_stemmer(algorithm: str):
    if algorithm == "porter":
        return PorterStemmer()
    return SnowballStemmer("english")


def stem_token(word: str, stemmer_config: StemmerConfig | None = None) -> str:
    """Return the stem of word under the given (or default) configuration."""
    cfg = stemmer_config or DEFAULT_CONFIG
    return _get_stemmer(cfg.algorithm).stem(word)


def normalize_term(term: str, stemmer_config: StemmerConfig | None = None) -> str:
    """
    Normalize a query term: strip, lowercase and stem it as a single term.
    The term is not split into words.
    """
    return stem_token(term.strip().lower(), stemmer_config)


def tokenize(text: str) -> Iterator[str]:
    """
    Lazily yield lowercase alphabetic tokens from text, left to right.
    Digits, punctuation and whitespace only separate tokens.
    """
    if not text:
        return iter(())
    return (m.group(0) for m in _WORD_RE.finditer(text.lower()))


def tokenize_document(
    doc_id: int,
    text: str,
    stemmer_config: StemmerConfig | None = None,
) -> Iterator[TaggedStemPair]:
    """
    Turn one document into a single-pass iterator of TaggedStemPair,
    one per token, in order of appearance. Callers that need the pairs
    twice must tokenize again or materialize the iterator.
    """
    if isinstance(doc_id, bool) or not isinstance(doc_id, int) or doc_id < 0:
        raise ValueError(f"doc_id must be a non-negative integer, got {doc_id!r}")
    stemmer = _get_stemmer((stemmer_config or DEFAULT_CONFIG).algorithm)
    return (
        TaggedStemPair(stem=stemmer.stem(token), doc_id=doc_id, token=token)
        for token in tokenize(text)
    )
