"""
Inverted index data structure.

The index maps each stem to its postings list: the ascending, duplicate-free
doc_ids of the documents containing it. It is filled once from pairs sorted by
(stem, doc_id) and is read-only afterwards.
"""

import logging
from bisect import bisect_left
from typing import Iterable, Iterator

from .tokenizer import StemmerConfig, TaggedStemPair, DEFAULT_CONFIG, normalize_term

logger = logging.getLogger(__name__)


class UnsortedInput(ValueError):
    """Raised when build() receives pairs out of (stem, doc_id) order."""


class IndexAlreadyBuilt(RuntimeError):
    """Raised when build() is called on an index that was already built."""


class InvertedIndex:
    """
    Inverted index: map from stem -> tuple of doc_ids.
    Empty until build() is called once; immutable afterwards.
    """

    def __init__(self, stemmer_config: StemmerConfig | None = None) -> None:
        self.stemmer_config = stemmer_config or DEFAULT_CONFIG
        self._index: dict[str, tuple[int, ...]] = {}
        self._built = False

    @property
    def is_built(self) -> bool:
        return self._built

    def build(self, sorted_pairs: Iterable[TaggedStemPair]) -> int:
        """
        Fold pairs sorted by (stem, doc_id) into postings lists.
        A doc_id is appended only when it differs from the last one in its
        stem's list, which keeps lists duplicate-free given sorted input.
        Returns the number of pairs consumed.
        """
        if self._built:
            raise IndexAlreadyBuilt("build() may only be called once per index")

        building: dict[str, list[int]] = {}
        prev: TaggedStemPair | None = None
        consumed = 0
        for pair in sorted_pairs:
            if prev is not None and pair < prev:
                raise UnsortedInput(
                    f"pair ({pair.stem!r}, {pair.doc_id}) follows "
                    f"({prev.stem!r}, {prev.doc_id})"
                )
            prev = pair
            consumed += 1
            postings = building.setdefault(pair.stem, [])
            if not postings or postings[-1] != pair.doc_id:
                postings.append(pair.doc_id)

        self._index = {stem: tuple(doc_ids) for stem, doc_ids in building.items()}
        self._built = True
        logger.debug("Built index: %d pairs, %d terms", consumed, len(self._index))
        return consumed

    def search(
        self,
        query: str,
        stemmer_config: StemmerConfig | None = None,
    ) -> tuple[int, ...] | None:
        """
        Normalize query as one term and look it up.
        Returns the postings tuple, or None if the stem is not indexed.
        """
        stem = normalize_term(query, stemmer_config or self.stemmer_config)
        return self._index.get(stem)

    def get_postings(self, stem: str) -> tuple[int, ...]:
        """Return the postings for an exact stem, or an empty tuple."""
        return self._index.get(stem, ())

    def term_count(self) -> int:
        """Number of distinct stems (rows in the dictionary)."""
        return len(self._index)

    def terms(self) -> list[str]:
        """All stems in ascending order."""
        return sorted(self._index)

    def terms_with_prefix(self, prefix: str) -> list[str]:
        terms = self.terms()
        start = bisect_left(terms, prefix)
        result = []
        for term in terms[start:]:
            if not term.startswith(prefix):
                break
            result.append(term)
        return result

    def items(self) -> Iterator[tuple[str, tuple[int, ...]]]:
        """Iterate (stem, postings) in stem order."""
        for term in self.terms():
            yield term, self._index[term]

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, stem: str) -> bool:
        return stem in self._index

    def to_dict(self) -> dict[str, list[int]]:
        """Plain dict copy of the index (stem -> list of doc_ids)."""
        return {stem: list(doc_ids) for stem, doc_ids in self.items()}
