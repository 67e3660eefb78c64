import pytest

from invindex.posting import IndexAlreadyBuilt, InvertedIndex, UnsortedInput
from invindex.tokenizer import StemmerConfig, TaggedStemPair


def _pairs(*items):
    return [TaggedStemPair(stem, doc_id) for stem, doc_id in items]


def test_build_deduplicates_repeated_doc_ids():
    index = InvertedIndex()
    consumed = index.build(_pairs(("the", 1), ("the", 1), ("the", 2), ("the", 2), ("the", 4)))
    assert consumed == 5
    assert index.get_postings("the") == (1, 2, 4)
    assert index.term_count() == 1


def test_build_consumes_an_iterator_once():
    index = InvertedIndex()
    index.build(iter(_pairs(("a", 1), ("b", 1), ("b", 3))))
    assert index.to_dict() == {"a": [1], "b": [1, 3]}


def test_build_rejects_unsorted_input():
    with pytest.raises(UnsortedInput):
        InvertedIndex().build(_pairs(("b", 1), ("a", 1)))
    with pytest.raises(UnsortedInput):
        InvertedIndex().build(_pairs(("a", 2), ("a", 1)))


def test_build_twice_is_rejected():
    index = InvertedIndex()
    index.build(_pairs(("a", 1)))
    with pytest.raises(IndexAlreadyBuilt):
        index.build(_pairs(("b", 1)))
    assert index.to_dict() == {"a": [1]}


def test_unbuilt_and_empty_index_return_not_found():
    index = InvertedIndex()
    assert not index.is_built
    assert index.search("anything") is None
    index.build([])
    assert index.is_built
    assert index.search("anything") is None
    assert index.term_count() == 0


def test_search_normalizes_query():
    index = InvertedIndex()
    index.build(_pairs(("caesar", 2), ("caesar", 5), ("roman", 1)))
    assert index.search("Romans") == (1,)
    assert index.search("CAESAR") == (2, 5)
    assert index.search("brutus") is None


def test_search_with_porter_config():
    cfg = StemmerConfig(algorithm="porter")
    index = InvertedIndex(cfg)
    index.build(_pairs(("run", 3)))
    assert index.search("running") == (3,)
    assert index.search("running", cfg) == (3,)


def test_postings_are_immutable():
    index = InvertedIndex()
    index.build(_pairs(("a", 1)))
    postings = index.search("a")
    with pytest.raises(AttributeError):
        postings.append(2)


def test_dictionary_views():
    index = InvertedIndex()
    index.build(_pairs(("bone", 4), ("brutus", 5), ("caesar", 2), ("caesar", 5), ("come", 2)))
    assert index.terms() == ["bone", "brutus", "caesar", "come"]
    assert index.terms_with_prefix("c") == ["caesar", "come"]
    assert index.terms_with_prefix("br") == ["brutus"]
    assert index.terms_with_prefix("z") == []
    assert list(index.items())[2] == ("caesar", (2, 5))
    assert "bone" in index
    assert "bones" not in index
    assert len(index) == 4
    assert index.get_postings("missing") == ()
