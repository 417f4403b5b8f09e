import math

import pytest

from docsearch_core import (
    DocumentNotFoundError,
    QueryError,
    SearchEngine,
    SearchOptions,
    SortBy,
    SortOrder,
)

from .conftest import hit_docs


# ---------- Scenarios ----------


def test_universal_term_hits_every_document_with_zero_score(animals: SearchEngine) -> None:
    result = animals.search("quick")

    assert hit_docs(result.hits) == ["a", "b"]
    assert result.total_hits == 2
    assert all(hit.score == 0 for hit in result.hits)


def test_rare_term_scores_tf_idf(animals: SearchEngine) -> None:
    result = animals.search("dog")

    assert result.total_hits == 1
    (hit,) = result.hits
    assert hit.document_id == "a"
    assert hit.document_name == "Fox"
    assert hit.score == pytest.approx((1 / 9) * math.log(2 / 1))
    assert hit.score == pytest.approx(0.0770, abs=1e-4)
    assert "<mark>dog</mark>" in hit.highlighted_snippet


def test_phrase_matches_only_documents_containing_it(animals: SearchEngine) -> None:
    result = animals.search('"brown fox"')
    assert hit_docs(result.hits) == ["a"]
    assert result.hits[0].matched_text == "brown fox"


def test_excluded_term_removes_documents(animals: SearchEngine) -> None:
    result = animals.search("quick -cat")
    assert hit_docs(result.hits) == ["a"]


def test_fuzzy_match_finds_similar_terms(animals: SearchEngine) -> None:
    result = animals.search("qwick", fuzzy_match=True, fuzzy_threshold=0.8)

    assert hit_docs(result.hits) == ["a", "b"]
    assert all(hit.matched_text == "quick" for hit in result.hits)


def test_removed_document_is_no_longer_found(animals: SearchEngine) -> None:
    before = animals.get_statistics().total_documents
    assert animals.search("fox").total_hits == 1

    assert animals.remove_document("a")

    assert animals.search("fox").total_hits == 0
    assert animals.get_statistics().total_documents == before - 1


# ---------- Search behaviour ----------


@pytest.mark.parametrize("query", ["", "   ", "\n\t"])
def test_blank_query_returns_empty_result(animals: SearchEngine, query: str) -> None:
    result = animals.search(query)

    assert result.query == query
    assert result.total_hits == 0
    assert result.hits == []
    assert result.facets == {}
    assert result.suggestions == []


def test_required_terms_intersect(animals: SearchEngine) -> None:
    result = animals.search("+quick +lazy")
    assert hit_docs(result.hits) == ["a"]
    assert sorted({h.matched_text for h in result.hits}) == ["lazy", "quick"]


def test_total_hits_counts_before_truncation(animals: SearchEngine) -> None:
    result = animals.search("the", max_results=2)
    assert result.total_hits == 3
    assert len(result) == 2


def test_default_sort_puts_best_hits_first(engine: SearchEngine) -> None:
    engine.index_text("alpha beta", id="c1")
    engine.index_text("alpha gamma delta", id="c2")
    engine.index_text("zeta", id="c3")

    result = engine.search("alpha")

    assert [h.document_id for h in result] == ["c1", "c2"]
    assert result[0].score > result[1].score
    assert result.document_ids() == ["c1", "c2"]


def test_equal_scores_order_by_document_then_position(engine: SearchEngine) -> None:
    engine.index_text("alpha beta", id="c1")
    engine.index_text("alpha alpha gamma delta", id="c2")
    engine.index_text("zeta", id="c3")

    result = engine.search("alpha")

    assert [(h.document_id, h.start_position) for h in result] == [
        ("c1", 0),
        ("c2", 0),
        ("c2", 6),
    ]


def test_sort_by_position_ascending(animals: SearchEngine) -> None:
    result = animals.search("the", sort_by="position", sort_order="ascending")
    assert [(h.document_id, h.start_position) for h in result] == [
        ("a", 0),
        ("b", 0),
        ("a", 31),
    ]


def test_options_object_and_overrides(animals: SearchEngine) -> None:
    options = SearchOptions(sort_by=SortBy.POSITION, sort_order=SortOrder.DESCENDING)
    result = animals.search("the", options, max_results=1)
    assert [(h.document_id, h.start_position) for h in result] == [("a", 31)]

    mapped = animals.search("the", {"max_results": 1})
    assert len(mapped) == 1


def test_unknown_option_is_rejected(animals: SearchEngine) -> None:
    with pytest.raises(QueryError):
        animals.search("fox", fuzzy=True)


def test_search_duration_is_reported(animals: SearchEngine) -> None:
    assert animals.search("fox").search_duration >= 0


def test_hit_ids_are_unique(animals: SearchEngine) -> None:
    hits = animals.search("the").hits
    assert len({h.id for h in hits}) == len(hits)


# ---------- Single-document search ----------


def test_search_in_document_is_unpaginated(animals: SearchEngine) -> None:
    hits = animals.search_in_document("a", "the", max_results=1)
    assert [h.start_position for h in hits] == [0, 31]


def test_search_in_document_skips_candidate_matching(animals: SearchEngine) -> None:
    # "-fox" would exclude document a in a full search
    hits = animals.search_in_document("a", "dog -fox")
    assert [h.matched_text for h in hits] == ["dog"]


def test_search_in_unknown_document(animals: SearchEngine) -> None:
    with pytest.raises(DocumentNotFoundError) as excinfo:
        animals.search_in_document("missing", "fox")

    assert excinfo.value.document_id == "missing"
    assert str(excinfo.value) == "Document not found: missing"
    assert isinstance(excinfo.value, KeyError)


# ---------- Health ----------


def test_check_health_reports_consistent_index(animals: SearchEngine) -> None:
    animals.remove_document("b")
    report = animals.check_health()
    assert report.healthy
    assert report.issues == []
    assert report.documents_checked == 1
