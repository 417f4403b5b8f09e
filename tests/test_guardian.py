from docsearch_core import SearchEngine
from docsearch_core.agents import IndexGuardian


def test_consistent_index_is_healthy(animals: SearchEngine) -> None:
    report = animals.check_health()
    assert report.healthy
    assert report.terms_checked == 12
    assert report.documents_checked == 2


def test_posting_for_missing_document(animals: SearchEngine) -> None:
    animals.inverted_index.add("ghost", "zz")

    report = animals.check_health()

    assert not report.healthy
    assert report.issues == ["Term 'ghost' points to missing document 'zz'"]


def test_posting_for_document_without_the_term(animals: SearchEngine) -> None:
    animals.inverted_index.add("fox", "b")
    report = animals.check_health()
    assert report.issues == ["Term 'fox' points to document 'b' which does not contain it"]


def test_document_term_missing_from_index(animals: SearchEngine) -> None:
    animals.inverted_index.remove_document("a", ["dog"])
    report = animals.check_health()
    assert report.issues == ["Document 'a' term 'dog' is missing from the index"]


def test_issue_list_is_capped(animals: SearchEngine) -> None:
    for i in range(5):
        animals.inverted_index.add(f"ghost{i}", "zz")

    report = IndexGuardian(max_issues=2).check_consistency(
        animals.document_store, animals.inverted_index
    )

    assert report.issues[-1] == "... 3 more issues"
    assert len(report.issues) == 3


def test_guardian_statistics(animals: SearchEngine) -> None:
    guardian = IndexGuardian()
    guardian.check_consistency(animals.document_store, animals.inverted_index)
    animals.inverted_index.add("ghost", "zz")
    guardian.check_consistency(animals.document_store, animals.inverted_index)

    stats = guardian.get_statistics()
    assert stats["checks"] == 2
    assert stats["unhealthy"] == 1
    assert stats["last_check"] is not None
