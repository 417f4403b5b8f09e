import random

from docsearch_core import SearchEngine
from docsearch_core.index import DocumentStore, IndexedDocument, InvertedIndex

from .conftest import DOC_A, DOC_B


def assert_consistent(engine: SearchEngine) -> None:
    index = engine.inverted_index
    store = engine.document_store
    for term, postings in index.items():
        assert postings, term
        for doc_id in postings:
            document = store.get(doc_id)
            assert document is not None
            assert term in document.terms
    for document in store:
        for term in document.terms:
            assert document.id in index.postings(term)
    assert engine.check_health().healthy


# ---------- Indexing ----------


def test_index_text_builds_positions_and_frequencies(engine: SearchEngine) -> None:
    doc = engine.index_text("Don't stop the music, stop it", id="d1")

    # don, t, stop, the, music, stop, it
    assert doc.word_count == 7
    assert "t" not in doc.terms
    assert doc.terms["stop"] == [2, 5]
    assert doc.term_frequencies["stop"] == 2
    assert doc.terms["don"] == [0]
    assert doc.terms["it"] == [6]
    assert engine.inverted_index.postings("stop") == frozenset({"d1"})


def test_index_text_defaults(engine: SearchEngine) -> None:
    doc = engine.index_text("hello world")
    assert doc.id
    assert doc.name == "Untitled"
    assert doc.format == "txt"
    assert engine.get_document(doc.id) is doc

    titled = engine.index_text("hello", metadata={"title": "Greeting"})
    assert titled.name == "Greeting"

    named = engine.index_text("hello", name="Explicit", metadata={"title": "Greeting"})
    assert named.name == "Explicit"


def test_document_ids_keep_indexing_order(animals: SearchEngine) -> None:
    animals.index_text("zebra", id="0")
    assert animals.get_document_ids() == ["a", "b", "0"]


def test_reindexing_an_id_replaces_the_old_postings(animals: SearchEngine) -> None:
    animals.index_text("a completely different text", id="a")

    assert "fox" not in animals.inverted_index
    assert animals.inverted_index.postings("the") == frozenset({"b"})
    assert animals.get_document("a").content == "a completely different text"
    assert len(animals) == 2
    assert_consistent(animals)


# ---------- Removal ----------


def test_remove_document_drops_orphaned_terms(animals: SearchEngine) -> None:
    assert animals.remove_document("a") is True

    assert "a" not in animals
    assert "fox" not in animals.inverted_index
    assert "dog" not in animals.inverted_index
    assert animals.inverted_index.postings("quick") == frozenset({"b"})
    assert_consistent(animals)


def test_remove_absent_document_changes_nothing(animals: SearchEngine) -> None:
    before = list(animals.inverted_index.items())
    assert animals.remove_document("missing") is False
    assert list(animals.inverted_index.items()) == before
    assert animals.get_document_ids() == ["a", "b"]


def test_clear_index_empties_both_structures(animals: SearchEngine) -> None:
    animals.clear_index()
    assert len(animals) == 0
    assert len(animals.inverted_index) == 0
    assert animals.get_document_ids() == []


def test_store_and_index_stay_consistent_over_random_operations(engine: SearchEngine) -> None:
    rng = random.Random(7)
    words = ["alpha", "beta", "gamma", "delta", "epsilon", "x", "zeta"]
    for step in range(200):
        action = rng.random()
        doc_id = f"doc{rng.randint(0, 9)}"
        if action < 0.6:
            text = " ".join(rng.choice(words) for _ in range(rng.randint(0, 8)))
            engine.index_text(text, id=doc_id)
        elif action < 0.95:
            engine.remove_document(doc_id)
        else:
            engine.clear_index()
        assert_consistent(engine)


# ---------- Statistics ----------


def test_statistics(animals: SearchEngine) -> None:
    stats = animals.get_statistics()

    assert stats.total_documents == 2
    assert stats.total_terms == 12
    assert stats.average_document_length == 7.5
    assert stats.estimated_size == (len(DOC_A) * 2 + 50 * 8) + (len(DOC_B) * 2 + 50 * 6)
    assert stats.documents_by_format == {"txt": 2}


def test_statistics_on_empty_index(engine: SearchEngine) -> None:
    stats = engine.get_statistics()
    assert stats.total_documents == 0
    assert stats.average_document_length == 0.0
    assert stats.estimated_size == 0


# ---------- Components ----------


def test_inverted_index_remove_reports_dropped_terms() -> None:
    index = InvertedIndex()
    index.add_document("1", ["a1", "b1"])
    index.add_document("2", ["b1"])

    assert index.remove_document("1", ["a1", "b1"]) == 1
    assert index.vocabulary() == ["b1"]
    assert index.document_frequency("b1") == 1
    assert index.postings("a1") == frozenset()


def test_document_store_basics() -> None:
    store = DocumentStore()
    doc = IndexedDocument(id="", content="x")
    store.store(doc)

    assert doc.id
    assert store.exists(doc.id)
    assert store.delete(doc.id) is doc
    assert store.delete(doc.id) is None
    assert store.count() == 0
