from docsearch_core import SearchEngine
from docsearch_core.facets import FacetBuilder, FacetValue, SuggestionGenerator
from docsearch_core.index import InvertedIndex


# ---------- Facets ----------


def test_facet_builder_orders_by_count_then_value() -> None:
    builder = FacetBuilder("format")
    for value in ["txt", "md", "html", "md", "txt", None]:
        builder.add(value)

    assert builder.build() == [
        FacetValue("md", 2),
        FacetValue("txt", 2),
        FacetValue("html", 1),
    ]
    assert builder.missing == 1


def test_search_facets_count_candidate_documents(engine: SearchEngine) -> None:
    engine.index_text("report one", id="1", format="txt")
    engine.index_text("report two", id="2", format="md")
    engine.index_text("report three", id="3", format="md")
    engine.index_text("unrelated", id="4", format="html")

    result = engine.search("report", max_results=1)

    assert result.facets == {"format": [FacetValue("md", 2), FacetValue("txt", 1)]}
    assert len(result.hits) == 1
    assert result.total_hits == 3


def test_facets_are_empty_list_when_nothing_matches(engine: SearchEngine) -> None:
    engine.index_text("report", id="1")
    assert engine.search("zzzz").facets == {"format": []}


# ---------- Suggestions ----------


def make_index(*terms: str) -> InvertedIndex:
    index = InvertedIndex()
    for i, term in enumerate(terms):
        index.add(term, str(i))
    return index


def test_suggestions_replace_the_misspelled_token() -> None:
    generator = SuggestionGenerator(make_index("quick", "brown", "fox"))
    assert generator.suggest("quikc fox") == ["quick fox"]


def test_identical_terms_are_not_suggested() -> None:
    generator = SuggestionGenerator(make_index("fox"))
    assert generator.suggest("fox") == []


def test_suggestions_follow_vocabulary_order_and_are_capped() -> None:
    index = make_index("cart", "bat", "cap", "car", "cab", "can", "cad")
    generator = SuggestionGenerator(index, threshold=0.6, max_suggestions=5)

    # Every term is within one edit of "cat"
    assert generator.suggest("cat") == ["bat", "cab", "cad", "can", "cap"]


def test_suggestions_are_deduplicated() -> None:
    generator = SuggestionGenerator(make_index("quick"))
    assert generator.suggest("qwick qwick") == ["quick quick"]


def test_rewrite_ignores_case_and_keeps_spacing() -> None:
    assert SuggestionGenerator.rewrite("Qwick  brown", "qwick", "quick") == "quick  brown"
    assert SuggestionGenerator.rewrite("qwicker qwick", "qwick", "quick") == "qwicker quick"


def test_search_suggests_only_without_hits(animals: SearchEngine) -> None:
    missed = animals.search("quikc")
    assert missed.total_hits == 0
    assert missed.suggestions == ["quick"]

    found = animals.search("quick")
    assert found.total_hits > 0
    assert found.suggestions == []
