import pytest

from docsearch_core import QueryError, SearchConfig, SearchEngine, SearchOptions, SortBy, SortOrder


def test_defaults() -> None:
    options = SearchOptions()
    assert options.fuzzy_threshold == 0.8
    assert options.max_results == 100
    assert options.context_length == 50
    assert options.sort_by is SortBy.RELEVANCE
    assert options.descending


def test_string_sort_values_are_coerced() -> None:
    options = SearchOptions(sort_by="Document", sort_order="ascending")
    assert options.sort_by is SortBy.DOCUMENT
    assert options.sort_order is SortOrder.ASCENDING


def test_invalid_sort_value() -> None:
    with pytest.raises(QueryError, match="sort_by"):
        SearchOptions(sort_by="date")


@pytest.mark.parametrize(
    "overrides",
    [
        {"fuzzy_threshold": 1.5},
        {"fuzzy_threshold": -0.1},
        {"max_results": -1},
        {"context_length": -5},
        {"sort_order": "sideways"},
        {"colour": "red"},
    ],
)
def test_merged_rejects_invalid_values(overrides) -> None:
    with pytest.raises(QueryError):
        SearchOptions().merged(**overrides)


def test_merged_ignores_none_and_copies() -> None:
    base = SearchOptions()
    merged = base.merged(max_results=5, whole_word=None)
    assert merged.max_results == 5
    assert merged.whole_word is False
    assert base.max_results == 100


def test_engine_config_controls_tags_and_defaults() -> None:
    config = SearchConfig(
        index_name="docs",
        highlight_pre_tag="<em>",
        highlight_post_tag="</em>",
        default_options=SearchOptions(context_length=0),
    )
    engine = SearchEngine(config=config)
    engine.index_text("a red fox", id="1")

    (hit,) = engine.search("fox").hits
    assert hit.context == "...fox"
    assert hit.highlighted_snippet == "...<em>fox</em>"


def test_min_term_length_is_configurable() -> None:
    engine = SearchEngine(config=SearchConfig(min_term_length=4))
    doc = engine.index_text("the quick fox", id="1")
    assert list(doc.terms) == ["quick"]
    assert doc.word_count == 3
