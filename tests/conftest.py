from typing import List

import pytest

from docsearch_core import SearchEngine
from docsearch_core.results import SearchHit

DOC_A = "the quick brown fox jumps over the lazy dog"
DOC_B = "the quick cat sleeps all day"


@pytest.fixture
def engine() -> SearchEngine:
    return SearchEngine()


@pytest.fixture
def animals(engine: SearchEngine) -> SearchEngine:
    engine.index_text(DOC_A, id="a", name="Fox")
    engine.index_text(DOC_B, id="b", name="Cat")
    return engine


def hit_docs(hits: List[SearchHit]) -> List[str]:
    return sorted({hit.document_id for hit in hits})
