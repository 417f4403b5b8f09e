"""DocSearch Tokenizers - Text Tokenization.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
from typing import List

from docsearch_core.analyzers.base import Token, Tokenizer


class WordTokenizer(Tokenizer):
    """Lowercasing word tokenizer.

    Replaces every character that is neither a word character nor
    whitespace with a space, then splits on runs of whitespace.
    Empty tokens are dropped; short tokens are kept, so positions
    count every word in the text.
    """

    NON_WORD_PATTERN = re.compile(r"[^\w\s]")

    def normalize(self, text: str) -> str:
        """Lowercase and strip punctuation from text."""
        return self.NON_WORD_PATTERN.sub(" ", text.lower())

    def tokenize(self, text: str) -> List[Token]:
        """Tokenize text into lowercase word tokens."""
        words = self.normalize(text).split()
        return [Token(text=word, position=i) for i, word in enumerate(words)]


__all__ = ["WordTokenizer"]
