"""DocSearch Analyzers - Text Analysis.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from docsearch_core.analyzers.base import Token, Tokenizer
from docsearch_core.analyzers.tokenizers import WordTokenizer

__all__ = ["Token", "Tokenizer", "WordTokenizer"]
