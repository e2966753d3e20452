# term_canon/synonyms/__init__.py
"""
synonyms.
========

Does: Build phrase matchers from synonyms dictionaries and apply them to
      token streams with bounded lookahead.
Exports: RuneTrie, Match, Matcher, build_matcher, split_phrases,
         SynonymFilter, SynonymTokens
Used by: filters.stackoverflow, the top-level lemmatize helpers, the CLI.
"""

from __future__ import annotations

from .filter import SynonymFilter, SynonymTokens
from .matcher import Matcher, build_matcher, split_phrases
from .trie import Match, RuneTrie

__all__ = [
    "RuneTrie",
    "Match",
    "Matcher",
    "build_matcher",
    "split_phrases",
    "SynonymFilter",
    "SynonymTokens",
]
