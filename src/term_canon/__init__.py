"""
term_canon
==========

Does: Root package for recognizing and canonicalizing tech terms in text and
      HTML ("Ruby on Rails" -> "ruby-on-rails") with lossless round trip.
Returns: The token stream engine (tokenizers, TokenStream, SynonymFilter)
         through a stable namespace.
Used by: Text pipelines (indexing, tagging, NLP preprocessing) and the CLI.
"""

from __future__ import annotations

# tokens first: the tokenizers and the stream module import each other's leaves
from .tokens import Token, TokenKind, tokenize, tokenize_html, tokenize_string
from .stream import Filter, TokenQueue, TokenStream, apply_filters
from .errors import DictionaryError, TermCanonError
from .synonyms import Match, Matcher, SynonymFilter, build_matcher

__all__: list[str] = [
    "Token",
    "TokenKind",
    "tokenize",
    "tokenize_string",
    "tokenize_html",
    "TokenStream",
    "TokenQueue",
    "Filter",
    "apply_filters",
    "Match",
    "Matcher",
    "build_matcher",
    "SynonymFilter",
    "TermCanonError",
    "DictionaryError",
]
__version__ = "0.4.0"
__docformat__ = "google"
