# term_canon/tokens/__init__.py
"""
tokens.
======

Does: Provide the Token value, its closed TokenKind, the punctuation policy,
      and the text/HTML tokenizers.
Exports: Token, TokenKind, tokenize, tokenize_string, tokenize_html
Used by: Every stream pipeline and the synonyms dictionary builder.
"""

from __future__ import annotations

from .token import Token, TokenKind
from .tokenizer import tokenize, tokenize_string
from .html import tokenize_html

__all__ = [
    "Token",
    "TokenKind",
    "tokenize",
    "tokenize_string",
    "tokenize_html",
]
