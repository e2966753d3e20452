# term_canon/filters/stemmer.py
"""
stemmer.py.

Does: Stem WORD tokens with nltk's Snowball stemmers
      ("management" -> "manag"); changed tokens become CANONICAL.
Returns: Stemmer filter class and per-language factories.
Used by: CLI (--stem --lang ...), search indexing pipelines.

Snowball stemmers are rule based and need no corpus download.
"""

from __future__ import annotations

import logging

from nltk.stem.snowball import SnowballStemmer

from term_canon.stream.core import TokenStream
from term_canon.tokens.token import Token, TokenKind

__all__ = [
    "LANGUAGES",
    "Stemmer",
    "english",
    "french",
    "norwegian",
    "russian",
    "spanish",
    "swedish",
]

log = logging.getLogger(__name__)

LANGUAGES: tuple[str, ...] = ("english", "french", "norwegian", "russian", "spanish", "swedish")


class Stemmer:
    """Filter: TokenStream -> TokenStream stemming word tokens in one language."""

    def __init__(self, language: str = "english"):
        lang = (language or "").strip().lower()
        if lang not in LANGUAGES:
            raise ValueError(f"unknown language {language!r}; options are {', '.join(LANGUAGES)}")
        self.language = lang
        self._stemmer = SnowballStemmer(lang)

    def stem(self, word: str) -> str:
        return self._stemmer.stem(word)

    def __call__(self, incoming: TokenStream) -> TokenStream:
        def next_token() -> Token | None:
            token = incoming.next()
            if token is None or token.kind is not TokenKind.WORD:
                return token
            stemmed = self.stem(token.value)
            if not stemmed or stemmed == token.value:
                return token
            return Token.canonical(stemmed)

        return TokenStream(next_token)

    def __repr__(self) -> str:
        return f"Stemmer({self.language!r})"


def english(incoming: TokenStream) -> TokenStream:
    return Stemmer("english")(incoming)


def french(incoming: TokenStream) -> TokenStream:
    return Stemmer("french")(incoming)


def norwegian(incoming: TokenStream) -> TokenStream:
    return Stemmer("norwegian")(incoming)


def russian(incoming: TokenStream) -> TokenStream:
    return Stemmer("russian")(incoming)


def spanish(incoming: TokenStream) -> TokenStream:
    return Stemmer("spanish")(incoming)


def swedish(incoming: TokenStream) -> TokenStream:
    return Stemmer("swedish")(incoming)
