# term_canon/filters/contractions.py
"""
contractions.py.

Does: Expand single-token English contractions ("don't" -> "do not",
      "We’ve" -> "We have", "SHE'S" -> "SHE IS") and re-tokenize the result.
Returns: expand() filter, load_contractions().
Used by: CLI (--contractions), pipelines that need uncontracted text.
"""

from __future__ import annotations

import logging

from term_canon.stream.core import TokenStream
from term_canon.stream.queue import TokenQueue
from term_canon.tokens.token import Token, TokenKind
from term_canon.tokens.tokenizer import tokenize_string
from term_canon.utils.load_config import load_dictionary

__all__ = ["expand", "load_contractions", "expansion_for"]

log = logging.getLogger(__name__)

_CURLY_APOSTROPHES = ("’", "ʼ")


def load_contractions(file: str = "contractions") -> dict[str, str]:
    """Does: Load the lowercase contraction table from the data dir. Returns: dict."""
    table = load_dictionary(file)
    return {k.lower(): v for k, v in table.items()}


def _match_case(original: str, expansion: str) -> str:
    if len(original) > 1 and original.isupper():
        return expansion.upper()
    if original[:1].isupper():
        return expansion[:1].upper() + expansion[1:]
    return expansion


def expansion_for(value: str, table: dict[str, str]) -> str | None:
    """
    Does: Look up `value` exactly first, then case-insensitively; curly
          apostrophes count as straight ones.
    Returns: The expansion with the original's casing, or None.
    """
    key = value
    for ch in _CURLY_APOSTROPHES:
        key = key.replace(ch, "'")
    if key in table:
        return table[key]
    expansion = table.get(key.lower())
    if expansion is None:
        return None
    return _match_case(value, expansion)


class _Tokens:
    def __init__(self, incoming: TokenStream, table: dict[str, str]):
        self.incoming = incoming
        self.table = table
        self.outgoing = TokenQueue()

    def next(self) -> Token | None:
        if self.outgoing.any():
            return self.outgoing.pop()

        token = self.incoming.next()
        if token is None or token.kind is not TokenKind.WORD:
            return token

        expansion = expansion_for(token.value, self.table)
        if expansion is None:
            return token

        self.outgoing.push(*tokenize_string(expansion))
        return self.outgoing.pop()


def expand(incoming: TokenStream, table: dict[str, str] | None = None) -> TokenStream:
    """Does: Filter expanding contractions in WORD tokens. Returns: TokenStream."""
    if table is None:
        table = load_contractions()
    return TokenStream(_Tokens(incoming, table).next)
