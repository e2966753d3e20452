# term_canon/filters/ascii.py
"""
ascii.py.

Does: Fold diacritics in word tokens to ASCII ("café" -> "cafe",
      "Straße" -> "Strasse"); changed tokens become CANONICAL.
Returns: fold() filter, fold_text().
Used by: CLI (--ascii), indexing pipelines that want accent-insensitive terms.
"""

from __future__ import annotations

import unicodedata

from term_canon.stream.core import TokenStream
from term_canon.tokens.token import Token, TokenKind

__all__ = ["fold", "fold_text"]

# Letters with no canonical decomposition to a base letter
_SUBSTITUTIONS: dict[str, str] = {
    "ß": "ss",
    "ẞ": "SS",
    "æ": "ae",
    "Æ": "AE",
    "œ": "oe",
    "Œ": "OE",
    "ø": "o",
    "Ø": "O",
    "ł": "l",
    "Ł": "L",
    "đ": "d",
    "Đ": "D",
    "ð": "d",
    "Ð": "D",
    "þ": "th",
    "Þ": "TH",
    "ı": "i",
}


def fold_text(text: str) -> str:
    """
    Does: NFKD-decompose, drop combining marks, then apply the substitution
          table. Code points with no ASCII form are kept as they are.
    """
    out: list[str] = []
    for ch in text:
        if ch.isascii():
            out.append(ch)
            continue
        if ch in _SUBSTITUTIONS:
            out.append(_SUBSTITUTIONS[ch])
            continue
        decomposed = unicodedata.normalize("NFKD", ch)
        base = "".join(c for c in decomposed if not unicodedata.combining(c))
        out.append(base if base.isascii() and base else ch)
    return "".join(out)


def fold(incoming: TokenStream) -> TokenStream:
    """Does: Filter folding WORD tokens to ASCII. Returns: TokenStream."""

    def next_token() -> Token | None:
        token = incoming.next()
        if token is None or token.kind is not TokenKind.WORD:
            return token
        folded = fold_text(token.value)
        if folded == token.value:
            return token
        return Token.canonical(folded)

    return TokenStream(next_token)
