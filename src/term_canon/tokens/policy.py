# term_canon/tokens/policy.py
# ──────────────────────────────────────────────────────────────
# Punctuation policy tables for the tokenizer
# ──────────────────────────────────────────────────────────────
"""
policy.

Does: Hold the tunable tables that decide how punctuation behaves around
      words, plus the code point predicates built on them.
Returns: LEADING_PUNCT, MID_PUNCT, WORD_SYMBOLS, is_space(), is_punct(),
         is_terminator().
Used by: tokens.tokenizer, tokens.token.

The tables are policy, not logic: changing membership changes which tech
terms survive as single words, and nothing else in the tokenizer needs to
change with them.

- WORD_SYMBOLS: never punctuation; they are letters for our purposes
  ("C++", "C#", "F#", "#hashtag", "first_last").
- LEADING_PUNCT: starts a word when the next code point is not a terminator
  (".net", "@handle", "$200.13", "'90s").
- MID_PUNCT: kept inside a word when the next code point is not a
  terminator ("node.js", "1,000", "Let's", "and/or", "10:30", "AT&T",
  "my.name@domain.com"). The hyphen is deliberately absent, so
  "wishy-washy" splits into "wishy", "-", "washy".
"""

from __future__ import annotations

import unicodedata

__all__ = [
    "WORD_SYMBOLS",
    "LEADING_PUNCT",
    "MID_PUNCT",
    "is_space",
    "is_punct",
    "is_terminator",
]

# ── Tables ───────────────────────────────────────────────────────────────────
WORD_SYMBOLS: frozenset[str] = frozenset({"+", "#", "_"})

LEADING_PUNCT: frozenset[str] = frozenset(
    {
        ".",
        "@",
        "$",
        "'",
        "‘",
        "’",
    }
)

MID_PUNCT: frozenset[str] = frozenset(
    {
        ".",
        ",",
        "'",
        "’",
        "/",
        ":",
        "&",
        "@",
    }
)


# ── Predicates ───────────────────────────────────────────────────────────────
def is_space(ch: str) -> bool:
    return ch.isspace()


def is_punct(ch: str) -> bool:
    """
    Does: Unicode punctuation (P*) or symbol (S*), minus WORD_SYMBOLS.
    Returns: True if `ch` is punctuation for tokenizing purposes.
    """
    if ch in WORD_SYMBOLS:
        return False
    return unicodedata.category(ch)[0] in ("P", "S")


def is_terminator(ch: str | None) -> bool:
    """Does: True for space, punctuation, or end of input (None)."""
    if ch is None:
        return True
    return is_space(ch) or is_punct(ch)
