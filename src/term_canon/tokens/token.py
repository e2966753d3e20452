# term_canon/tokens/token.py
"""
token.py.

Does: Define the immutable Token value and its closed classification (TokenKind).
Returns: Token, TokenKind.
Used by: Tokenizers, TokenQueue/TokenStream, and every filter.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from term_canon.tokens.policy import is_punct, is_space

__all__ = ["TokenKind", "Token"]


class TokenKind(enum.Enum):
    """Exactly one of these per token."""

    SPACE = "space"
    PUNCT = "punct"
    WORD = "word"
    CANONICAL = "canonical"


@dataclass(frozen=True)
class Token:
    """
    Does: Hold one lexical unit and its kind.
          SPACE tokens are always a single code point; PUNCT tokens are a
          single code point, except verbatim markup from the HTML tokenizer.
    Returns: Hashable value object; str(token) is the original text.
    """

    value: str
    kind: TokenKind

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("token value must be a non-empty string")
        if not isinstance(self.kind, TokenKind):
            raise ValueError(f"unknown token kind: {self.kind!r}")
        if self.kind is TokenKind.SPACE and len(self.value) != 1:
            raise ValueError(f"space token must be one code point, got {self.value!r}")

    # ── Constructors ─────────────────────────────────────────────────────────
    @classmethod
    def space(cls, ch: str) -> Token:
        return cls(ch, TokenKind.SPACE)

    @classmethod
    def punct(cls, ch: str) -> Token:
        return cls(ch, TokenKind.PUNCT)

    @classmethod
    def word(cls, text: str) -> Token:
        return cls(text, TokenKind.WORD)

    @classmethod
    def canonical(cls, text: str) -> Token:
        return cls(text, TokenKind.CANONICAL)

    @classmethod
    def from_char(cls, ch: str) -> Token:
        """Does: Classify a single code point. Returns: SPACE, PUNCT or WORD token."""
        if len(ch) != 1:
            raise ValueError(f"expected one code point, got {ch!r}")
        if is_space(ch):
            return cls(ch, TokenKind.SPACE)
        if is_punct(ch):
            return cls(ch, TokenKind.PUNCT)
        return cls(ch, TokenKind.WORD)

    # ── Predicates ───────────────────────────────────────────────────────────
    @property
    def is_space(self) -> bool:
        return self.kind is TokenKind.SPACE

    @property
    def is_punct(self) -> bool:
        return self.kind is TokenKind.PUNCT

    @property
    def is_word(self) -> bool:
        # Canonical tokens take part in phrase matching like ordinary words
        return self.kind is TokenKind.WORD or self.kind is TokenKind.CANONICAL

    @property
    def is_canonical(self) -> bool:
        return self.kind is TokenKind.CANONICAL

    def __str__(self) -> str:
        return self.value
