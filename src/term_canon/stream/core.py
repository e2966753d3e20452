# term_canon/stream/core.py
# ──────────────────────────────────────────────────────────────
# Pull-based token streams and their combinators
# ──────────────────────────────────────────────────────────────
"""
core.

Does: Wrap a `next_token()` callable into a lazy, single-consumer TokenStream
      and provide filter chaining plus the exhausting combinators
      (count, to_list, to_string, write_to) and lazy ones (lemmas, distinct,
      words).
Returns: TokenStream, Filter, apply_filters().
Used by: Tokenizers (producers), every filter, the CLI (consumer).

Pull contract: next() returns a Token, or None at end of stream, or raises.
End and error are both terminal; once either has happened the stream only
returns None. Nothing runs until the consumer pulls, and tokens already
handed out are never taken back.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import TextIO

from term_canon.tokens.token import Token

__all__ = ["TokenStream", "Filter", "apply_filters"]

log = logging.getLogger(__name__)

NextToken = Callable[[], "Token | None"]


class TokenStream:
    """
    Does: Lazy iterator of tokens over a pull function.
    Returns: Tokens via next() / iteration; combinators return new streams
             or exhaust this one.
    """

    __slots__ = ("_next", "_done")

    def __init__(self, next_token: NextToken):
        self._next = next_token
        self._done = False

    @classmethod
    def from_iterable(cls, tokens: Iterable[Token]) -> TokenStream:
        it = iter(tokens)
        return cls(lambda: next(it, None))

    # ── Pull ─────────────────────────────────────────────────────────────────
    def next(self) -> Token | None:
        if self._done:
            return None
        try:
            token = self._next()
        except Exception:
            self._done = True
            raise
        if token is None:
            self._done = True
        return token

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next()
        if token is None:
            raise StopIteration
        return token

    # ── Composition ──────────────────────────────────────────────────────────
    def filter(self, *filters: Filter) -> TokenStream:
        """Does: Apply `filters` in order; the output of one feeds the next."""
        return apply_filters(self, filters)

    def lemmas(self) -> TokenStream:
        """Does: Keep only tokens a filter produced (CANONICAL), lazily."""
        return self._where(lambda t: t.is_canonical)

    def words(self) -> TokenStream:
        """Does: Keep only word tokens (WORD or CANONICAL), lazily."""
        return self._where(lambda t: t.is_word)

    def distinct(self) -> TokenStream:
        """Does: Drop tokens whose value was already seen; first one wins."""
        seen: set[str] = set()

        def keep(token: Token) -> bool:
            if token.value in seen:
                return False
            seen.add(token.value)
            return True

        return self._where(keep)

    def _where(self, predicate: Callable[[Token], bool]) -> TokenStream:
        def next_token() -> Token | None:
            while True:
                token = self.next()
                if token is None or predicate(token):
                    return token

        return TokenStream(next_token)

    # ── Exhausting combinators ───────────────────────────────────────────────
    def count(self) -> int:
        return sum(1 for _ in self)

    def to_list(self) -> list[Token]:
        return list(self)

    def to_string(self) -> str:
        return "".join(t.value for t in self)

    def write_to(self, fp: TextIO, *, lines: bool = False) -> int:
        """
        Does: Write every token's text to `fp`, optionally one per line.
        Returns: Number of tokens written.
        """
        n = 0
        for token in self:
            fp.write(token.value)
            if lines:
                fp.write("\n")
            n += 1
        return n


Filter = Callable[[TokenStream], TokenStream]


def apply_filters(stream: TokenStream, filters: Iterable[Filter]) -> TokenStream:
    """Does: Chain `filters` over `stream` in the given order. Returns: last stream."""
    for f in filters:
        log.debug("Applying filter %s", getattr(f, "__name__", type(f).__name__))
        stream = f(stream)
    return stream
