# term_canon/synonyms/trie.py
# ──────────────────────────────────────────────────────────────
# Rune trie keyed by normalized code points
# ──────────────────────────────────────────────────────────────
"""
trie.py.

Does: Store token phrases in a prefix tree keyed by normalized code points
      and find the longest stored phrase at the start of a token run.
Returns: RuneTrie, Match.
Used by: synonyms.matcher (construction), synonyms.filter (lookup).

Keys are built per code point: optionally case-folded, and skipped entirely
when they belong to the ignore set. Whitespace tokens all key as a single
" ", and a run of whitespace tokens keys once, so "Ruby\non  Rails" and
"Ruby on Rails" are the same phrase. A phrase only ends on a word token,
which keeps trailing whitespace out of a match and rules out substring
matches ("Rub" never matches "Ruby").

Punctuation ends a phrase, with one exception: a single ignored code point
sitting directly between two words ("node-js", "objective-c") joins them.
"Ruby. on Rails" still stops at the period, since a space follows it.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import NamedTuple

from term_canon.tokens.token import Token

__all__ = ["Match", "RuneTrie"]

_SPACE_KEY = " "


class Match(NamedTuple):
    found: bool
    canonical: str
    consumed: int


NO_MATCH = Match(False, "", 0)


class _Node:
    __slots__ = ("children", "canonical")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        # None: not the end of a phrase; "" is a valid (suppressing) canonical
        self.canonical: str | None = None


class RuneTrie:
    """
    Does: Map token phrases to canonical strings.
    Returns: search() -> Match(found, canonical, consumed tokens).
    """

    def __init__(self, ignore_case: bool = False, ignore: Iterable[str] = ()):
        self.ignore_case = bool(ignore_case)
        ignored = set(ignore)
        if self.ignore_case:
            ignored |= {ch.casefold() for ch in ignored}
        self.ignore: frozenset[str] = frozenset(ignored)
        self._root = _Node()
        self._size = 0
        self._frozen = False

    # ── Key normalization ────────────────────────────────────────────────────
    def _keys(self, token: Token) -> Iterator[str]:
        """Does: Yield the trie keys of one token (possibly none)."""
        if token.is_space:
            if _SPACE_KEY not in self.ignore:
                yield _SPACE_KEY
            return
        for ch in token.value:
            if ch in self.ignore:
                continue
            if self.ignore_case:
                for folded in ch.casefold():
                    if folded not in self.ignore:
                        yield folded
            else:
                yield ch

    def is_ignorable(self, token: Token) -> bool:
        """Does: True for a one-code-point PUNCT token whose code point is ignored."""
        if not token.is_punct or len(token.value) != 1:
            return False
        ch = token.value.casefold() if self.ignore_case else token.value
        return ch in self.ignore

    def joins(self, tokens: Sequence[Token], i: int) -> bool:
        """Does: True if tokens[i] is ignorable punctuation directly between two words ("node-js")."""
        return (
            0 < i < len(tokens) - 1
            and self.is_ignorable(tokens[i])
            and tokens[i - 1].is_word
            and tokens[i + 1].is_word
        )

    # ── Insertion ────────────────────────────────────────────────────────────
    def add(self, tokens: Sequence[Token], canonical: str) -> str | None:
        """
        Does: Insert `tokens` as a phrase for `canonical`.
        Returns: The canonical previously stored for this key, if any.
        """
        if self._frozen:
            raise TypeError("cannot add phrases to a frozen RuneTrie")
        node = self._root
        prev_space = False
        for token in tokens:
            if token.is_space:
                if prev_space:
                    continue
                prev_space = True
            else:
                prev_space = False
            for key in self._keys(token):
                node = node.children.setdefault(key, _Node())
        previous = node.canonical
        if previous is None:
            self._size += 1
        node.canonical = canonical
        return previous

    def freeze(self) -> RuneTrie:
        """Does: Make the trie read-only; add() raises TypeError afterwards."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ── Lookup ───────────────────────────────────────────────────────────────
    def search(self, tokens: Sequence[Token]) -> Match:
        """
        Does: Walk `tokens` from the start and keep the longest phrase that
              ends on a word token.
        Returns: Match; consumed counts whole tokens, interior spaces included.
        """
        node = self._root
        best = NO_MATCH
        prev_space = False
        for i, token in enumerate(tokens):
            if token.is_punct and not self.joins(tokens, i):
                break
            if token.is_space:
                if prev_space:
                    continue
                prev_space = True
            else:
                prev_space = False
            for key in self._keys(token):
                node = node.children.get(key)
                if node is None:
                    return best
            if token.is_word and node.canonical is not None:
                best = Match(True, node.canonical, i + 1)
        return best

    def __len__(self) -> int:
        return self._size
