# term_canon/synonyms/filter.py
# ──────────────────────────────────────────────────────────────
# Streaming longest-match synonym replacement
# ──────────────────────────────────────────────────────────────
"""
filter.py.

Does: Replace multi-word runs of a token stream with single CANONICAL tokens
      ("Ruby on Rails" -> "ruby-on-rails") using a shared Matcher and a
      lookahead buffer bounded by the matcher's max_words.
Returns: SynonymFilter (a Filter: TokenStream -> TokenStream).
Used by: filters.stackoverflow, lemmatize(), the CLI, any caller with its
         own dictionary.

Each pull drains `outgoing` first. Otherwise it fills `buffer` up to
max_words word tokens (never pulling past a punctuation boundary or a run
of MAX_SPACE_RUN spaces), sends leading spaces out, takes the word run at
the front of the buffer and asks the matcher. A match becomes one CANONICAL
token (or nothing, for an empty canonical); no match slides exactly one
token out. There is no phrase-level backtracking, so the work per token is
bounded by max_words.

An ignored punctuation code point directly between two words ("node-js")
joins them instead of acting as a boundary; see RuneTrie.joins. Joined
words still count one by one toward max_words, so a long "x-x-x" chain
cannot grow the buffer. Whether the last buffered token is such a joiner is
only known once the next token arrives.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from term_canon.stream.core import TokenStream
from term_canon.stream.queue import TokenQueue
from term_canon.synonyms.matcher import Matcher, build_matcher
from term_canon.tokens.token import Token

__all__ = ["MAX_SPACE_RUN", "SynonymFilter", "SynonymTokens"]

log = logging.getLogger(__name__)

# Whitespace runs this long end the lookahead window
MAX_SPACE_RUN = 16


class SynonymTokens:
    """
    Does: Per-stream state of the synonym filter.
    Returns: next() -> Token or None at end of stream.
    """

    def __init__(self, incoming: TokenStream, matcher: Matcher):
        self.incoming = incoming
        self.matcher = matcher
        self.buffer = TokenQueue()
        self.outgoing = TokenQueue()
        # Largest buffer size seen; lookahead stays O(max_words)
        self.high_water = 0
        self._exhausted = False

    def next(self) -> Token | None:
        while not self.outgoing.any():
            self.fill()
            run = self.wordrun()
            if run:
                match = self.matcher.search(run)
                if match.found:
                    if match.canonical:
                        self.outgoing.push(Token.canonical(match.canonical))
                    self.buffer.drop(match.consumed)
                else:
                    self.buffer.pop_to(self.outgoing)
                continue

            self.flush()
            if not self.outgoing.any():
                # Buffer is empty and the upstream has ended
                return None

        return self.outgoing.pop()

    # ── Boundaries ───────────────────────────────────────────────────────────
    def _joiner(self, i: int) -> bool | None:
        """
        Does: Decide whether buffer[i] (a PUNCT token) joins two words.
        Returns: True/False, or None while the token after it is not yet buffered.
        """
        buffer = self.buffer
        trie = self.matcher.trie
        if i == 0 or not trie.is_ignorable(buffer[i]) or not buffer[i - 1].is_word:
            return False
        if i + 1 >= len(buffer):
            return False if self._exhausted else None
        return buffer[i + 1].is_word

    def _is_boundary(self, i: int) -> bool:
        return self.buffer[i].is_punct and self._joiner(i) is False

    def words(self) -> int:
        """Returns: Buffered word tokens ("node-js" is two)."""
        return self.buffer.words()

    def boundary(self) -> int:
        """Returns: Index of the first punctuation boundary in the buffer, or -1."""
        for i in range(len(self.buffer)):
            if self._is_boundary(i):
                return i
        return -1

    def _trailing_spaces(self) -> int:
        n = 0
        for i in range(len(self.buffer) - 1, -1, -1):
            if not self.buffer[i].is_space:
                break
            n += 1
        return n

    # ── Steps ────────────────────────────────────────────────────────────────
    def fill(self) -> None:
        """
        Does: Pull into the buffer until it holds max_words word tokens, or
              ends in a punctuation boundary or in MAX_SPACE_RUN spaces, or
              the upstream ends.
        """
        if self._exhausted or self.boundary() >= 0:
            return
        words = self.words()
        spaces = self._trailing_spaces()
        while words < self.matcher.max_words and spaces < MAX_SPACE_RUN:
            token = self.incoming.next()
            if token is None:
                self._exhausted = True
                return

            self.buffer.push(token)
            if len(self.buffer) > self.high_water:
                self.high_water = len(self.buffer)

            if token.is_word:
                words += 1
                spaces = 0
                continue
            spaces = spaces + 1 if token.is_space else 0

            # Never pull past punctuation; a pending joiner may have become one
            last = len(self.buffer) - 1
            if self._is_boundary(last) or (last > 0 and self._is_boundary(last - 1)):
                return

    def wordrun(self) -> list[Token]:
        """
        Does: Send leading spaces to outgoing, then collect the words, interior
              spaces and joiners at the front of the buffer, stopping before
              a boundary or before word max_words + 1.
        Returns: The run (tokens stay in the buffer).
        """
        while self.buffer.any() and self.buffer[0].is_space:
            self.buffer.pop_to(self.outgoing)

        run: list[Token] = []
        words = 0
        for i, token in enumerate(self.buffer):
            if token.is_punct and not self._joiner(i):
                break
            if token.is_word:
                if words == self.matcher.max_words:
                    break
                words += 1
            run.append(token)
        return run

    def flush(self) -> None:
        """
        Does: Nothing at the front can start a phrase: send out everything up
              to and including the first boundary (all of it at end of input).
        """
        end = self.boundary()
        if end < 0:
            self.buffer.flush_to(self.outgoing)
            return
        for _ in range(end + 1):
            self.buffer.pop_to(self.outgoing)


class SynonymFilter:
    """
    Does: Filter that canonicalizes dictionary phrases in a TokenStream.
    Returns: Calling the filter on a stream returns a new lazy stream.

    Build once with SynonymFilter.build(...) (or from a Matcher) and reuse:
    each call gets its own buffers, the matcher is shared read-only.
    """

    def __init__(self, matcher: Matcher):
        self.matcher = matcher

    @classmethod
    def build(
        cls,
        mappings: Mapping[str, str],
        *,
        ignore_case: bool = False,
        ignore: Iterable[str] = (),
    ) -> SynonymFilter:
        return cls(build_matcher(mappings, ignore_case=ignore_case, ignore=ignore))

    @property
    def max_words(self) -> int:
        return self.matcher.max_words

    def tokens(self, incoming: TokenStream) -> SynonymTokens:
        """Does: Create the per-stream state (exposed for inspection in tests)."""
        return SynonymTokens(incoming, self.matcher)

    def __call__(self, incoming: TokenStream) -> TokenStream:
        return TokenStream(self.tokens(incoming).next)

    def __repr__(self) -> str:
        return f"SynonymFilter(phrases={len(self.matcher)}, max_words={self.max_words})"
