# term_canon/stream/queue.py
"""
queue.py.

Does: Ordered token buffer used by filters for lookahead and outgoing tokens.
Returns: TokenQueue.
Used by: synonyms.filter, filters.contractions.

A queue belongs to a single filter invocation and is never shared between
streams. Popping an empty queue or dropping more than is buffered is a bug
in the caller, hence assertions rather than exceptions.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from term_canon.tokens.token import Token

__all__ = ["TokenQueue"]


class TokenQueue:
    """FIFO of tokens with push/pop/drop/pop_to/flush_to."""

    __slots__ = ("_tokens",)

    def __init__(self, *tokens: Token):
        self._tokens: deque[Token] = deque(tokens)

    def push(self, *tokens: Token) -> None:
        self._tokens.extend(tokens)

    def pop(self) -> Token:
        assert self._tokens, "pop from an empty TokenQueue"
        return self._tokens.popleft()

    def drop(self, n: int) -> None:
        """Does: Discard the first `n` tokens for good."""
        assert 0 <= n <= len(self._tokens), f"cannot drop {n} of {len(self._tokens)} tokens"
        for _ in range(n):
            self._tokens.popleft()

    def pop_to(self, dst: TokenQueue) -> None:
        """Does: Move the first token to the back of `dst`."""
        dst._tokens.append(self.pop())

    def flush_to(self, dst: TokenQueue) -> None:
        """Does: Move every token to `dst`, keeping order."""
        dst._tokens.extend(self._tokens)
        self._tokens.clear()

    def any(self) -> bool:
        return bool(self._tokens)

    def clear(self) -> None:
        self._tokens.clear()

    def words(self) -> int:
        """Returns: Number of WORD and CANONICAL tokens."""
        return sum(1 for t in self._tokens if t.is_word)

    def to_string(self) -> str:
        return "".join(t.value for t in self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __getitem__(self, i: int) -> Token:
        return self._tokens[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenQueue):
            return NotImplemented
        return list(self._tokens) == list(other._tokens)

    def __repr__(self) -> str:
        return f"TokenQueue({[t.value for t in self._tokens]!r})"
