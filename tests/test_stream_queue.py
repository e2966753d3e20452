# tests/test_stream_queue.py
from __future__ import annotations
"""
Tests: stream/queue.py

Goals:
- FIFO order through push/pop/pop_to/flush_to
- drop() discards for good; misuse trips an assertion
"""

import pytest

from term_canon.stream.queue import TokenQueue
from term_canon.tokens.token import Token

A, SP, B, DOT = Token.word("a"), Token.space(" "), Token.word("b"), Token.punct(".")


def test_push_pop_order():
    q = TokenQueue()
    q.push(A, SP)
    q.push(B)
    assert len(q) == 3
    assert [q.pop(), q.pop(), q.pop()] == [A, SP, B]
    assert not q.any()


def test_pop_to_and_flush_to_keep_order():
    src, dst = TokenQueue(A, SP, B, DOT), TokenQueue()
    src.pop_to(dst)
    assert list(dst) == [A]
    src.flush_to(dst)
    assert list(dst) == [A, SP, B, DOT]
    assert len(src) == 0


def test_drop():
    q = TokenQueue(A, SP, B)
    q.drop(2)
    assert list(q) == [B]
    q.drop(0)
    assert list(q) == [B]


def test_counts_and_inspection():
    q = TokenQueue(A, SP, Token.canonical("c#"), DOT)
    assert q.words() == 2
    assert q.to_string() == "a c#."
    assert q[0] == A and q[-1] == DOT
    assert q == TokenQueue(A, SP, Token.canonical("c#"), DOT)
    assert "c#" in repr(q)
    q.clear()
    assert not q.any() and q.words() == 0


def test_misuse_asserts():
    with pytest.raises(AssertionError):
        TokenQueue().pop()
    with pytest.raises(AssertionError):
        TokenQueue(A).drop(2)
