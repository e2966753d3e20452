# term_canon/errors.py
"""Exceptions raised by term_canon. I/O and decode errors propagate as the built-ins."""

from __future__ import annotations

__all__ = ["TermCanonError", "DictionaryError"]


class TermCanonError(Exception):
    """Base class for errors raised by this package."""


class DictionaryError(TermCanonError, ValueError):
    """Raise when a synonyms dictionary cannot be built (e.g. a phrase with no words)."""
