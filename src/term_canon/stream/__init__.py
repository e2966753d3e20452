# term_canon/stream/__init__.py
"""
stream.
======

Does: Provide the pull-based TokenStream, filter chaining, and the TokenQueue
      buffer filters use internally.
Exports: TokenStream, Filter, apply_filters, TokenQueue
Used by: Tokenizers, synonyms and collaborator filters, the CLI.
"""

from __future__ import annotations

from .core import Filter, TokenStream, apply_filters
from .queue import TokenQueue

__all__ = ["TokenStream", "Filter", "apply_filters", "TokenQueue"]
