# term_canon/filters/__init__.py
"""
filters.
=======

Does: Collaborator filters that plug into a TokenStream chain next to the
      synonyms filter: contraction expansion, ASCII folding, Snowball
      stemming, and the bundled tech-tags dictionary.
Exports: contractions, ascii, stemmer, stackoverflow (modules)
Used by: The CLI and pipelines composing their own filter chains.
"""

from __future__ import annotations

from . import ascii, contractions, stackoverflow, stemmer

__all__ = ["ascii", "contractions", "stackoverflow", "stemmer"]
