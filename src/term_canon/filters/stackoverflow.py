# term_canon/filters/stackoverflow.py
"""
stackoverflow.py.

Does: Build a SynonymFilter from the bundled Stack Overflow style tags &
      synonyms dictionary, insensitive to case, spaces, hyphens, dots and
      slashes ("react js", "reactjs" and "React.js" are one term).
Returns: load_tags(), lemmatize(), lemmatize_html().
Used by: CLI (--stack), callers wanting tech-term canonicalization out of the box.

There is no module-level instance: load_tags() builds a new filter each
time, and callers keep it around for as long as they need it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from term_canon.synonyms.filter import SynonymFilter
from term_canon.tokens.html import tokenize_html
from term_canon.tokens.tokenizer import tokenize_string
from term_canon.utils.load_config import load_dictionary

__all__ = ["IGNORE", "DICTIONARY_FILE", "load_tags", "lemmatize", "lemmatize_html"]

log = logging.getLogger(__name__)

IGNORE: frozenset[str] = frozenset({" ", "-", ".", "/"})
DICTIONARY_FILE = "stackoverflow"


def load_tags(file: str = DICTIONARY_FILE, *, base_dir: Path | None = None) -> SynonymFilter:
    """
    Does: Load the tags dictionary and build its filter (case-insensitive,
          ignoring space, '-', '.', '/').
    Returns: A ready SynonymFilter.
    """
    mappings = load_dictionary(file, base_dir=base_dir)
    tags = SynonymFilter.build(mappings, ignore_case=True, ignore=IGNORE)
    log.debug("Loaded %s: %r", file, tags)
    return tags


def lemmatize(text: str, tags: SynonymFilter | None = None) -> str:
    """
    Does: Replace tech terms in `text` with their canonical tags
          ("Ruby on Rails" -> "ruby-on-rails").
    Returns: The text, otherwise unchanged (white space preserved).
    """
    if tags is None:
        tags = load_tags()
    return tags(tokenize_string(text)).to_string()


def lemmatize_html(text: str, tags: SynonymFilter | None = None) -> str:
    """Does: Same as lemmatize(), inside HTML text nodes only. Returns: the HTML."""
    if tags is None:
        tags = load_tags()
    return tags(tokenize_html(text)).to_string()
