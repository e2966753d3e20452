# term_canon/synonyms/matcher.py
"""
matcher.py.

Does: Build a ready, read-only phrase matcher from a synonyms dictionary
      ({"phrase, other phrase": "canonical"}).
Returns: Matcher, build_matcher(), split_phrases().
Used by: SynonymFilter, filters.stackoverflow, tests.

Construction is the only phase that can fail: a phrase with no word tokens,
or one holding punctuation that is not a joiner ("c++ (lang)"), is an
authoring defect and raises DictionaryError. Once built, a Matcher and its
frozen trie are never mutated, so one instance can serve any number of
streams at once.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from term_canon.errors import DictionaryError
from term_canon.synonyms.trie import Match, RuneTrie
from term_canon.tokens.token import Token
from term_canon.tokens.tokenizer import tokenize_string
from term_canon.utils.log import debug

__all__ = ["Matcher", "build_matcher", "split_phrases"]

log = logging.getLogger(__name__)


def split_phrases(synonyms: str) -> list[list[Token]]:
    """
    Does: Split a comma-joined list of phrases on ",", drop the single space
          that follows each comma, and tokenize each phrase.
    Returns: One token list per phrase, in order (possibly empty lists).
    """
    phrases: list[list[Token]] = []
    for i, part in enumerate(synonyms.split(",")):
        if i > 0 and part.startswith(" "):
            part = part[1:]
        phrases.append(tokenize_string(part).to_list())
    return phrases


def _punct_error(trie: RuneTrie, phrase: Sequence[Token]) -> str | None:
    # Any other punctuation ends a search, so the phrase could never match
    for i, token in enumerate(phrase):
        if token.is_punct and not trie.joins(phrase, i):
            return token.value
    return None


@dataclass(frozen=True)
class Matcher:
    """
    Does: Longest-match lookup of dictionary phrases over a token run.
    Returns: search(tokens) -> Match(found, canonical, consumed).
    """

    trie: RuneTrie
    max_words: int

    @property
    def ignore_case(self) -> bool:
        return self.trie.ignore_case

    @property
    def ignore(self) -> frozenset[str]:
        return self.trie.ignore

    def search(self, tokens: Sequence[Token]) -> Match:
        return self.trie.search(tokens)

    def __len__(self) -> int:
        return len(self.trie)


def build_matcher(
    mappings: Mapping[str, str],
    *,
    ignore_case: bool = False,
    ignore: Iterable[str] = (),
) -> Matcher:
    """
    Does: Insert every phrase of every entry into a RuneTrie and record the
          largest phrase length in words (at least 1).
    Returns: Matcher ready for concurrent read-only use.
    Raises: DictionaryError for non-string entries, phrases without words, or
            phrases holding punctuation that is not a joiner.
    """
    trie = RuneTrie(ignore_case=ignore_case, ignore=ignore)
    max_words = 1

    for synonyms, canonical in mappings.items():
        if not isinstance(synonyms, str) or not isinstance(canonical, str):
            raise DictionaryError(
                f"dictionary entries must map str to str, got {synonyms!r}: {canonical!r}"
            )
        for phrase in split_phrases(synonyms):
            text = "".join(t.value for t in phrase)
            words = sum(1 for t in phrase if t.is_word)
            if words == 0:
                raise DictionaryError(f"phrase {text!r} in {synonyms!r} has no words")
            punct = _punct_error(trie, phrase)
            if punct is not None:
                raise DictionaryError(
                    f"phrase {text!r} in {synonyms!r} contains {punct!r}, which ends a match"
                )
            previous = trie.add(phrase, canonical)
            if previous is not None and previous != canonical:
                debug(
                    f"phrase {text!r}: {previous!r} replaced by {canonical!r}",
                    topic="synonyms",
                    level="WARNING",
                )
            max_words = max(max_words, words)

    trie.freeze()
    log.debug("Built matcher: %d phrases, max_words=%d", len(trie), max_words)
    return Matcher(trie=trie, max_words=max_words)
