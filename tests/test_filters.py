# tests/test_filters.py
from __future__ import annotations
"""
Tests: filters/contractions.py, filters/ascii.py, filters/stemmer.py

Goals:
- Each filter only rewrites WORD tokens; spaces, punctuation and CANONICAL
  tokens pass through untouched
- Changed tokens are marked CANONICAL (ascii, stemmer) or re-tokenized as
  words (contractions), so `lemmas()` reports what a filter changed
"""

import pytest

from term_canon.filters import ascii as ascii_filter
from term_canon.filters import contractions, stemmer
from term_canon.stream.core import TokenStream
from term_canon.tokens.token import Token, TokenKind
from term_canon.tokens.tokenizer import tokenize_string


def _run(text: str, *filters) -> str:
    return tokenize_string(text).filter(*filters).to_string()


# ─────────────────────────────────────────────────────────────────────────────
# Contractions
# ─────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "text,expected",
    [
        ("I don't know", "I do not know"),
        ("Don't panic.", "Do not panic."),
        ("DON'T", "DO NOT"),
        ("We’ve arrived", "We have arrived"),
        ("i'm here, I'm there", "I am here, I am there"),
        ("let's go", "let us go"),
        ("rock'n'roll isn't dead", "rock'n'roll is not dead"),
        ("no contractions here", "no contractions here"),
    ],
)
def test_expand_contractions(text, expected):
    assert _run(text, contractions.expand) == expected


def test_expansion_is_retokenized_as_words():
    tokens = tokenize_string("won't").filter(contractions.expand).to_list()
    assert [(t.value, t.kind) for t in tokens] == [
        ("will", TokenKind.WORD),
        (" ", TokenKind.SPACE),
        ("not", TokenKind.WORD),
    ]


def test_custom_table():
    table = {"y'all": "you all"}
    stream = contractions.expand(tokenize_string("Y'all don't"), table)
    assert stream.to_string() == "You all don't"


def test_load_contractions_keys_are_lowercase():
    table = contractions.load_contractions()
    assert table["don't"] == "do not"
    assert all(k == k.lower() for k in table)


def test_expansion_for():
    table = {"she's": "she is"}
    assert contractions.expansion_for("SHE'S", table) == "SHE IS"
    assert contractions.expansion_for("She’s", table) == "She is"
    assert contractions.expansion_for("shes", table) is None


# ─────────────────────────────────────────────────────────────────────────────
# ASCII folding
# ─────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "text,expected",
    [
        ("café", "cafe"),
        ("naïve", "naive"),
        ("Straße", "Strasse"),
        ("Ærøskøbing", "AEroskobing"),
        ("Łódź", "Lodz"),
        ("ﬁle", "file"),  # ligature, NFKD compatibility form
        ("日本", "日本"),  # no ascii form: kept
        ("plain", "plain"),
    ],
)
def test_fold_text(text, expected):
    assert ascii_filter.fold_text(text) == expected


def test_fold_marks_changed_tokens_canonical():
    tokens = tokenize_string("un café noir").filter(ascii_filter.fold).to_list()
    assert [(t.value, t.kind) for t in tokens] == [
        ("un", TokenKind.WORD),
        (" ", TokenKind.SPACE),
        ("cafe", TokenKind.CANONICAL),
        (" ", TokenKind.SPACE),
        ("noir", TokenKind.WORD),
    ]


def test_fold_leaves_non_words_alone():
    # "—" and "€" are punctuation; canonical tokens are final
    upstream = TokenStream.from_iterable(
        [Token.punct("€"), Token.punct("—"), Token.canonical("café")]
    )
    assert [t.value for t in ascii_filter.fold(upstream)] == ["€", "—", "café"]


# ─────────────────────────────────────────────────────────────────────────────
# Stemming
# ─────────────────────────────────────────────────────────────────────────────
def test_english_stemmer():
    tokens = tokenize_string("the cats, running").filter(stemmer.english).to_list()
    assert [(t.value, t.kind) for t in tokens] == [
        ("the", TokenKind.WORD),
        (" ", TokenKind.SPACE),
        ("cat", TokenKind.CANONICAL),
        (",", TokenKind.PUNCT),
        (" ", TokenKind.SPACE),
        ("run", TokenKind.CANONICAL),
    ]


def test_stemmer_lemmas():
    stream = tokenize_string("management and manager").filter(stemmer.english).lemmas()
    assert [t.value for t in stream] == ["manag", "manag"]


@pytest.mark.parametrize("language", stemmer.LANGUAGES)
def test_every_language_builds(language):
    s = stemmer.Stemmer(language)
    assert s.language == language
    assert s(tokenize_string("a b")).count() == 3


@pytest.mark.parametrize(
    "factory", [stemmer.french, stemmer.norwegian, stemmer.russian, stemmer.spanish, stemmer.swedish]
)
def test_language_factories_keep_token_count(factory):
    assert factory(tokenize_string("x, y")).count() == 4


def test_unknown_language():
    with pytest.raises(ValueError, match="unknown language"):
        stemmer.Stemmer("klingon")
    assert stemmer.Stemmer(" English ").language == "english"


def test_stemmer_skips_canonical_tokens():
    upstream = TokenStream.from_iterable([Token.canonical("running")])
    assert stemmer.english(upstream).to_list() == [Token.canonical("running")]
