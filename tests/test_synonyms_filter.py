# tests/test_synonyms_filter.py
from __future__ import annotations
"""
Tests: synonyms/filter.py

Goals:
- Longest match across the stream, punctuation acting as a phrase boundary
- Everything not rewritten passes through byte for byte
- Lookahead stays bounded by max_words, whatever the input size
- One filter can serve many streams; upstream errors surface unchanged
"""

import pytest

from term_canon.stream.core import TokenStream
from term_canon.synonyms.filter import MAX_SPACE_RUN, SynonymFilter
from term_canon.tokens.token import Token, TokenKind
from term_canon.tokens.tokenizer import tokenize_string

TECH_IGNORE = {"-", " ", ".", "/"}


@pytest.fixture
def cliches():
    return SynonymFilter.build(
        {
            "developer, engineer, programmer": "boffin",
            "rock star, 10x developer": "cliché",
            "ruby on rails": "ruby-on-rails",
            "nodeJS, iojs": "node.js",
        },
        ignore_case=True,
        ignore=TECH_IGNORE,
    )


def _apply(f: SynonymFilter, text: str) -> str:
    return f(tokenize_string(text)).to_string()


# ─────────────────────────────────────────────────────────────────────────────
# Matching
# ─────────────────────────────────────────────────────────────────────────────
def test_longest_match():
    f = SynonymFilter.build(
        {"developer, engineer, programmer": "boffin", "rock star, 10x developer": "cliché"},
        ignore_case=True,
        ignore=TECH_IGNORE,
    )
    assert _apply(f, "a rockstar, 10x developer, or engineer") == "a cliché, cliché, or boffin"


def test_sentence(cliches):
    text = "we are looking for a rockstar, 10x developer, or engineer, for ruby on rails and Nodejs"
    expected = "we are looking for a cliché, cliché, or boffin, for ruby-on-rails and node.js"
    assert _apply(cliches, text) == expected


@pytest.mark.parametrize("text", ["nodeJS", "node.js", "node-js", "NodeJS", "iojs", "io.js"])
def test_ignore_set_equivalence(cliches, text):
    assert _apply(cliches, text) == "node.js"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("I use node-js daily", "I use node.js daily"),
        ("node-js.", "node.js."),
        ("(node-js)", "(node.js)"),
        ("node - js", "node - js"),
        ("node-", "node-"),
    ],
)
def test_joined_words_in_context(cliches, text, expected):
    assert _apply(cliches, text) == expected


def test_no_substring_match():
    f = SynonymFilter.build({"Ruby": "ruby"})
    assert _apply(f, "Rub Rubyist Ruby") == "Rub Rubyist ruby"


def test_punctuation_is_a_phrase_boundary(cliches):
    assert _apply(cliches, "ruby, on rails") == "ruby, on rails"
    assert _apply(cliches, "Ruby. on Rails") == "Ruby. on Rails"


def test_whitespace_inside_phrase_is_replaced_around_it_kept(cliches):
    assert _apply(cliches, "  ruby\non  rails  ") == "  ruby-on-rails  "


def test_output_kinds(cliches):
    tokens = cliches(tokenize_string("on ruby on rails!")).to_list()
    assert [(t.value, t.kind) for t in tokens] == [
        ("on", TokenKind.WORD),
        (" ", TokenKind.SPACE),
        ("ruby-on-rails", TokenKind.CANONICAL),
        ("!", TokenKind.PUNCT),
    ]


def test_empty_canonical_suppresses_phrase():
    f = SynonymFilter.build({"um, uh": ""})
    assert _apply(f, "so um we uh go") == "so  we  go"


# ─────────────────────────────────────────────────────────────────────────────
# Passthrough
# ─────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "text",
    [
        "",
        " ",
        ",",
        "nothing to see here",
        "Hello,   world!\n\tTabs… and “quotes”.",
        "a, b, c, d, e, f, g",
        "...trailing punctuation...",
    ],
)
def test_passthrough(cliches, text):
    assert _apply(cliches, text) == text


def test_empty_dictionary_is_identity():
    f = SynonymFilter.build({})
    text = "ruby on rails, node-js"
    assert _apply(f, text) == text


# ─────────────────────────────────────────────────────────────────────────────
# Bounded lookahead
# ─────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("n_words", [10, 1000])
def test_buffer_is_bounded_by_max_words(cliches, n_words):
    text = " ".join(["ruby", "on", "rails", "and", "more"] * (n_words // 5))
    state = cliches.tokens(tokenize_string(text))
    out = TokenStream(state.next).to_string()
    assert out.startswith("ruby-on-rails and more")
    assert state.high_water <= 2 * cliches.max_words + 1


def test_pulls_lazily():
    pulled = []
    words = iter(["ruby", " ", "on", " ", "rails", " "] * 1000)

    def upstream():
        value = next(words, None)
        if value is None:
            return None
        pulled.append(value)
        return Token.from_char(value) if value == " " else Token.word(value)

    f = SynonymFilter.build({"ruby on rails": "ruby-on-rails"})
    stream = f(TokenStream(upstream))
    assert stream.next() == Token.canonical("ruby-on-rails")
    assert len(pulled) <= 2 * f.max_words + 2


@pytest.mark.parametrize("links", [10, 10_000])
def test_hyphen_chain_does_not_grow_the_buffer(cliches, links):
    text = "-".join(["x"] * links) + " ruby on rails"
    state = cliches.tokens(tokenize_string(text))
    out = TokenStream(state.next).to_string()
    assert out == "-".join(["x"] * links) + " ruby-on-rails"
    assert state.high_water <= 2 * cliches.max_words + 1


@pytest.mark.parametrize("run", [1, MAX_SPACE_RUN - 1, MAX_SPACE_RUN, 10_000])
def test_whitespace_runs_are_bounded(cliches, run):
    gap = " " * run
    text = gap + "ruby" + gap + "on rails" + gap + "."
    state = cliches.tokens(tokenize_string(text))
    out = TokenStream(state.next).to_string()
    if run < MAX_SPACE_RUN:
        assert out == gap + "ruby-on-rails" + gap + "."
    else:
        # A run this long ends the lookahead window, so the phrase is not seen
        assert out == text
    assert state.high_water <= (cliches.max_words + 1) * (MAX_SPACE_RUN + 1)


def test_fill_stops_at_boundary(cliches):
    state = cliches.tokens(tokenize_string("10x, developer and more words"))
    state.fill()
    assert [t.value for t in state.buffer] == ["10x", ","]
    assert state.boundary() == 1
    assert state.wordrun() == [Token.word("10x")]


def test_fill_resolves_pending_joiner(cliches):
    state = cliches.tokens(tokenize_string("a node-js b"))
    state.fill()
    # Three word tokens fill the window; the hyphen between two of them joins
    assert state.buffer.to_string() == "a node-js"
    assert state.boundary() == -1
    assert state.words() == 3


def test_wordrun_moves_leading_spaces_out(cliches):
    state = cliches.tokens(tokenize_string("   ruby on"))
    state.fill()
    run = state.wordrun()
    assert [t.value for t in run] == ["ruby", " ", "on"]
    assert state.outgoing.to_string() == "   "


def test_flush_stops_after_first_boundary(cliches):
    state = cliches.tokens(tokenize_string(", x"))
    state.fill()
    state.flush()
    assert state.outgoing.to_string() == ","


# ─────────────────────────────────────────────────────────────────────────────
# Sharing and errors
# ─────────────────────────────────────────────────────────────────────────────
def test_one_filter_many_streams(cliches):
    a = cliches(tokenize_string("ruby on rails and nodejs"))
    b = cliches(tokenize_string("a rock star engineer"))
    # Interleave pulls; each stream owns its buffers
    out_a, out_b = [], []
    while True:
        ta, tb = a.next(), b.next()
        if ta is None and tb is None:
            break
        if ta is not None:
            out_a.append(ta.value)
        if tb is not None:
            out_b.append(tb.value)
    assert "".join(out_a) == "ruby-on-rails and node.js"
    assert "".join(out_b) == "a cliché boffin"


def test_upstream_error_propagates_after_partial_output(cliches):
    tokens = iter(tokenize_string("hello, ruby on").to_list())

    def upstream():
        token = next(tokens, None)
        if token is None:
            raise OSError("connection reset")
        return token

    stream = cliches(TokenStream(upstream))
    got = []
    with pytest.raises(OSError, match="connection reset"):
        for token in stream:
            got.append(token.value)
    assert "".join(got) == "hello,"
    assert stream.next() is None


def test_repr(cliches):
    assert "max_words=3" in repr(cliches)
