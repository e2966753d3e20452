# term_canon/tokens/tokenizer.py
# ──────────────────────────────────────────────────────────────
# Lossless text tokenizer for prose containing tech terms
# ──────────────────────────────────────────────────────────────
"""
tokenizer.

Does: Split text into SPACE / PUNCT / WORD tokens in a single pass with one
      code point of lookahead, so that terms like "C++", ".net", "node.js",
      "#hashtag", "@handle", "$200.13" and "1,000" stay whole.
Returns: tokenize(), tokenize_string() -> TokenStream.
Used by: TokenStream pipelines, the HTML tokenizer (text nodes), and the
         synonyms dictionary builder.

Every code point of the source ends up in exactly one token, so joining the
tokens reproduces the source ("round trip"). The only errors are read or
decode failures of the underlying source.
"""

from __future__ import annotations

import codecs
import logging
from typing import IO, Union

from term_canon.stream.core import TokenStream
from term_canon.tokens.policy import LEADING_PUNCT, MID_PUNCT, is_punct, is_space, is_terminator
from term_canon.tokens.token import Token

__all__ = ["Source", "CodePointReader", "Tokenizer", "tokenize", "tokenize_string"]

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
CHUNK_SIZE = 16 * 1024

Source = Union[str, IO[str], IO[bytes]]


# ─────────────────────────────────────────────────────────────────────────────
# Code point reader (chunked, with non-consuming peek)
# ─────────────────────────────────────────────────────────────────────────────
class CodePointReader:
    """
    Does: Read code points from a str or a (text or binary) file object,
          lazily and in chunks. Binary sources are decoded as strict UTF-8.
    Returns: read() consumes one code point; peek(offset) looks ahead without
             consuming. Both return None at end of input.
    """

    def __init__(self, source: Source, *, chunk_size: int = CHUNK_SIZE):
        self._buf = ""
        self._pos = 0
        self._chunk_size = chunk_size
        self._decoder: codecs.IncrementalDecoder | None = None
        self._file: IO | None = None
        self._eof = False

        if isinstance(source, str):
            self._buf = source
            self._eof = True
        elif hasattr(source, "read"):
            self._file = source
        else:
            raise TypeError(f"cannot tokenize {type(source).__name__}; expected str or file object")

    def _more(self) -> bool:
        """Does: Append the next chunk to the buffer. Returns: False at end of input."""
        while not self._eof:
            chunk = self._file.read(self._chunk_size)
            final = not chunk
            if isinstance(chunk, (bytes, bytearray)):
                if self._decoder is None:
                    self._decoder = codecs.getincrementaldecoder("utf-8")(errors="strict")
                text = self._decoder.decode(chunk, final=final)
            else:
                text = chunk
            if final:
                self._eof = True
            if text:
                # Keep the buffer small: drop what has already been consumed
                self._buf = self._buf[self._pos :] + text
                self._pos = 0
                return True
        return False

    def peek(self, offset: int = 0) -> str | None:
        i = self._pos + offset
        while i >= len(self._buf):
            if not self._more():
                return None
            i = self._pos + offset
        return self._buf[i]

    def read(self) -> str | None:
        ch = self.peek()
        if ch is not None:
            self._pos += 1
        return ch


# ─────────────────────────────────────────────────────────────────────────────
# Tokenizer state machine
# ─────────────────────────────────────────────────────────────────────────────
class Tokenizer:
    """One pass over a CodePointReader; next() returns a Token or None at end."""

    def __init__(self, source: Source, *, chunk_size: int = CHUNK_SIZE):
        self._reader = CodePointReader(source, chunk_size=chunk_size)

    def peek_terminator(self, offset: int = 0) -> bool:
        """Does: Look at the code point `offset` ahead; never consumes it."""
        return is_terminator(self._reader.peek(offset))

    def next(self) -> Token | None:
        ch = self._reader.read()
        if ch is None:
            return None
        if is_space(ch):
            return Token.space(ch)
        if is_punct(ch):
            if ch in LEADING_PUNCT and not self.peek_terminator():
                return self._read_word(ch)
            return Token.punct(ch)
        return self._read_word(ch)

    def _read_word(self, first: str) -> Token:
        """
        Does: Consume the rest of a word that starts with `first`.
              Mid-word punctuation is kept only when followed by a
              non-terminator; anything that ends the word stays unread.
        """
        chars = [first]
        reader = self._reader
        while True:
            ch = reader.peek()
            if ch is None:
                break
            if ch in MID_PUNCT:
                if self.peek_terminator(1):
                    break
            elif is_terminator(ch):
                break
            chars.append(ch)
            reader.read()
        return Token.word("".join(chars))


# ─────────────────────────────────────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────────────────────────────────────
def tokenize(source: Source, *, chunk_size: int = CHUNK_SIZE) -> TokenStream:
    """
    Does: Tokenize a str, text file or binary (UTF-8) file lazily.
    Returns: TokenStream; joining its tokens reproduces the source.
    """
    tokenizer = Tokenizer(source, chunk_size=chunk_size)
    return TokenStream(tokenizer.next)


def tokenize_string(text: str) -> TokenStream:
    """Does: Tokenize an in-memory string. Returns: TokenStream."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return tokenize(text)
