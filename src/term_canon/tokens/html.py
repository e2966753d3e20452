# term_canon/tokens/html.py
"""
html.py.

Does: Tokenize HTML so that markup passes through verbatim as single PUNCT
      tokens and only text nodes go through the prose tokenizer.
Returns: tokenize_html() -> TokenStream.
Used by: lemmatize_html(), the CLI (--html).

Structure is delegated to the standard library HTMLParser. Every slice of
input the parser consumes is reported through updatepos(), in order, which
is what lets us pass tags, comments, declarations and entity references
through byte for byte. Text inside <script>/<style> is not prose and is
passed through verbatim as well.

updatepos() and cdata_elem are undocumented HTMLParser attributes; the
round-trip tests in tests/test_tokens_html.py pin the behaviour relied on.
"""

from __future__ import annotations

import codecs
import logging
from collections import deque
from html.parser import HTMLParser

from term_canon.stream.core import TokenStream
from term_canon.tokens.token import Token, TokenKind
from term_canon.tokens.tokenizer import CHUNK_SIZE, Source, tokenize_string

__all__ = ["tokenize_html"]

log = logging.getLogger(__name__)

_TEXT = "text"
_MARKUP = "markup"

# Raw text elements; their bodies are code, not prose
_RAW_TEXT = frozenset({"script", "style"})


class _VerbatimParser(HTMLParser):
    """Collect (kind, raw_text) pieces of the input, merging adjacent text."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=False)
        self.pieces: deque[list[str]] = deque()
        self._saw_text = False

    def handle_data(self, data: str) -> None:
        # Script/style bodies are reported as data but are not prose
        if self.cdata_elem not in _RAW_TEXT:
            self._saw_text = True

    def updatepos(self, i: int, j: int) -> int:
        if i < j:
            raw = self.rawdata[i:j]
            kind = _TEXT if self._saw_text else _MARKUP
            if kind == _TEXT and self.pieces and self.pieces[-1][0] == _TEXT:
                self.pieces[-1][1] += raw
            else:
                self.pieces.append([kind, raw])
        self._saw_text = False
        return super().updatepos(i, j)


class _HTMLTokenizer:
    def __init__(self, source: Source, *, chunk_size: int = CHUNK_SIZE):
        if isinstance(source, str):
            self._file = None
            self._pending: str | None = source
        elif hasattr(source, "read"):
            self._file = source
            self._pending = None
        else:
            raise TypeError(f"cannot tokenize {type(source).__name__}; expected str or file object")
        self._chunk_size = chunk_size
        self._decoder: codecs.IncrementalDecoder | None = None
        self._parser = _VerbatimParser()
        self._closed = False
        self._text: TokenStream | None = None

    def _read(self) -> str | None:
        """Does: Next chunk of text from the source, or None at end."""
        if self._file is None:
            text, self._pending = self._pending, None
            return text or None
        while True:
            chunk = self._file.read(self._chunk_size)
            if isinstance(chunk, (bytes, bytearray)):
                if self._decoder is None:
                    self._decoder = codecs.getincrementaldecoder("utf-8")(errors="strict")
                text = self._decoder.decode(chunk, final=not chunk)
            else:
                text = chunk
            if text:
                return text
            if not chunk:
                return None

    def _ready(self) -> bool:
        # A trailing text piece may continue in the next chunk
        pieces = self._parser.pieces
        if not pieces:
            return False
        return self._closed or len(pieces) > 1 or pieces[0][0] == _MARKUP

    def _close(self) -> None:
        parser = self._parser
        parser.close()
        # An unterminated <script>/<style> body is left unconsumed by close()
        if parser.rawdata:
            log.debug("Passing %d unparsed trailing chars through verbatim", len(parser.rawdata))
            parser.pieces.append([_MARKUP, parser.rawdata])
            parser.rawdata = ""
        self._closed = True

    def next(self) -> Token | None:
        while True:
            if self._text is not None:
                token = self._text.next()
                if token is not None:
                    return token
                self._text = None

            while not self._ready() and not self._closed:
                chunk = self._read()
                if chunk is None:
                    self._close()
                else:
                    self._parser.feed(chunk)

            if not self._parser.pieces:
                return None

            kind, raw = self._parser.pieces.popleft()
            if kind == _MARKUP:
                return Token(raw, TokenKind.PUNCT)
            self._text = tokenize_string(raw)


def tokenize_html(source: Source, *, chunk_size: int = CHUNK_SIZE) -> TokenStream:
    """
    Does: Tokenize HTML; markup is one verbatim PUNCT token, text nodes are
          tokenized as prose.
    Returns: TokenStream; joining its tokens reproduces the source.
    """
    t = _HTMLTokenizer(source, chunk_size=chunk_size)
    return TokenStream(t.next)
