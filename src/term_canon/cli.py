# src/term_canon/cli.py
"""
cli.py.

Does: `term-canon` command: read text (or HTML) from --file or stdin, run the
      filters in the order given on the command line, write the result (or
      a token count) to --out or stdout.
Used by: Shell pipelines, e.g.
         curl -s https://en.wikipedia.org/wiki/Computer_programming | term-canon --html --stack --lemmas --lines
"""

from __future__ import annotations

import argparse
import io
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from dotenv import load_dotenv

from term_canon import __version__
from term_canon.filters import ascii, contractions, stackoverflow, stemmer
from term_canon.stream.core import Filter, TokenStream
from term_canon.tokens.html import tokenize_html
from term_canon.tokens.tokenizer import tokenize
from term_canon.utils.log import debug, reload_topics

log = logging.getLogger(__name__)

# Stream combinators usable at any position of the chain
_COMBINATORS: dict[str, Filter] = {
    "lemmas": TokenStream.lemmas,
    "distinct": TokenStream.distinct,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="term-canon",
        description=(
            "Process text from stdin or --file with one or more filters. "
            "Filters run in the order they are given."
        ),
    )
    filters = parser.add_argument_group("filters (order matters)")
    filters.add_argument(
        "--stack",
        dest="filters",
        action="append_const",
        const="stack",
        help="recognize tech terms as Stack Overflow tags, e.g. Ruby on Rails → ruby-on-rails",
    )
    filters.add_argument(
        "--contractions",
        dest="filters",
        action="append_const",
        const="contractions",
        help="expand contractions, e.g. Would've → Would have",
    )
    filters.add_argument(
        "--ascii",
        dest="filters",
        action="append_const",
        const="ascii",
        help="replace diacritics with ascii equivalents, e.g. café → cafe",
    )
    filters.add_argument(
        "--stem",
        dest="filters",
        action="append_const",
        const="stem",
        help="stem words with a Snowball stemmer, e.g. management|manager → manag",
    )
    filters.add_argument(
        "--lemmas",
        dest="filters",
        action="append_const",
        const="lemmas",
        help="only return tokens that have been changed by a filter",
    )
    filters.add_argument(
        "--distinct",
        dest="filters",
        action="append_const",
        const="distinct",
        help="only return unique tokens",
    )
    parser.add_argument(
        "--lang",
        default="english",
        help="language of input, used with --stem; options: " + ", ".join(stemmer.LANGUAGES),
    )
    parser.add_argument("--html", action="store_true", help="parse input as html (keep tags whole)")
    parser.add_argument("--file", dest="filein", help="input file path (default: stdin)")
    parser.add_argument("--out", dest="fileout", help="output file path (default: stdout)")
    parser.add_argument("--count", action="store_true", help="count the tokens")
    parser.add_argument("--lines", action="store_true", help="add a line break between tokens")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_filters(names: Sequence[str], lang: str = "english") -> list[Filter]:
    """
    Does: Map filter names to filters, keeping their order.
    Returns: list of Filter callables. Raises ValueError for an unknown --lang.
    """
    resolved: list[Filter] = []
    tags = None
    for name in names:
        if name == "stack":
            if tags is None:
                tags = stackoverflow.load_tags()
            resolved.append(tags)
        elif name == "contractions":
            resolved.append(contractions.expand)
        elif name == "ascii":
            resolved.append(ascii.fold)
        elif name == "stem":
            resolved.append(stemmer.Stemmer(lang))
        elif name in _COMBINATORS:
            resolved.append(_COMBINATORS[name])
        else:
            raise ValueError(f"unknown filter {name!r}")
    return resolved


def execute(
    reader: TextIO | io.BufferedIOBase,
    writer: TextIO,
    filters: Sequence[Filter],
    *,
    html: bool = False,
    count: bool = False,
    lines: bool = False,
) -> int:
    """
    Does: Tokenize `reader`, apply `filters` in order, write to `writer`.
    Returns: Number of tokens counted or written.
    """
    tokens = tokenize_html(reader) if html else tokenize(reader)
    tokens = tokens.filter(*filters)

    if count:
        n = tokens.count()
        writer.write(f"{n}\n")
        return n

    return tokens.write_to(writer, lines=lines)


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point. Returns the process exit status."""
    load_dotenv()
    reload_topics()

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.filein is None and sys.stdin.isatty():
        parser.print_usage(sys.stderr)
        return 0

    try:
        filters = resolve_filters(args.filters or [], args.lang)
        debug(f"filters: {args.filters or []}", topic="cli")

        reader = open(args.filein, "rb") if args.filein else sys.stdin.buffer
        try:
            if args.fileout:
                with open(args.fileout, "w", encoding="utf-8", newline="") as writer:
                    execute(reader, writer, filters, html=args.html, count=args.count, lines=args.lines)
            else:
                execute(
                    reader, sys.stdout, filters, html=args.html, count=args.count, lines=args.lines
                )
                sys.stdout.flush()
        finally:
            if args.filein:
                reader.close()
    except Exception as e:
        log.debug("term-canon failed", exc_info=True)
        print(f"term-canon: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
