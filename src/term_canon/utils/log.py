"""
log.py.

Does: Topic-gated diagnostic lines for build-time events (a dictionary phrase
      mapped twice, the CLI's resolved filter chain). Topics are switched on
      with TERM_CANON_DEBUG_TOPICS, e.g. "synonyms,cli" or "all".
Returns: debug(), enabled(), reload_topics().
Used by: synonyms.matcher, cli, tests.

Nothing is printed unless its topic is on. The token hot path never calls
in here; per-token tracing goes through the standard `logging` loggers.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["ENV_VAR", "debug", "enabled", "reload_topics"]

ENV_VAR = "TERM_CANON_DEBUG_TOPICS"
ALL = "all"


def _parse(raw: str) -> frozenset[str]:
    return frozenset(t.strip().lower() for t in raw.split(",") if t.strip())


_active: frozenset[str] = _parse(os.getenv(ENV_VAR, ""))


def reload_topics(raw: str | None = None) -> frozenset[str]:
    """
    Does: Switch topics from `raw` ("synonyms,cli"), or re-read TERM_CANON_DEBUG_TOPICS
          when `raw` is None (the CLI calls this after loading .env).
    Returns: The topics now on.
    """
    global _active
    _active = _parse(os.getenv(ENV_VAR, "") if raw is None else raw)
    return _active


def enabled(topic: str) -> bool:
    return ALL in _active or topic.strip().lower() in _active


def debug(
    msg: str,
    topic: str = "synonyms",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Write "[time] [topic][LEVEL] msg" to `stream` (stderr) if `topic` is on."""
    if not enabled(topic):
        return
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.strip().lower()}][{level.upper()}] {msg}", file=stream or sys.stderr)
