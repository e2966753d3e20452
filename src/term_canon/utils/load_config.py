# src/term_canon/utils/load_config.py

"""Load bundled (or user supplied) JSON dictionaries from a <data/> directory.

A dictionary file maps comma-joined phrases to a canonical form:

    {"ruby on rails, rails, ror": "ruby-on-rails"}

Lookup order for the data directory: explicit base_dir, then TERM_CANON_DATA_DIR
(or DATA_DIR), then the first data/ directory found walking up from this package.
Parsed files are cached by (path, mtime, ...) so an edited file is picked up.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable, Mapping
from pathlib import Path
from types import TracebackType
from typing import Any

import json5

__all__ = [
    "data_dir",
    "load_config",
    "load_dictionary",
    "validate_dictionary",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV_VARS = ("TERM_CANON_DATA_DIR", "DATA_DIR")

Validator = Callable[[Mapping[str, Any]], dict[str, Any]]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no data directory is configured or found."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when a dictionary file is missing, unreadable, or outside the data dir."""


class ConfigParseError(ValueError):
    """Raise when a dictionary file is not valid JSON (or JSON5), or fails validation."""


class ConfigTypeError(TypeError):
    """Raise when a dictionary file is not a JSON object of strings."""


# ── Cache ────────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_LOCK = threading.RLock()
_CACHE: dict[tuple[Path, float, str, bool], dict[str, Any]] = {}


def clear_config_cache() -> None:
    with _LOCK:
        _CACHE.clear()
    log.debug("Dictionary cache cleared")


# ── Locating files ───────────────────────────────────────────────────────────
def data_dir(base_dir: os.PathLike[str] | str | None = None) -> Path:
    """Resolve the data directory (see module docstring for the order)."""
    if base_dir is not None:
        return Path(base_dir).expanduser().resolve()
    for var in DATA_DIR_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return Path(value).expanduser().resolve()

    here = Path(__file__).resolve().parent
    tried = [p / "data" for p in (here, *here.parents)]
    for cand in tried:
        if cand.is_dir():
            return cand
    raise DataDirNotFound("No 'data' directory found. Tried:\n  " + "\n  ".join(map(str, tried)))


def _resolve(file: os.PathLike[str] | str, root: Path) -> Path:
    name = os.fspath(file)
    if not name.endswith((".json", ".json5")):
        name += ".json"
    path = (root / name).resolve()
    if not path.is_relative_to(root):
        raise ConfigFileNotFound(f"Refusing to read outside the data dir: {path} (base={root})")
    if not path.is_file():
        raise ConfigFileNotFound(f"Dictionary file not found: {path}")
    return path


# ── Loading ──────────────────────────────────────────────────────────────────
def load_config(
    file: os.PathLike[str] | str,
    *,
    base_dir: os.PathLike[str] | str | None = None,
    encoding: str = "utf-8",
    validator: Validator | None = None,
    allow_comments: bool = False,
) -> dict[str, Any]:
    """
    Load <data>/<file>.json as a JSON object.

    allow_comments=True (or a .json5 file) parses with json5, so dictionaries
    can carry comments and trailing commas. The parsed file is cached; callers
    always get a fresh dict, passed through `validator` when one is given.
    """
    path = _resolve(file, data_dir(base_dir))
    json5_syntax = allow_comments or path.suffix == ".json5"
    try:
        key = (path, path.stat().st_mtime, encoding, json5_syntax)
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    with _LOCK:
        data = _CACHE.get(key)
    if data is None:
        data = _parse(path, encoding, json5_syntax)
        with _LOCK:
            _CACHE[key] = data
        log.debug("Loaded %s (%d entries)", path.name, len(data))
    else:
        log.debug("Dictionary cache hit: %s", path.name)

    if validator is None:
        return dict(data)
    try:
        return validator(dict(data))
    except (TypeError, ValueError) as e:
        raise ConfigParseError(f"{path.name}: {e}") from e


def _parse(path: Path, encoding: str, json5_syntax: bool) -> dict[str, Any]:
    try:
        with path.open("r", encoding=encoding) as f:
            data = json5.load(f) if json5_syntax else json.load(f)
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e
    except ValueError as e:
        # json.JSONDecodeError, json5 syntax errors and bad encodings alike
        raise ConfigParseError(f"Invalid {'JSON5' if json5_syntax else 'JSON'} in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")
    return data


def validate_dictionary(data: Mapping[str, Any]) -> dict[str, str]:
    """Check a phrases -> canonical mapping holds only strings."""
    bad = [k for k, v in data.items() if not isinstance(v, str)]
    if bad:
        raise ConfigTypeError(f"canonical forms must be strings; bad entries: {bad[:3]}")
    return dict(data)


def load_dictionary(
    file: os.PathLike[str] | str,
    *,
    base_dir: os.PathLike[str] | str | None = None,
    allow_comments: bool = False,
) -> dict[str, str]:
    """Load a {phrases: canonical} dictionary such as 'stackoverflow' or 'contractions'."""
    return load_config(
        file, base_dir=base_dir, validator=validate_dictionary, allow_comments=allow_comments
    )


# ── Temporarily point at another data directory ──────────────────────────────
class temp_data_dir:
    """Set TERM_CANON_DATA_DIR for the block (tests, alternative dictionaries)."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = os.fspath(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get(DATA_DIR_ENV_VARS[0])
        os.environ[DATA_DIR_ENV_VARS[0]] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(DATA_DIR_ENV_VARS[0], None)
        else:
            os.environ[DATA_DIR_ENV_VARS[0]] = self._old
        clear_config_cache()
