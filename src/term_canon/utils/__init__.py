# term_canon/utils/__init__.py
"""

Does: Provide dictionary loading from the data dir and topic-gated debug lines.
Returns: Public API via load_config/load_dictionary/clear_config_cache and debug/enabled/reload_topics.
Used by: Bundled filters, the synonyms builder, the CLI, and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    data_dir,
    load_config,
    load_dictionary,
    temp_data_dir,
    validate_dictionary,
)
from .log import (
    debug,
    enabled,
    reload_topics,
)

__all__ = [
    # Dictionary loading
    "load_config",
    "load_dictionary",
    "validate_dictionary",
    "data_dir",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "enabled",
    "reload_topics",
]
