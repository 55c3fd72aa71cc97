"""Core shared helpers for mdhtml."""

from __future__ import annotations

from .config import TomlConfigError, load_toml, merge_defaults
from .files import DEFAULT_ENCODING, is_known_encoding, read_text_file
from .logging import JsonLogFormatter, configure_logger

__all__ = [
    "TomlConfigError",
    "load_toml",
    "merge_defaults",
    "DEFAULT_ENCODING",
    "is_known_encoding",
    "read_text_file",
    "configure_logger",
    "JsonLogFormatter",
]
