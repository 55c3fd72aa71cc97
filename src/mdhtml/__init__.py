"""Convert Markdown files to GitHub-flavored HTML."""

from __future__ import annotations

from .config import (
    FLAVOR_PRESETS,
    ConfigOverrides,
    ConversionConfig,
    MdHtmlSettings,
    load_settings,
)
from .converter import build_converter, convert_text
from .errors import (
    ArgumentError,
    ConfigError,
    ConversionError,
    MdHtmlError,
    SourceReadError,
)
from .runner import RunResult, run

__all__ = [
    "FLAVOR_PRESETS",
    "ConfigOverrides",
    "ConversionConfig",
    "MdHtmlSettings",
    "load_settings",
    "build_converter",
    "convert_text",
    "ArgumentError",
    "ConfigError",
    "ConversionError",
    "MdHtmlError",
    "SourceReadError",
    "RunResult",
    "run",
]
