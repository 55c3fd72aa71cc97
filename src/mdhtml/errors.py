"""Exception hierarchy for mdhtml."""

from __future__ import annotations

__all__ = [
    "MdHtmlError",
    "ArgumentError",
    "ConfigError",
    "SourceReadError",
    "ConversionError",
]


class MdHtmlError(RuntimeError):
    """Base class for every failure mdhtml reports."""


class ArgumentError(MdHtmlError):
    """Raised when the command line is missing or has invalid arguments."""


class ConfigError(MdHtmlError):
    """Raised when configuration parsing or validation fails."""


class SourceReadError(MdHtmlError):
    """Raised when the Markdown source cannot be read or decoded."""


class ConversionError(MdHtmlError):
    """Raised when the Markdown library fails on the given input."""
