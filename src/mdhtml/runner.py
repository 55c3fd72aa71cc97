"""Single-file Markdown to HTML run."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from mdhtml.core.files import read_text_file

from .config import MdHtmlSettings
from .converter import build_converter, convert_text
from .errors import ConfigError, ConversionError, MdHtmlError, SourceReadError
from .output import render_standalone


@dataclass(frozen=True)
class RunResult:
    """Outcome of converting one Markdown file.

    Exactly one of ``html`` and ``error`` is set.
    """

    source: Path
    html: Optional[str] = None
    error: Optional[MdHtmlError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


def run(
    path: Path,
    *,
    settings: Optional[MdHtmlSettings] = None,
    logger: Optional[logging.Logger] = None,
) -> RunResult:
    """Read ``path``, convert it and return the HTML or the failure."""

    settings = settings or MdHtmlSettings()
    logger = logger or logging.getLogger("mdhtml")
    source = Path(path)

    try:
        html = _run(source, settings=settings, logger=logger)
    except MdHtmlError as exc:
        logger.error(
            "Conversion run failed",
            extra={
                "source": str(source),
                "error_type": type(exc).__name__,
                "reason": str(exc),
            },
        )
        return RunResult(source=source, error=exc)

    logger.info(
        "Converted document",
        extra={"source": str(source), "html_length": len(html)},
    )
    return RunResult(source=source, html=html)


def _run(
    source: Path, *, settings: MdHtmlSettings, logger: logging.Logger
) -> str:
    text = _read_source(source, encoding=settings.encoding)
    logger.debug(
        "Read Markdown source",
        extra={"source": str(source), "characters": len(text)},
    )

    try:
        md = build_converter(settings.conversion)
    except ConfigError as exc:
        raise ConversionError(str(exc)) from exc
    logger.debug(
        "Built converter",
        extra={
            "flavor": settings.conversion.flavor,
            "preset": settings.conversion.preset,
        },
    )

    html = convert_text(md, text)
    if settings.standalone:
        html = render_standalone(html, title=source.stem)
    return html


def _read_source(source: Path, *, encoding: str) -> str:
    if source.is_dir():
        raise SourceReadError(f"Source path is a directory: {source}")
    try:
        return read_text_file(source, encoding=encoding)
    except FileNotFoundError as exc:
        raise SourceReadError(f"Source file not found: {source}") from exc
    except UnicodeDecodeError as exc:
        raise SourceReadError(
            f"Source file is not valid {encoding}: {source} "
            f"(byte offset {exc.start})"
        ) from exc
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise SourceReadError(
            f"Could not read source file {source}: {reason}"
        ) from exc


__all__ = [
    "RunResult",
    "run",
]
