"""CLI entry point: convert one Markdown file and print the HTML."""

from __future__ import annotations

import argparse
import sys
from importlib import metadata
from pathlib import Path
from typing import Sequence

from mdhtml.core.logging import configure_logger

from .config import ConfigOverrides, load_settings
from .errors import ArgumentError, ConfigError
from .output import write_html
from .runner import run

LOGGER_NAME = "mdhtml"
USAGE_EXIT_CODE = 2


class _ArgumentParser(argparse.ArgumentParser):
    """Parser that raises instead of exiting so main() owns exit codes."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise ArgumentError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="mdhtml",
        description=(
            "Convert a Markdown file to HTML (GitHub flavor) and print it to "
            "standard output."
        ),
        epilog="Example: mdhtml README.md > README.html",
    )
    parser.add_argument(
        "path",
        type=Path,
        help="Markdown file to convert.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a TOML file overriding the default conversion options.",
    )
    parser.add_argument(
        "--standalone",
        action="store_true",
        default=None,
        help="Wrap the HTML fragment in a complete HTML document.",
    )
    parser.add_argument(
        "--log-level",
        help="Set the logging level for the run (defaults to WARNING).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write JSON log records to this file.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Echo debug logging to standard error.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {_package_version()}",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args_list = list(argv) if argv is not None else list(sys.argv[1:])

    parser = _build_parser()
    try:
        args = parser.parse_args(args_list)
    except ArgumentError as exc:
        return _usage_error(parser, str(exc))

    overrides = ConfigOverrides(
        standalone=args.standalone,
        log_level=args.log_level,
        log_file=args.log_file,
    )
    try:
        settings = load_settings(config_path=args.config, overrides=overrides)
    except ConfigError as exc:
        return _usage_error(parser, str(exc))

    try:
        logger = configure_logger(
            LOGGER_NAME,
            level=settings.log_level,
            verbose=args.verbose,
            log_file=settings.log_file,
        )
    except OSError as exc:
        sys.stderr.write(
            f"{parser.prog}: error: cannot open log file "
            f"{settings.log_file}: {exc.strerror or exc}\n"
        )
        return 1
    logger.debug("mdhtml CLI invoked", extra={"source": str(args.path)})

    result = run(args.path, settings=settings, logger=logger)
    if not result.ok:
        sys.stderr.write(f"{parser.prog}: error: {result.error}\n")
        return result.exit_code

    write_html(result.html or "")
    return result.exit_code


def _usage_error(parser: argparse.ArgumentParser, message: str) -> int:
    parser.print_usage(sys.stderr)
    sys.stderr.write(f"{parser.prog}: error: {message}\n")
    return USAGE_EXIT_CODE


def _package_version() -> str:
    try:
        return metadata.version("mdhtml")
    except metadata.PackageNotFoundError:
        return "unknown"


if __name__ == "__main__":  # pragma: no cover - module CLI guard
    raise SystemExit(main())
