"""File reading helpers."""

from __future__ import annotations

import codecs
from pathlib import Path

__all__ = [
    "DEFAULT_ENCODING",
    "is_known_encoding",
    "read_text_file",
]

# UTF-8 that tolerates a leading byte-order mark.
DEFAULT_ENCODING = "utf-8-sig"


def is_known_encoding(name: str) -> bool:
    try:
        codecs.lookup(name)
    except LookupError:
        return False
    return True


def read_text_file(path: Path, *, encoding: str = DEFAULT_ENCODING) -> str:
    """Read ``path`` in full, failing on bytes invalid for ``encoding``.

    Raises ``OSError`` for missing or unreadable files and
    ``UnicodeDecodeError`` for undecodable content.
    """
    with Path(path).open("r", encoding=encoding, errors="strict") as fh:
        return fh.read()
