"""Construction and application of the configured Markdown converter."""

from __future__ import annotations

from markdown_it import MarkdownIt
from mdit_py_plugins.tasklists import tasklists_plugin

from .config import ConversionConfig
from .errors import ConversionError
from .plugins import (
    emoji_plugin,
    heading_anchors_plugin,
    mentions_plugin,
    new_window_links_plugin,
)


def build_converter(config: ConversionConfig) -> MarkdownIt:
    """Return a fresh converter configured from ``config``."""

    md = MarkdownIt(
        config.preset,
        options_update={
            "html": True,
            "breaks": config.simple_line_breaks,
        },
    )
    if config.task_lists:
        md.use(tasklists_plugin)
    if config.header_ids:
        md.use(heading_anchors_plugin)
    if config.mentions:
        md.use(mentions_plugin)
    if config.emojis:
        md.use(emoji_plugin)
    if config.open_links_in_new_window:
        md.use(new_window_links_plugin)
    return md


def convert_text(md: MarkdownIt, text: str) -> str:
    """Render ``text`` to HTML, wrapping library failures."""

    try:
        return md.render(text)
    except Exception as exc:
        raise ConversionError(f"Markdown conversion failed: {exc}") from exc


__all__ = [
    "build_converter",
    "convert_text",
]
