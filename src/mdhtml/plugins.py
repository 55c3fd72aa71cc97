"""markdown-it plugins implementing the GitHub flavor extras.

Each plugin takes a :class:`~markdown_it.MarkdownIt` instance and registers
its rules on it, so they can be applied with ``md.use(plugin)``.
"""

from __future__ import annotations

import re
from typing import Dict, Sequence, Set

import emoji
from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.rules_inline import StateInline
from markdown_it.token import Token
from markdown_it.utils import EnvType, OptionsDict

MENTION_URL = "https://github.com/{user}"

SLUG_CHARS_RE = re.compile(r"[^\w\- ]+")
MENTION_RE = re.compile(
    r"@([A-Za-z0-9](?:[A-Za-z0-9]|-(?=[A-Za-z0-9])){0,38})(?![A-Za-z0-9-])"
)


def slugify(text: str) -> str:
    """Return a GitHub-compatible anchor slug for heading ``text``."""
    s = text.strip().lower()
    s = SLUG_CHARS_RE.sub("", s)
    return s.replace(" ", "-")


# ------------- Heading ids -------------


def heading_anchors_plugin(md: MarkdownIt) -> None:
    """Give every heading an ``id`` derived from its text.

    Repeated slugs within one document get ``-1``, ``-2`` suffixes; a
    suffix already taken by another heading is skipped so ids stay unique.
    """
    md.core.ruler.push("heading_anchors", _heading_anchors_rule)


def _heading_anchors_rule(state: StateCore) -> None:
    used: Dict[str, int] = {}
    tokens = state.tokens
    taken: Set[str] = {
        token.attrGet("id")  # type: ignore[misc]
        for token in tokens
        if token.type == "heading_open" and token.attrGet("id") is not None
    }
    for i, token in enumerate(tokens):
        if token.type != "heading_open" or i + 1 >= len(tokens):
            continue
        inline = tokens[i + 1]
        if inline.type != "inline" or token.attrGet("id") is not None:
            continue
        base = slugify(_plain_text(inline.children or []))
        if not base:
            continue
        n = used.get(base, 0)
        anchor = base if n == 0 else f"{base}-{n}"
        while anchor in taken:
            n += 1
            anchor = f"{base}-{n}"
        used[base] = n + 1
        taken.add(anchor)
        token.attrSet("id", anchor)


def _plain_text(children: Sequence[Token]) -> str:
    return "".join(
        child.content
        for child in children
        if child.type in ("text", "code_inline")
    )


# ------------- @mentions -------------


def mentions_plugin(md: MarkdownIt, url_template: str = MENTION_URL) -> None:
    """Turn ``@user`` into a link to the user's profile."""

    def _mention_rule(state: StateInline, silent: bool) -> bool:
        pos = state.pos
        if state.src[pos] != "@":
            return False
        if pos > 0 and not state.src[pos - 1].isspace():
            return False
        if getattr(state, "linkLevel", 0) > 0:
            return False
        match = MENTION_RE.match(state.src, pos, state.posMax)
        if match is None:
            return False
        user = match.group(1)
        if not silent:
            token = state.push("link_open", "a", 1)
            token.attrSet("href", url_template.format(user=user))
            token.markup = "mention"
            token = state.push("text", "", 0)
            token.content = match.group(0)
            token = state.push("link_close", "a", -1)
            token.markup = "mention"
        state.pos = match.end()
        return True

    md.inline.ruler.before("emphasis", "mention", _mention_rule)


# ------------- Emoji shortcodes -------------


def emoji_plugin(md: MarkdownIt) -> None:
    """Replace GitHub emoji shortcodes such as ``:smile:`` in prose.

    Only ``text`` tokens are rewritten; code spans and code blocks keep
    their shortcodes verbatim.
    """
    md.core.ruler.push("emoji_shortcodes", _emoji_rule)


def _emoji_rule(state: StateCore) -> None:
    for token in state.tokens:
        if token.type != "inline" or not token.children:
            continue
        for child in token.children:
            if child.type == "text" and ":" in child.content:
                child.content = emoji.emojize(
                    child.content, language="alias"
                )


# ------------- Link targets -------------


def new_window_links_plugin(md: MarkdownIt) -> None:
    """Render every link with ``target="_blank"``."""

    def render_link_open(
        self,
        tokens: Sequence[Token],
        idx: int,
        options: OptionsDict,
        env: EnvType,
    ) -> str:
        token = tokens[idx]
        token.attrSet("target", "_blank")
        token.attrSet("rel", "noopener noreferrer")
        return self.renderToken(tokens, idx, options, env)

    md.add_render_rule("link_open", render_link_open)


__all__ = [
    "MENTION_URL",
    "slugify",
    "heading_anchors_plugin",
    "mentions_plugin",
    "emoji_plugin",
    "new_window_links_plugin",
]
