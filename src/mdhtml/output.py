"""Output helpers: standalone document wrapping and stdout emission."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from jinja2 import Environment, Template
from markupsafe import Markup

_DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{ title }}</title>
</head>
<body>
{{ body }}
</body>
</html>"""


def document_template() -> Template:
    env = Environment(autoescape=True)
    return env.from_string(_DOCUMENT_TEMPLATE)


def render_standalone(fragment: str, *, title: str) -> str:
    """Wrap an HTML ``fragment`` in a complete document titled ``title``."""

    return document_template().render(
        title=title,
        body=Markup(fragment.rstrip("\n")),
    )


def write_html(html: str, stream: Optional[TextIO] = None) -> None:
    """Write ``html`` followed by exactly one newline, then flush."""

    target = stream if stream is not None else sys.stdout
    target.write(html.rstrip("\n") + "\n")
    target.flush()


__all__ = [
    "document_template",
    "render_standalone",
    "write_html",
]
