from __future__ import annotations

import io

from mdhtml import output


def test_write_html_appends_single_newline() -> None:
    stream = io.StringIO()

    output.write_html("<p>a</p>\n\n", stream)

    assert stream.getvalue() == "<p>a</p>\n"


def test_write_html_empty_fragment_is_blank_line() -> None:
    stream = io.StringIO()

    output.write_html("", stream)

    assert stream.getvalue() == "\n"


def test_write_html_defaults_to_stdout(capsys) -> None:
    output.write_html("<p>x</p>")

    assert capsys.readouterr().out == "<p>x</p>\n"


def test_render_standalone_escapes_title_not_body() -> None:
    document = output.render_standalone(
        "<h1>Tom &amp; Jerry</h1>\n", title="a<b>"
    )

    assert document.startswith("<!DOCTYPE html>\n<html>")
    assert "<title>a&lt;b&gt;</title>" in document
    assert "<body>\n<h1>Tom &amp; Jerry</h1>\n</body>" in document
    assert document.endswith("</html>")
