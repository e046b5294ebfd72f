from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from layoutpreview.core.compiler import compile_layout
from layoutpreview.core.markup import as_text, pretty_dump, strip_style_blocks, text_node


def test_strip_style_blocks_removes_every_block() -> None:
    html = "<head><STYLE type='text/css'>\nbody{}\n</STYLE></head><body><style>p{}</style><p>Hi</p></body>"
    stripped = strip_style_blocks(html)
    assert "body{}" not in stripped
    assert "p{}" not in stripped
    assert "<p>Hi</p>" in stripped


def test_strip_style_blocks_on_compiled_document() -> None:
    compiled = compile_layout({"title": "Preview"})
    stripped = strip_style_blocks(compiled.html)
    assert "<style" not in stripped
    assert compiled.css.strip() not in stripped
    assert "<h1>Preview</h1>" in stripped


def test_as_text_matches_template_literal_output() -> None:
    assert as_text(None) == ""
    assert as_text("abc") == "abc"
    assert as_text(3) == "3"
    assert as_text(3.0) == "3"
    assert as_text(4.25) == "4.25"
    assert as_text(True) == "true"
    assert as_text([1, "a"]) == '[1, "a"]'


def test_text_node_escapes_markup_but_keeps_quotes() -> None:
    assert str(text_node('<b>"x" & y</b>')) == '&lt;b&gt;"x" &amp; y&lt;/b&gt;'


def test_pretty_dump_is_indented() -> None:
    assert pretty_dump({"foo": 1}) == '{\n  "foo": 1\n}'
    assert "object" in pretty_dump({"value": object()})
