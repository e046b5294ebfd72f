from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from layoutpreview.core.compiler import compile_layout
from layoutpreview.core.errors import LayoutLoadError
from layoutpreview.core.storage import export_layout, load_layout, loads_layout, parse_layout


def test_load_layout_unwraps_api_envelope(tmp_path: Path) -> None:
    path = tmp_path / "layout.json"
    path.write_text(json.dumps({"layout": {"title": "Wrapped", "components": []}}), encoding="utf-8")
    layout = load_layout(path)
    assert layout.title == "Wrapped"


def test_load_layout_reads_plain_document(tmp_path: Path) -> None:
    path = tmp_path / "layout.json"
    path.write_text(json.dumps({"title": "Plain", "components": [{"type": "footer"}]}), encoding="utf-8")
    layout = load_layout(str(path))
    assert layout.title == "Plain"
    assert layout.components[0].type == "footer"


def test_load_layout_reports_bad_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(LayoutLoadError) as excinfo:
        load_layout(path)
    assert excinfo.value.source == path


def test_load_layout_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(LayoutLoadError):
        load_layout(tmp_path / "missing.json")


def test_top_level_must_be_an_object() -> None:
    with pytest.raises(LayoutLoadError):
        loads_layout("[1, 2, 3]")
    with pytest.raises(LayoutLoadError):
        parse_layout("title")


def test_export_layout_writes_html_and_css(tmp_path: Path) -> None:
    compiled = compile_layout({"title": "Exported"})
    out = export_layout(compiled, tmp_path / "site")
    assert (out / "index.html").read_text(encoding="utf-8") == compiled.html
    assert (out / "style.css").read_text(encoding="utf-8") == compiled.css
