from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from layoutpreview.core.compiler import compile_layout
from layoutpreview.main import main

LAYOUT = {
    "title": "Weekend",
    "components": [{"type": "section", "props": {"title": "Day one"}}],
}


def _write_layout(tmp_path: Path) -> Path:
    path = tmp_path / "weekend.json"
    path.write_text(json.dumps(LAYOUT), encoding="utf-8")
    return path


def test_print_css(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(_write_layout(tmp_path)), "--print", "css"]) == 0
    assert capsys.readouterr().out == compile_layout(LAYOUT).css


def test_print_html(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(_write_layout(tmp_path)), "--print", "html"]) == 0
    out = capsys.readouterr().out
    assert "<h2>Day one</h2>" in out


def test_export(tmp_path: Path) -> None:
    out_dir = tmp_path / "out"
    assert main([str(_write_layout(tmp_path)), "--export", str(out_dir)]) == 0
    assert "<h1>Weekend</h1>" in (out_dir / "index.html").read_text(encoding="utf-8")
    assert (out_dir / "style.css").exists()


def test_export_without_layout_uses_defaults(tmp_path: Path) -> None:
    out_dir = tmp_path / "out"
    assert main(["--export", str(out_dir)]) == 0
    assert "Generated Layout" in (out_dir / "index.html").read_text(encoding="utf-8")


def test_bad_layout_file_exits_with_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("nope", encoding="utf-8")
    assert main([str(path), "--print", "html"]) == 1
