import json
import logging
from pathlib import Path
from typing import Any, Mapping

from .errors import LayoutLoadError
from .models import CompiledLayout, Layout

logger = logging.getLogger(__name__)

HTML_FILENAME = "index.html"
CSS_FILENAME = "style.css"


def parse_layout(data: Any) -> Layout:
    """Build a layout from decoded JSON, unwrapping a ``{"layout": ...}`` envelope."""
    if not isinstance(data, Mapping):
        raise LayoutLoadError(f"Layout document must be a JSON object, got {type(data).__name__}")
    inner = data.get("layout")
    if isinstance(inner, Mapping):
        data = inner
    return Layout.from_dict(data)


def loads_layout(text: str) -> Layout:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise LayoutLoadError(f"Invalid layout JSON: {exc}") from exc
    return parse_layout(data)


def load_layout(path: str | Path) -> Layout:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LayoutLoadError(f"Unable to read layout file {path}: {exc}", source=path) from exc
    try:
        return loads_layout(text)
    except LayoutLoadError as exc:
        exc.source = path
        raise


def export_layout(compiled: CompiledLayout, output_dir: str | Path) -> Path:
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    (output_dir / HTML_FILENAME).write_text(compiled.html, encoding="utf-8")
    (output_dir / CSS_FILENAME).write_text(compiled.css, encoding="utf-8")
    logger.info("Exported layout to %s", output_dir)
    return output_dir
