"""Small text helpers shared by the compiler and its callers."""

from __future__ import annotations

import html
import json
import math
import re
from typing import Any

from markupsafe import Markup

_STYLE_BLOCK_RE = re.compile(r"<style[^>]*>[\s\S]*?</style>", re.IGNORECASE)


def strip_style_blocks(document: str) -> str:
    """Remove every ``<style>`` element from ``document``.

    Used by inline previews that render the markup inside a host page and
    must not let the generated stylesheet leak into the host.
    """

    return _STYLE_BLOCK_RE.sub("", document)


def as_text(value: Any) -> str:
    """Stringify a layout value the way a browser template literal would."""

    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, ensure_ascii=False, default=str)
    return str(value)


def pretty_dump(value: Any) -> str:
    """Indented JSON rendering of ``value``; unknown objects are stringified."""

    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def text_node(value: Any) -> Markup:
    """Escape ``value`` for use as element text, leaving quotes readable."""

    return Markup(html.escape(as_text(value), quote=False))
