"""Compile a layout description into a standalone HTML document and its CSS.

The compiler is a total function over layout data: every missing or malformed
field degrades to a documented default. Only a missing layout is rejected.
Output is deterministic, so equal layouts always produce identical markup.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from jinja2 import DictLoader, Environment, select_autoescape
from markupsafe import Markup

from .errors import InvalidLayoutError
from .markup import as_text, pretty_dump, text_node
from .models import (
    DEFAULT_COLORS,
    DEFAULT_DESCRIPTION,
    DEFAULT_TITLE,
    CompiledLayout,
    ComponentSpec,
    ComponentType,
    Layout,
)
from .resolve import as_mapping, first_present, pick, pick_list, pick_sequence
from .stylesheet import build_stylesheet, css_token

logger = logging.getLogger(__name__)

COPYRIGHT_YEAR = "2024"

DOCUMENT_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ title }}</title>
    <style>
{{ stylesheet }}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>{{ title }}</h1>
            <p>{{ description }}</p>
        </div>
{% if fragments %}
        <div class="components">
{{ fragments | join("\\n") }}
        </div>
{% else %}
        <div class="components"></div>
{% endif %}
    </div>
</body>
</html>
"""

HEADER_TEMPLATE = """\
<div class="component header-component">
    <h2>{{ title }}</h2>
    <p>{{ content }}</p>
{% if navigation is not none %}
    <div class="nav-links">
{% for link in navigation %}
        <a href="{{ link.href }}">{{ link.label }}</a>
{% endfor %}
    </div>
{% endif %}
</div>"""

HERO_TEMPLATE = """\
<div class="component hero-component">
    <div class="hero-section">
        <h1 class="hero-title">{{ title }}</h1>
        <p class="hero-subtitle">{{ subtitle }}</p>
{% if cta_text %}
        <button class="cta-button">{{ cta_text }}</button>
{% endif %}
    </div>
</div>"""

CARD_GRID_TEMPLATE = """\
<div class="component cardgrid-component">
    <h2>{{ title }}</h2>
    <p>{{ content }}</p>
    <div class="card-grid">
{% for item in items %}
        <div class="card">
            <div class="card-image">
{% if item.image %}
                <img src="{{ item.image }}" alt="{{ item.alt }}" style="width: 100%; height: 100%; object-fit: cover;">
{% else %}
                Image Placeholder
{% endif %}
            </div>
            <div class="card-content">
                <div class="card-title">{{ item.title }}</div>
                <div class="card-description">{{ item.description }}</div>
{% if item.price %}
                <p><strong>Price:</strong> ${{ item.price }}</p>
{% endif %}
{% if item.rating %}
                <p><strong>Rating:</strong> {{ item.rating }}/5</p>
{% endif %}
            </div>
        </div>
{% else %}
        <p>No items available</p>
{% endfor %}
    </div>
</div>"""

SECTION_TEMPLATE = """\
<div class="component section-component">
    <h2>{{ title }}</h2>
    <p>{{ content }}</p>
{% if image %}
    <img src="{{ image }}" alt="Section image" style="max-width: 100%; height: auto; margin: 20px 0; border-radius: 8px;">
{% endif %}
</div>"""

TRIPS_TABLE_TEMPLATE = """\
<div class="component tripstable-component">
    <h2>{{ title }}</h2>
    <p>{{ content }}</p>
{% if rows %}
    <table class="data-table" style="width: 100%; border-collapse: collapse; margin: 20px 0; background: white; border-radius: 8px; overflow: hidden; box-shadow: 0 2px 10px rgba(0,0,0,0.1);">
        <thead>
            <tr style="background: {{ header_background }}; color: white;">
{% for heading in headings %}
                <th style="padding: 15px; text-align: left;">{{ heading }}</th>
{% endfor %}
            </tr>
        </thead>
        <tbody>
{% for row in rows %}
            <tr style="border-bottom: 1px solid #eee;">
{% for cell in row %}
                <td style="padding: 15px;">{{ cell }}</td>
{% endfor %}
            </tr>
{% endfor %}
        </tbody>
    </table>
{% else %}
    <p>No data available</p>
{% endif %}
</div>"""

FOOTER_TEMPLATE = """\
<div class="component footer-component">
    <div class="footer">
        <h2>{{ title }}</h2>
        <p>{{ content }}</p>
{% if links is not none %}
        <div class="footer-links">
{% for link in links %}
            <a href="{{ link.href }}">{{ link.label }}</a>
{% endfor %}
        </div>
{% endif %}
{% if social is not none %}
        <div class="social-links">
{% for link in social %}
            <a href="{{ link.href }}">{{ link.label }}</a>
{% endfor %}
        </div>
{% endif %}
        <p>&copy; {{ year }} {{ company }}. All rights reserved.</p>
    </div>
</div>"""

UNKNOWN_TEMPLATE = """\
<div class="component {{ css_class }}">
    <h2>{{ title }}</h2>
    <p>{{ content }}</p>
    <pre style="background: #f5f5f5; padding: 15px; border-radius: 5px; overflow-x: auto; font-size: 0.9rem;">
{{ dump | text_node }}
    </pre>
</div>"""

TEMPLATES: Dict[str, str] = {
    "document.html": DOCUMENT_TEMPLATE,
    "header.html": HEADER_TEMPLATE,
    "hero.html": HERO_TEMPLATE,
    "cardgrid.html": CARD_GRID_TEMPLATE,
    "section.html": SECTION_TEMPLATE,
    "tripstable.html": TRIPS_TABLE_TEMPLATE,
    "footer.html": FOOTER_TEMPLATE,
    "unknown.html": UNKNOWN_TEMPLATE,
}


def _jinja_env() -> Environment:
    env = Environment(
        loader=DictLoader(TEMPLATES),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["text_node"] = text_node
    return env


# ---------------------------------------------------------------------------
# Per-component context builders
# ---------------------------------------------------------------------------


def _links(entries: Any, label_key: str) -> Optional[List[Dict[str, str]]]:
    if not isinstance(entries, (list, tuple)):
        return None
    links = []
    for entry in entries:
        entry = as_mapping(entry)
        links.append({
            "href": as_text(pick(entry, "href", default="#")),
            "label": as_text(entry.get(label_key)),
        })
    return links


def _header_context(component: ComponentSpec, colors: Mapping[str, str]) -> Dict[str, Any]:
    props = component.props
    return {
        "title": as_text(pick(props, "title", default="Header")),
        "content": as_text(pick(props, "content", default="Navigation and branding section")),
        "navigation": _links(props.get("navigation"), "label"),
    }


def _hero_context(component: ComponentSpec, colors: Mapping[str, str]) -> Dict[str, Any]:
    props = component.props
    return {
        "title": as_text(pick(props, "title", default="Welcome")),
        "subtitle": as_text(pick(props, "subtitle", "content", default="Hero section content")),
        "cta_text": as_text(pick(props, "ctaText", default="")),
    }


def _card(item: Any) -> Dict[str, str]:
    item = as_mapping(item)
    return {
        "image": as_text(pick(item, "image", default="")),
        "alt": as_text(pick(item, "title", default="Card")),
        "title": as_text(pick(item, "title", "name", default="Item")),
        "description": as_text(pick(item, "description", "content", default="Description")),
        "price": as_text(pick(item, "price", default="")),
        "rating": as_text(pick(item, "rating", default="")),
    }


def _card_grid_context(component: ComponentSpec, colors: Mapping[str, str]) -> Dict[str, Any]:
    props = component.props
    items = pick_sequence(props, "items", "cards", "destinations")
    return {
        "title": as_text(pick(props, "title", default="Card Grid")),
        "content": as_text(pick(props, "content", default="Grid of cards or items")),
        "items": [_card(item) for item in items],
    }


def _section_context(component: ComponentSpec, colors: Mapping[str, str]) -> Dict[str, Any]:
    props = component.props
    return {
        "title": as_text(pick(props, "title", default="Section")),
        "content": as_text(pick(props, "content", default="Section content")),
        "image": as_text(pick(props, "image", default="")),
    }


def _row_values(row: Any) -> List[str]:
    if isinstance(row, Mapping):
        return [as_text(value) for value in row.values()]
    return [as_text(row)]


def _trips_table_context(component: ComponentSpec, colors: Mapping[str, str]) -> Dict[str, Any]:
    props = component.props
    rows = pick_list(props, "data", "items")
    # Headings come from the first row only; every row renders its own values
    # positionally, so rows with a different key set will not line up.
    headings = [as_text(key) for key in as_mapping(rows[0])] if rows else []
    return {
        "title": as_text(pick(props, "title", default="Data Table")),
        "content": as_text(pick(props, "content", default="Tabular data display")),
        "header_background": css_token(colors.get("primary", DEFAULT_COLORS["primary"])),
        "headings": headings,
        "rows": [_row_values(row) for row in rows],
    }


def _footer_context(component: ComponentSpec, colors: Mapping[str, str]) -> Dict[str, Any]:
    props = component.props
    return {
        "title": as_text(pick(props, "title", default="Footer")),
        "content": as_text(pick(props, "content", default="Footer content and links")),
        "links": _links(props.get("links"), "label"),
        "social": _links(props.get("socialMedia"), "platform"),
        "company": as_text(pick(props, "title", default="Company")),
        "year": COPYRIGHT_YEAR,
    }


def _unknown_context(component: ComponentSpec, colors: Mapping[str, str]) -> Dict[str, Any]:
    props = component.props
    logger.debug("Rendering unrecognised component type %r with the fallback renderer", component.type)
    return {
        "css_class": f"{component.type}-component",
        "title": as_text(pick(props, "title", default=component.type)),
        "content": as_text(pick(props, "content", default="Component content")),
        "dump": pretty_dump(props),
    }


ContextBuilder = Callable[[ComponentSpec, Mapping[str, str]], Dict[str, Any]]

RENDERERS: Dict[ComponentType, ContextBuilder] = {
    ComponentType.HEADER: _header_context,
    ComponentType.HERO: _hero_context,
    ComponentType.CARD_GRID: _card_grid_context,
    ComponentType.SECTION: _section_context,
    ComponentType.TRIPS_TABLE: _trips_table_context,
    ComponentType.FOOTER: _footer_context,
    ComponentType.UNKNOWN: _unknown_context,
}


def render_component(
    component: ComponentSpec,
    colors: Optional[Mapping[str, str]] = None,
    env: Optional[Environment] = None,
) -> str:
    """Render a single component to an HTML fragment."""

    env = env or _jinja_env()
    kind = component.kind
    context = RENDERERS[kind](component, colors or DEFAULT_COLORS)
    return env.get_template(f"{kind.value}.html").render(**context)


def _coerce_layout(layout: Union[Layout, Mapping[str, Any], None]) -> Layout:
    if layout is None:
        raise InvalidLayoutError("A layout is required")
    if isinstance(layout, Layout):
        return layout
    if isinstance(layout, Mapping):
        return Layout.from_dict(layout)
    raise InvalidLayoutError(f"Expected a layout or a mapping, got {type(layout).__name__}")


def compile_layout(layout: Union[Layout, Mapping[str, Any], None]) -> CompiledLayout:
    """Compile ``layout`` into ``CompiledLayout(html, css)``.

    A layout that already carries both ``htmlCode`` and ``cssCode`` is
    returned verbatim without compiling anything.
    """

    layout = _coerce_layout(layout)
    if layout.has_precompiled:
        logger.debug("Layout carries precompiled markup; skipping compilation")
        return CompiledLayout(html=layout.html_code or "", css=layout.css_code or "")

    colors = layout.colors.resolved()
    fonts = layout.fonts.resolved()
    css = build_stylesheet(colors, fonts)

    env = _jinja_env()
    fragments = [Markup(render_component(c, colors, env)) for c in layout.components]
    logger.debug("Compiled %d component(s)", len(fragments))

    title = as_text(first_present(layout.title, default=DEFAULT_TITLE))
    description = as_text(first_present(layout.description, default=DEFAULT_DESCRIPTION))
    html = env.get_template("document.html").render(
        title=title,
        description=description,
        stylesheet=Markup(css),
        fragments=fragments,
    )
    return CompiledLayout(html=html, css=css)
