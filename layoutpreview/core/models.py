"""Data models for layout descriptions and their compiled output."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from .markup import as_text
from .resolve import as_mapping, first_present, optional_str

DEFAULT_COLORS: Dict[str, str] = {
    "primary": "#3B82F6",
    "secondary": "#64748B",
    "accent": "#F59E0B",
    "background": "#ffffff",
    "text": "#1F2937",
}

DEFAULT_FONTS: Dict[str, str] = {
    "body": "Inter, Arial, sans-serif",
}

DEFAULT_TITLE = "Generated Layout"
DEFAULT_DESCRIPTION = "This is a generated layout."


class ComponentType(str, Enum):
    HEADER = "header"
    HERO = "hero"
    CARD_GRID = "cardgrid"
    SECTION = "section"
    TRIPS_TABLE = "tripstable"
    FOOTER = "footer"
    UNKNOWN = "unknown"

    @classmethod
    def classify(cls, raw: str) -> "ComponentType":
        for member in cls:
            if member is not cls.UNKNOWN and member.value == raw:
                return member
        return cls.UNKNOWN


@dataclass
class ColorPalette:
    primary: Optional[str] = None
    secondary: Optional[str] = None
    accent: Optional[str] = None
    background: Optional[str] = None
    text: Optional[str] = None

    def resolved(self) -> Dict[str, str]:
        return {
            name: first_present(getattr(self, name), default=fallback)
            for name, fallback in DEFAULT_COLORS.items()
        }

    def to_dict(self) -> dict:
        return {name: getattr(self, name) for name in DEFAULT_COLORS if getattr(self, name)}

    @classmethod
    def from_dict(cls, data: Any) -> "ColorPalette":
        data = as_mapping(data)
        return cls(**{name: optional_str(data.get(name)) for name in DEFAULT_COLORS})


@dataclass
class FontSpec:
    body: Optional[str] = None

    def resolved(self) -> Dict[str, str]:
        return {"body": first_present(self.body, default=DEFAULT_FONTS["body"])}

    def to_dict(self) -> dict:
        return {"body": self.body} if self.body else {}

    @classmethod
    def from_dict(cls, data: Any) -> "FontSpec":
        return cls(body=optional_str(as_mapping(data).get("body")))


@dataclass
class ComponentSpec:
    """One entry of a layout's component list."""

    type: str
    props: Dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> ComponentType:
        return ComponentType.classify(self.type)

    def to_dict(self) -> dict:
        return {"type": self.type, "props": dict(self.props)}

    @classmethod
    def from_dict(cls, data: Any) -> "ComponentSpec":
        data = as_mapping(data)
        raw_type = data.get("type")
        return cls(
            type=as_text(raw_type),
            props=dict(as_mapping(data.get("props"))),
        )


@dataclass
class Layout:
    title: Optional[str] = None
    description: Optional[str] = None
    colors: ColorPalette = field(default_factory=ColorPalette)
    fonts: FontSpec = field(default_factory=FontSpec)
    components: List[ComponentSpec] = field(default_factory=list)
    html_code: Optional[str] = None
    css_code: Optional[str] = None

    @property
    def has_precompiled(self) -> bool:
        return bool(self.html_code) and bool(self.css_code)

    def to_dict(self) -> dict:
        data: Dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "colors": self.colors.to_dict(),
            "fonts": self.fonts.to_dict(),
            "components": [c.to_dict() for c in self.components],
        }
        if self.html_code is not None:
            data["htmlCode"] = self.html_code
        if self.css_code is not None:
            data["cssCode"] = self.css_code
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Layout":
        data = as_mapping(data)
        components_data = data.get("components", [])
        if not isinstance(components_data, (list, tuple)):
            components_data = []
        title = data.get("title")
        description = data.get("description")
        return cls(
            title=as_text(title) if title else None,
            description=as_text(description) if description else None,
            colors=ColorPalette.from_dict(data.get("colors")),
            fonts=FontSpec.from_dict(data.get("fonts")),
            components=[ComponentSpec.from_dict(c) for c in components_data],
            html_code=optional_str(data.get("htmlCode")),
            css_code=optional_str(data.get("cssCode")),
        )


@dataclass(frozen=True)
class CompiledLayout:
    html: str
    css: str

    def to_dict(self) -> Dict[str, str]:
        return {"html": self.html, "css": self.css}
