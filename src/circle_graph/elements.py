"""
Drawable form of rendered shapes.

An SvgElement is a single SVG tag with its attributes. Numeric attributes
stay numeric so callers can inspect coordinates; formatting happens only in
to_markup().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Union
from xml.sax.saxutils import quoteattr

AttrValue = Union[float, int, str]


@dataclass(frozen=True)
class SvgElement:
    """
    A single SVG element.

    Attributes:
        tag: Element name (circle, line, rect)
        attributes: Attribute values in output order (read-only)
    """

    tag: str
    attributes: Mapping[str, AttrValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def __hash__(self) -> int:
        return hash((self.tag, tuple(self.attributes.items())))

    def __getitem__(self, name: str) -> AttrValue:
        return self.attributes[name]

    def get(self, name: str, default: Any = None) -> Any:
        return self.attributes.get(name, default)

    def to_markup(self, precision: int = 4) -> str:
        """
        Serialize as a self-closing SVG tag.

        Args:
            precision: Decimal places for float attributes

        Returns:
            Markup such as ``<circle cx="0.5" cy="1" r="0.1" .../>``
        """
        parts = [self.tag]
        for name, value in self.attributes.items():
            parts.append(f"{name}={quoteattr(format_number(value, precision))}")
        return "<" + " ".join(parts) + "/>"


def format_number(value: AttrValue, precision: int = 4) -> str:
    """Format a float compactly: fixed precision, trailing zeros dropped."""
    if isinstance(value, float):
        text = f"{value:.{precision}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        if text == "-0":
            return "0"
        return text
    return str(value)


__all__ = [
    "SvgElement",
    "AttrValue",
    "format_number",
]
