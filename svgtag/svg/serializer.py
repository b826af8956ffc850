"""Write SVG markup from element definitions."""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape, quoteattr

_RESERVED = ("tag", "text", "children")


def format_number(value: Any) -> str:
    """Compact decimal form: 12.0 -> "12", 0.3333333 -> "0.333333"."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return str(value)
    text = f"{float(value):.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float,
    canvas_h: float,
    title: str = "",
) -> str:
    """Generate SVG markup. ``tag`` names the element, ``text`` is its content
    and ``children`` a nested element list (for groups).
    """
    w, h = format_number(canvas_w), format_number(canvas_h)
    lines = [
        f'<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}"'
        ' xmlns="http://www.w3.org/2000/svg" version="1.1">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    for elem in elements:
        _serialize_element(elem, lines, depth=1)

    lines.append("</svg>")
    return "\n".join(lines)


def _serialize_element(elem: dict[str, Any], lines: list[str], depth: int) -> None:
    indent = "  " * depth
    tag = elem.get("tag", "path")
    attrs = {k: v for k, v in elem.items() if k not in _RESERVED and v is not None}
    attr_str = "".join(f" {k}={quoteattr(format_number(v))}" for k, v in attrs.items())

    if "children" in elem:
        lines.append(f"{indent}<{tag}{attr_str}>")
        for child in elem["children"]:
            _serialize_element(child, lines, depth + 1)
        lines.append(f"{indent}</{tag}>")
    elif "text" in elem:
        lines.append(f"{indent}<{tag}{attr_str}>{escape(str(elem['text']))}</{tag}>")
    else:
        lines.append(f"{indent}<{tag}{attr_str} />")
