"""VectorDocument: the element list handed to the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from svgtag.svg.serializer import serialize_svg


@dataclass
class VectorDocument:
    width: float
    height: float
    elements: list[dict[str, Any]] = field(default_factory=list)
    title: str = ""

    def rect(self, x: float, y: float, width: float, height: float, *, fill: str, rx: float = 0.0) -> None:
        self.elements.append(
            {"tag": "rect", "x": x, "y": y, "width": width, "height": height, "rx": rx, "fill": fill}
        )

    def text(
        self,
        label: str,
        x: float,
        y: float,
        *,
        fill: str,
        font_family: str,
        font_size: float,
        font_weight: Any,
    ) -> None:
        self.elements.append(
            {
                "tag": "text",
                "x": x,
                "y": y,
                "fill": fill,
                "font-family": font_family,
                "font-size": font_size,
                "font-weight": font_weight,
                "text": label,
            }
        )

    def path(self, d: str, *, fill: str, transform: str | None = None) -> None:
        self.elements.append({"tag": "path", "d": d, "fill": fill, "transform": transform})

    def group(self, elements: list[dict[str, Any]], *, transform: str | None = None) -> None:
        self.elements.append({"tag": "g", "transform": transform, "children": list(elements)})

    def to_svg(self) -> str:
        return serialize_svg(self.elements, self.width, self.height, title=self.title)
