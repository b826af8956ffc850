"""Tests for the drawables composer."""

from __future__ import annotations

import pytest

from svgtag.engine.composer import compose_icon, compose_progress, compose_tag
from svgtag.engine.geometry import icon_geometry, progress_geometry, tag_geometry
from svgtag.engine.style import PaletteColorResolver, resolve
from svgtag.svg.parser import parse_icon
from tests.conftest import TWO_TONE_SVG


def _find(doc, tag):
    return [e for e in doc.elements if e["tag"] == tag]


def _style(**overrides):
    defaults = {"foreground": "blue", "background": "yellow", "stroke": "red"}
    return resolve(None, {**defaults, **overrides}, color_resolver=PaletteColorResolver())


class TestTag:
    def test_layer_order(self, metrics):
        style = _style(thickness=1.0)
        doc = compose_tag("TODO", style, tag_geometry("TODO", style, metrics))
        assert [e["tag"] for e in doc.elements] == ["rect", "rect", "text"]

    def test_border_then_fill_colors(self, metrics):
        style = _style(thickness=1.0)
        doc = compose_tag("TODO", style, tag_geometry("TODO", style, metrics))
        border, fill, text = doc.elements
        assert border["fill"] == "#ff0000"
        assert fill["fill"] == "#ffff00"
        assert text["fill"] == "#0000ff"
        assert text["text"] == "TODO"

    def test_thin_border_omitted(self, metrics):
        style = _style(thickness=0.24)
        doc = compose_tag("x", style, tag_geometry("x", style, metrics))
        assert [e["tag"] for e in doc.elements] == ["rect", "text"]
        assert doc.elements[0]["fill"] == "#ffff00"

    def test_threshold_border_included(self, metrics):
        style = _style(thickness=0.25)
        doc = compose_tag("x", style, tag_geometry("x", style, metrics))
        assert len(_find(doc, "rect")) == 2

    def test_font_attributes(self, metrics):
        style = _style(family="Hack", weight="bold", height=14.0)
        doc = compose_tag("x", style, tag_geometry("x", style, metrics))
        text = _find(doc, "text")[0]
        assert text["font-family"] == "Hack"
        assert text["font-weight"] == 700
        assert text["font-size"] == 14.0

    def test_document_size(self, metrics):
        style = _style()
        geom = tag_geometry("abc", style, metrics)
        doc = compose_tag("abc", style, geom)
        assert doc.width == geom.box.svg_width
        assert doc.height == geom.box.svg_height


class TestProgress:
    def test_fill_rect_last(self, metrics):
        style = _style(thickness=1.0)
        geom = progress_geometry(0.5, style, metrics)
        doc = compose_progress(style, geom)
        rects = _find(doc, "rect")
        assert len(rects) == 3
        assert rects[-1]["fill"] == "#0000ff"
        assert rects[-1]["width"] == pytest.approx(geom.fill.width)


class TestIcon:
    def test_paths_forced_to_foreground(self, metrics):
        icon = parse_icon(TWO_TONE_SVG)
        style = _style()
        doc = compose_icon(icon, style, icon_geometry(icon, style, metrics))
        paths = _find(doc, "path")
        assert len(paths) == 2
        assert all(p["fill"] == "#0000ff" for p in paths)

    def test_same_transform_on_every_path(self, metrics):
        icon = parse_icon(TWO_TONE_SVG)
        style = _style()
        geom = icon_geometry(icon, style, metrics)
        doc = compose_icon(icon, style, geom)
        transforms = {p["transform"] for p in _find(doc, "path")}
        assert transforms == {geom.transform.to_svg()}

    def test_preserve_fills(self, metrics):
        icon = parse_icon(TWO_TONE_SVG)
        style = _style()
        doc = compose_icon(icon, style, icon_geometry(icon, style, metrics), preserve_fills=True)
        assert [p["fill"] for p in _find(doc, "path")] == ["#ff0000", "#00ff00"]

    def test_paths_drawn_after_box(self, metrics):
        icon = parse_icon(TWO_TONE_SVG)
        style = _style(thickness=1.0)
        doc = compose_icon(icon, style, icon_geometry(icon, style, metrics))
        assert [e["tag"] for e in doc.elements] == ["rect", "rect", "path", "path"]
