"""Tests for replaying drawing plans onto concrete surfaces."""

from __future__ import annotations

import math

import pytest

from dashcharts.domain.dto.charts import CategoryDataset, Surface
from dashcharts.exceptions import ConfigurationError
from dashcharts.rendering import ChartRenderer
from dashcharts.surfaces import RasterSurface, RecordingSurface, SvgSurface, create_surface, replay

pytestmark = pytest.mark.unit

BLUE = (0x34, 0x98, 0xDB, 255)
GREEN = (0x2E, 0xCC, 0x71, 255)


def test_recording_surface_sees_commands_in_order(renderer, bar_surface, revenue) -> None:
    """Replay forwards every command in plan order, starting with the clear."""

    surface = RecordingSurface(800, 300)
    replay(renderer.render_bar(bar_surface, revenue), surface)

    kinds = [name for name, _ in surface.operations]
    assert kinds[0] == "clear"
    assert kinds[1] == "stroke_path"
    assert kinds.count("fill_rect") == 6
    assert kinds.count("fill_text") == 12


def test_replaying_twice_gives_the_same_drawing(renderer, bar_surface, revenue) -> None:
    """The leading clear wipes earlier output, so a second replay repeats the first."""

    plan = renderer.render_bar(bar_surface, revenue)
    surface = RecordingSurface(800, 300)
    replay(plan, surface)
    first = list(surface.operations)
    replay(plan, surface)
    assert surface.operations == first


def test_raster_output_is_pixel_identical_across_renders(renderer, bar_surface, revenue) -> None:
    """Two renders of the same data replayed onto one image give identical pixels."""

    surface = RasterSurface(800, 300)
    replay(renderer.render_bar(bar_surface, revenue), surface)
    first = surface.tobytes()
    replay(renderer.render_bar(bar_surface, revenue), surface)
    assert surface.tobytes() == first

    fresh = RasterSurface(800, 300)
    replay(renderer.render_bar(bar_surface, revenue), fresh)
    assert fresh.tobytes() == first


def test_raster_bar_pixels(renderer, bar_surface, revenue) -> None:
    """Inside the first bar is palette[0]; the corner outside the plot stays transparent."""

    surface = RasterSurface(800, 300)
    replay(renderer.render_bar(bar_surface, revenue), surface)

    assert surface.image.getpixel((95, 200)) == BLUE
    assert surface.image.getpixel((2, 2)) == (0, 0, 0, 0)


def test_raster_pie_pixels(renderer, sales) -> None:
    """A point inside the first wedge, away from its label, has the first colour."""

    surface = RasterSurface(300, 300)
    replay(renderer.render_pie(Surface(width=300, height=300), sales), surface)

    angle = math.radians(20)
    point = (round(150 + 120 * math.cos(angle)), round(150 + 120 * math.sin(angle)))
    assert surface.image.getpixel(point) == BLUE
    assert surface.image.getpixel((1, 1)) == (0, 0, 0, 0)


def test_svg_document_structure(renderer, bar_surface, revenue) -> None:
    """Bars become rects and labels become centred text."""

    surface = SvgSurface(800, 300)
    replay(renderer.render_bar(bar_surface, revenue), surface)
    svg = surface.to_svg()

    assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg" width="800" height="300"')
    assert svg.rstrip().endswith("</svg>")
    assert svg.count("<rect ") == 6
    assert svg.count("<polyline ") == 1
    assert '<rect x="40" y="122.5" width="110" height="137.5" fill="#3498db"/>' in svg
    assert 'text-anchor="middle"' in svg


def test_svg_escapes_label_text(renderer) -> None:
    """Labels are XML-escaped."""

    surface = SvgSurface(400, 200)
    replay(renderer.render_line(Surface(width=400, height=200), [1, 2], ["R&D", "<b>"]), surface)
    svg = surface.to_svg()

    assert "R&amp;D" in svg
    assert "&lt;b&gt;" in svg


def test_svg_pie_wedges(renderer) -> None:
    """Partial wedges are arc paths, empty wedges are skipped, a lone wedge is a circle."""

    surface = SvgSurface(300, 300)
    dataset = CategoryDataset.from_pairs([("A", 1), ("B", 0), ("C", 3)])
    replay(renderer.render_pie(Surface(width=300, height=300), dataset), surface)
    assert surface.to_svg().count("<path ") == 2

    replay(renderer.render_pie(Surface(width=300, height=300), CategoryDataset.from_pairs([("All", 5)])), surface)
    svg = surface.to_svg()
    assert svg.count("<path ") == 0
    assert '<circle cx="150" cy="150" r="140" fill="#3498db"/>' in svg


def test_negative_bar_hangs_below_the_axis(renderer) -> None:
    """A negative value is drawn downward from the baseline on both backends."""

    plan = renderer.render_bar(Surface(width=400, height=200), [5, -3])

    raster = RasterSurface(400, 200)
    replay(plan, raster)
    assert raster.image.getpixel((275, 180)) == GREEN
    assert raster.image.getpixel((275, 150)) == (0, 0, 0, 0)

    svg = SvgSurface(400, 200)
    replay(plan, svg)
    document = svg.to_svg()
    assert '<rect x="200" y="160" width="150" height="72" fill="#2ecc71"/>' in document
    assert 'height="-' not in document


def test_zero_size_rects_are_skipped() -> None:
    """Only rectangles with no area are dropped; negative widths are flipped."""

    svg = SvgSurface(100, 100)
    svg.fill_rect(10, 10, 0, 20, "#000000")
    svg.fill_rect(50, 10, -20, 5, "#000000")
    assert svg.elements == ['<rect x="30" y="10" width="20" height="5" fill="#000000"/>']

    raster = RasterSurface(100, 100)
    raster.fill_rect(50, 10, -20, 5, "#000000")
    assert raster.image.getpixel((40, 12)) == (0, 0, 0, 255)


def test_svg_escapes_colours() -> None:
    """Colour attributes are quoted so they cannot break out of the element."""

    surface = SvgSurface(300, 200)
    palette_renderer = ChartRenderer(["red\" onload='x'"])
    replay(palette_renderer.render_bar(Surface(width=300, height=200), [1, 2]), surface)
    svg = surface.to_svg()

    assert "fill=\"red&quot; onload='x'\"" in svg
    assert 'onload="' not in svg


def test_unknown_backend_is_a_configuration_error() -> None:
    """Only registered backends can be created."""

    assert isinstance(create_surface("svg", 10, 10), SvgSurface)
    with pytest.raises(ConfigurationError):
        create_surface("pdf", 10, 10)
