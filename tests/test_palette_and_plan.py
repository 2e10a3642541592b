"""Tests for renderer configuration and drawing plan determinism."""

from __future__ import annotations

import json

import pytest

from dashcharts.domain.dto.charts import DEFAULT_PALETTE, Palette, Surface
from dashcharts.domain.dto.response import DrawingPlan
from dashcharts.exceptions import ConfigurationError
from dashcharts.rendering import ChartRenderer, plan_summary

pytestmark = pytest.mark.unit


def test_empty_palette_fails_at_construction() -> None:
    """An empty palette is a configuration error raised before any render."""

    with pytest.raises(ConfigurationError):
        ChartRenderer(palette=[])
    with pytest.raises(ConfigurationError):
        Palette(colors=())


def test_default_palette_is_shared() -> None:
    """Renderers without an explicit palette share the read-only default."""

    assert ChartRenderer().palette is DEFAULT_PALETTE
    assert len(DEFAULT_PALETTE) == 8
    assert DEFAULT_PALETTE.color_at(9) == DEFAULT_PALETTE.colors[1]


@pytest.mark.parametrize("kind", ["line", "bar"])
def test_series_renders_are_deterministic(renderer, kind) -> None:
    """Rendering the same data twice yields identical commands."""

    surface = Surface(width=400, height=200)
    render = getattr(renderer, f"render_{kind}")
    first = render(surface, [3, 1, 4, 1, 5], ["a", "b", "c", "d", "e"])
    second = render(surface, [3, 1, 4, 1, 5], ["a", "b", "c", "d", "e"])
    assert first.commands == second.commands


def test_pie_renders_are_deterministic(renderer, sales) -> None:
    """Pie plans are identical across calls."""

    surface = Surface(width=300, height=300)
    assert renderer.render_pie(surface, sales).commands == renderer.render_pie(surface, sales).commands


def test_plan_round_trips_through_json(renderer, bar_surface, revenue) -> None:
    """Plans serialize with their command type tags and parse back unchanged."""

    plan = renderer.render_bar(bar_surface, revenue)
    payload = json.loads(plan.model_dump_json())

    assert payload["schema_version"] == 1
    assert payload["chart_type"] == "BAR"
    assert payload["commands"][0]["type"] == "CLEAR"
    assert DrawingPlan.model_validate(payload).commands == plan.commands


def test_plan_summary_counts_commands(renderer, bar_surface, revenue) -> None:
    """One clear, one axis stroke, six bars and twelve labels."""

    summary = plan_summary(renderer.render_bar(bar_surface, revenue))
    assert summary == {"CLEAR": 1, "STROKE_PATH": 1, "FILL_RECT": 6, "FILL_TEXT": 12}
