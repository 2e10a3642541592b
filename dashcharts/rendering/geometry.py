"""Pixel-space geometry shared by the chart kinds.

Canvas convention: origin top-left, y grows downward, angles clockwise from
the positive x axis.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from dashcharts.domain.dto.charts.types import Surface

Point = Tuple[float, float]


def plot_width(surface: Surface) -> float:
    return surface.width - 2 * surface.padding


def plot_height(surface: Surface) -> float:
    return surface.height - 2 * surface.padding


def baseline_y(surface: Surface) -> float:
    return surface.height - surface.padding


def axis_points(surface: Surface) -> List[Point]:
    """Left then bottom axis as one open polyline."""
    p = surface.padding
    return [(p, p), (p, baseline_y(surface)), (surface.width - p, baseline_y(surface))]


def index_x(surface: Surface, index: int, count: int) -> float:
    return surface.padding + (index * plot_width(surface)) / (count - 1)


def value_y(surface: Surface, value: float, max_value: float) -> float:
    return baseline_y(surface) - (value / max_value) * plot_height(surface)


def bar_width(surface: Surface, count: int, gap: float) -> float:
    return plot_width(surface) / count - gap


def sweep_angles(values: Sequence[float]) -> List[Tuple[float, float]]:
    """(start, end) angle per value, accumulating from 0 around the full circle.

    Values are scaled by their maximum before summing, so the total stays
    finite for inputs near the float limit.
    """
    scale = max(values)
    shares = [value / scale for value in values]
    whole = math.fsum(shares)
    spans: List[Tuple[float, float]] = []
    start = 0.0
    for share in shares:
        end = start + 2 * math.pi * (share / whole)
        spans.append((start, end))
        start = end
    return spans


def polar(center: Point, radius: float, angle: float) -> Point:
    return center[0] + radius * math.cos(angle), center[1] + radius * math.sin(angle)
