from __future__ import annotations

import math
from pathlib import Path
from typing import List, Sequence, Tuple
from xml.sax.saxutils import escape, quoteattr

from dashcharts.domain.dto.drawing import FillText

_ANCHORS = {"left": "start", "center": "middle", "right": "end"}
_BASELINES = {"alphabetic": "", "middle": ' dominant-baseline="middle"', "top": ' dominant-baseline="hanging"'}

# Sweeps this close to a full turn are drawn as a circle; an arc whose end
# point equals its start point renders nothing in SVG.
_FULL_TURN_EPSILON = 1e-9


def _fmt(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


class SvgSurface:
    """Surface that builds an SVG document."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.elements: List[str] = []

    def clear(self, width: int, height: int) -> None:
        self.width, self.height = width, height
        self.elements = []

    def stroke_path(self, points: Sequence[Tuple[float, float]], color: str, line_width: float) -> None:
        coords = " ".join(f"{_fmt(x)},{_fmt(y)}" for x, y in points)
        self.elements.append(f'<polyline points="{coords}" fill="none" stroke={quoteattr(color)} stroke-width="{_fmt(line_width)}"/>')

    def fill_rect(self, x: float, y: float, width: float, height: float, color: str) -> None:
        if width == 0 or height == 0:
            return
        left, top = min(x, x + width), min(y, y + height)
        self.elements.append(
            f'<rect x="{_fmt(left)}" y="{_fmt(top)}" width="{_fmt(abs(width))}" height="{_fmt(abs(height))}" fill={quoteattr(color)}/>'
        )

    def fill_wedge(self, center_x: float, center_y: float, radius: float, start_angle: float, end_angle: float, color: str) -> None:
        sweep = end_angle - start_angle
        if sweep <= 0:
            return
        if sweep >= 2 * math.pi - _FULL_TURN_EPSILON:
            self.elements.append(f'<circle cx="{_fmt(center_x)}" cy="{_fmt(center_y)}" r="{_fmt(radius)}" fill={quoteattr(color)}/>')
            return
        x0 = center_x + radius * math.cos(start_angle)
        y0 = center_y + radius * math.sin(start_angle)
        x1 = center_x + radius * math.cos(end_angle)
        y1 = center_y + radius * math.sin(end_angle)
        large_arc = 1 if sweep > math.pi else 0
        d = (
            f"M {_fmt(center_x)} {_fmt(center_y)} L {_fmt(x0)} {_fmt(y0)} "
            f"A {_fmt(radius)} {_fmt(radius)} 0 {large_arc} 1 {_fmt(x1)} {_fmt(y1)} Z"
        )
        self.elements.append(f'<path d="{d}" fill={quoteattr(color)}/>')

    def fill_text(self, command: FillText) -> None:
        self.elements.append(
            f'<text x="{_fmt(command.x)}" y="{_fmt(command.y)}" fill={quoteattr(command.color)} '
            f'font-size="{command.font_size}" font-family={quoteattr(command.font_family)} '
            f'text-anchor="{_ANCHORS[command.align]}"{_BASELINES[command.baseline]}>{escape(command.text)}</text>'
        )

    def to_svg(self) -> str:
        header = f'<svg xmlns="http://www.w3.org/2000/svg" width="{self.width}" height="{self.height}" viewBox="0 0 {self.width} {self.height}">'
        return "\n".join([header, *self.elements, "</svg>"])

    def save(self, path: str | Path) -> None:
        Path(path).write_text(self.to_svg() + "\n", encoding="utf-8")
