from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, NoReturn, Optional, Sequence, Union

from dashcharts.domain.dto.charts import (
    DEFAULT_PALETTE,
    BarChart,
    CategoryDataset,
    ChartDTO,
    ChartType,
    Dataset,
    LineChart,
    Palette,
    PieChart,
    Surface,
)
from dashcharts.domain.dto.drawing import Clear, DrawCommand, FillRect, FillText, FillWedge, StrokePath
from dashcharts.domain.dto.response import DrawingPlan
from dashcharts.exceptions import ValidationError
from dashcharts.rendering import geometry

logger = logging.getLogger(__name__)

LINE_WIDTH = 2.0
AXIS_LINE_WIDTH = 1.0
BAR_GAP = 10.0
PIE_RADIUS_INSET = 10.0
LABEL_OFFSET = 20.0
VALUE_LABEL_OFFSET = 10.0
TEXT_COLOR = "#000000"
PIE_TEXT_COLOR = "#ffffff"
AXIS_COLOR = "#000000"

SeriesInput = Union[Dataset, Sequence[float]]


def _reject(message: str, **details: Any) -> NoReturn:
    logger.warning("Rejected chart input: %s", message)
    raise ValidationError(message, details)


def _format_value(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


class ChartRenderer:
    """Turns datasets into drawing plans for line, pie and bar charts.

    The renderer is stateless apart from its palette: every call computes the
    full geometry from (data, surface) and returns a new :class:`DrawingPlan`
    whose first command clears the surface, so replaying the same plan twice
    gives the same pixels. Invalid input raises
    :class:`~dashcharts.exceptions.ValidationError` before any command is
    produced.
    """

    def __init__(self, palette: Optional[Union[Palette, Sequence[str]]] = None):
        if palette is None:
            self.palette = DEFAULT_PALETTE
        elif isinstance(palette, Palette):
            self.palette = palette
        else:
            self.palette = Palette(colors=tuple(palette))

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def _series(dataset: SeriesInput, labels: Optional[Sequence[str]], surface: Surface, kind: ChartType) -> tuple[List[float], Optional[List[str]]]:
        if isinstance(dataset, Dataset):
            values = list(dataset.values)
            labels = labels if labels is not None else dataset.labels
        else:
            values = [float(v) for v in dataset]
        label_list = list(labels) if labels is not None else None

        if len(values) < 2:
            _reject(f"{kind.value} chart needs at least 2 values, got {len(values)}", count=len(values))
        if not all(math.isfinite(v) for v in values):
            _reject(f"{kind.value} chart values must be finite", values=values)
        if label_list is not None and len(label_list) != len(values):
            _reject(
                f"{kind.value} chart has {len(label_list)} labels for {len(values)} values",
                labels=len(label_list),
                values=len(values),
            )
        if max(values) <= 0:
            _reject(f"{kind.value} chart needs a positive maximum value", max=max(values))
        if geometry.plot_width(surface) <= 0 or geometry.plot_height(surface) <= 0:
            _reject(
                f"Surface {surface.width}x{surface.height} leaves no room inside padding {surface.padding}",
                width=surface.width,
                height=surface.height,
                padding=surface.padding,
            )
        return values, label_list

    @staticmethod
    def _categories(dataset: CategoryDataset, surface: Surface) -> None:
        values = [entry.value for entry in dataset.entries]
        if not values:
            _reject("PIE chart needs at least one category")
        if not all(math.isfinite(v) for v in values):
            _reject("PIE chart values must be finite", values=values)
        if any(v < 0 for v in values):
            _reject("PIE chart values must not be negative", values=values)
        if dataset.total <= 0:
            _reject("PIE chart needs a positive total", total=dataset.total)
        if min(surface.width, surface.height) / 2 - PIE_RADIUS_INSET <= 0:
            _reject(f"Surface {surface.width}x{surface.height} is too small for a pie", width=surface.width, height=surface.height)

    # ------------------------------------------------------------------
    # Chart kinds
    # ------------------------------------------------------------------

    def render_line(self, surface: Surface, dataset: SeriesInput, labels: Optional[Sequence[str]] = None) -> DrawingPlan:
        values, label_list = self._series(dataset, labels, surface, ChartType.LINE)
        n = len(values)
        max_value = max(values)
        color = self.palette.color_at(0)
        logger.debug("Rendering line chart: %d points on %dx%d surface", n, surface.width, surface.height)

        points = [(geometry.index_x(surface, i, n), geometry.value_y(surface, v, max_value)) for i, v in enumerate(values)]
        commands: List[DrawCommand] = [
            Clear(width=surface.width, height=surface.height),
            StrokePath(points=geometry.axis_points(surface), color=color, line_width=LINE_WIDTH),
            StrokePath(points=points, color=color, line_width=LINE_WIDTH),
        ]
        label_y = geometry.baseline_y(surface) + LABEL_OFFSET
        for label, (x, _) in zip(label_list or [], points):
            commands.append(FillText(text=label, x=x, y=label_y, color=TEXT_COLOR))

        return DrawingPlan(chart_type=ChartType.LINE, width=surface.width, height=surface.height, commands=commands)

    def render_pie(self, surface: Surface, dataset: CategoryDataset) -> DrawingPlan:
        self._categories(dataset, surface)
        center = (surface.width / 2, surface.height / 2)
        radius = min(surface.width, surface.height) / 2 - PIE_RADIUS_INSET
        logger.debug("Rendering pie chart: %d categories, total %s", len(dataset.entries), dataset.total)

        commands: List[DrawCommand] = [Clear(width=surface.width, height=surface.height)]
        spans = geometry.sweep_angles([entry.value for entry in dataset.entries])
        for index, (entry, (start, end)) in enumerate(zip(dataset.entries, spans)):
            commands.append(
                FillWedge(
                    center_x=center[0],
                    center_y=center[1],
                    radius=radius,
                    start_angle=start,
                    end_angle=end,
                    color=self.palette.color_at(index),
                )
            )
            label_x, label_y = geometry.polar(center, radius / 2, (start + end) / 2)
            commands.append(FillText(text=entry.name, x=label_x, y=label_y, color=PIE_TEXT_COLOR, baseline="middle"))

        return DrawingPlan(chart_type=ChartType.PIE, width=surface.width, height=surface.height, commands=commands)

    def render_bar(self, surface: Surface, dataset: SeriesInput, labels: Optional[Sequence[str]] = None) -> DrawingPlan:
        values, label_list = self._series(dataset, labels, surface, ChartType.BAR)
        n = len(values)
        max_value = max(values)
        width = geometry.bar_width(surface, n, BAR_GAP)
        if width <= 0:
            _reject(f"{n} bars do not fit on a {surface.width}px wide surface", count=n, width=surface.width)
        logger.debug("Rendering bar chart: %d bars of width %.2f", n, width)

        commands: List[DrawCommand] = [
            Clear(width=surface.width, height=surface.height),
            StrokePath(points=geometry.axis_points(surface), color=AXIS_COLOR, line_width=AXIS_LINE_WIDTH),
        ]
        base = geometry.baseline_y(surface)
        for index, value in enumerate(values):
            x = surface.padding + index * (width + BAR_GAP)
            top = geometry.value_y(surface, value, max_value)
            commands.append(FillRect(x=x, y=top, width=width, height=base - top, color=self.palette.color_at(index)))
            center_x = x + width / 2
            if label_list is not None:
                commands.append(FillText(text=label_list[index], x=center_x, y=base + LABEL_OFFSET, color=TEXT_COLOR))
            commands.append(FillText(text=_format_value(value), x=center_x, y=top - VALUE_LABEL_OFFSET, color=TEXT_COLOR))

        return DrawingPlan(chart_type=ChartType.BAR, width=surface.width, height=surface.height, commands=commands)

    def render(self, chart: ChartDTO) -> DrawingPlan:
        """Render a chart definition, dispatching on its type."""
        if isinstance(chart, LineChart):
            return self.render_line(chart.surface, chart.data)
        if isinstance(chart, BarChart):
            return self.render_bar(chart.surface, chart.data)
        if isinstance(chart, PieChart):
            return self.render_pie(chart.surface, chart.data)
        raise TypeError(f"Unsupported chart definition: {type(chart).__name__}")


def plan_summary(plan: DrawingPlan) -> Dict[str, int]:
    """Count of commands per kind, for logging and the CLI."""
    counts: Dict[str, int] = {}
    for cmd in plan.commands:
        counts[cmd.type.value] = counts.get(cmd.type.value, 0) + 1
    return counts
