"""Surface protocol and the replay adapter.

A surface is any concrete paint backend. The renderer never touches one
directly; :func:`replay` walks a :class:`DrawingPlan` and forwards each command
to the matching surface method.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Protocol, Sequence, Tuple

from dashcharts.domain.dto.drawing import Clear, DrawCommandType, FillRect, FillText, FillWedge, StrokePath
from dashcharts.domain.dto.response import DrawingPlan

logger = logging.getLogger(__name__)


class DrawingSurface(Protocol):
    def clear(self, width: int, height: int) -> None: ...

    def stroke_path(self, points: Sequence[Tuple[float, float]], color: str, line_width: float) -> None: ...

    def fill_rect(self, x: float, y: float, width: float, height: float, color: str) -> None: ...

    def fill_wedge(self, center_x: float, center_y: float, radius: float, start_angle: float, end_angle: float, color: str) -> None: ...

    def fill_text(self, command: FillText) -> None: ...


def _clear(surface: DrawingSurface, cmd: Clear) -> None:
    surface.clear(cmd.width, cmd.height)


def _stroke(surface: DrawingSurface, cmd: StrokePath) -> None:
    surface.stroke_path(cmd.points, cmd.color, cmd.line_width)


def _rect(surface: DrawingSurface, cmd: FillRect) -> None:
    surface.fill_rect(cmd.x, cmd.y, cmd.width, cmd.height, cmd.color)


def _wedge(surface: DrawingSurface, cmd: FillWedge) -> None:
    surface.fill_wedge(cmd.center_x, cmd.center_y, cmd.radius, cmd.start_angle, cmd.end_angle, cmd.color)


def _text(surface: DrawingSurface, cmd: FillText) -> None:
    surface.fill_text(cmd)


_DISPATCH: Dict[DrawCommandType, Callable[[DrawingSurface, object], None]] = {
    DrawCommandType.CLEAR: _clear,  # type: ignore[dict-item]
    DrawCommandType.STROKE_PATH: _stroke,  # type: ignore[dict-item]
    DrawCommandType.FILL_RECT: _rect,  # type: ignore[dict-item]
    DrawCommandType.FILL_WEDGE: _wedge,  # type: ignore[dict-item]
    DrawCommandType.FILL_TEXT: _text,  # type: ignore[dict-item]
}


def replay(plan: DrawingPlan, surface: DrawingSurface) -> None:
    logger.debug("Replaying %d commands onto %s", len(plan.commands), type(surface).__name__)
    for cmd in plan.commands:
        _DISPATCH[cmd.type](surface, cmd)


class RecordingSurface:
    """In-memory surface that keeps what was drawn since the last clear."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.operations: List[Tuple[str, tuple]] = []

    def clear(self, width: int, height: int) -> None:
        self.width, self.height = width, height
        self.operations = [("clear", (width, height))]

    def stroke_path(self, points, color, line_width) -> None:
        self.operations.append(("stroke_path", (tuple(points), color, line_width)))

    def fill_rect(self, x, y, width, height, color) -> None:
        self.operations.append(("fill_rect", (x, y, width, height, color)))

    def fill_wedge(self, center_x, center_y, radius, start_angle, end_angle, color) -> None:
        self.operations.append(("fill_wedge", (center_x, center_y, radius, start_angle, end_angle, color)))

    def fill_text(self, command: FillText) -> None:
        self.operations.append(("fill_text", (command.text, command.x, command.y, command.color, command.align, command.baseline)))
