from __future__ import annotations

import logging
import math
from functools import lru_cache
from pathlib import Path
from typing import Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from dashcharts.domain.dto.drawing import FillText

logger = logging.getLogger(__name__)

TRANSPARENT = (0, 0, 0, 0)


@lru_cache(maxsize=16)
def _font(size: int):
    return ImageFont.load_default(size=size)


class RasterSurface:
    """Pillow RGBA image surface; ``clear`` resets every pixel to transparent."""

    def __init__(self, width: int, height: int):
        self.image = Image.new("RGBA", (width, height), TRANSPARENT)
        self._draw = ImageDraw.Draw(self.image)

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size

    def clear(self, width: int, height: int) -> None:
        if self.image.size != (width, height):
            self.image = Image.new("RGBA", (width, height), TRANSPARENT)
            self._draw = ImageDraw.Draw(self.image)
        else:
            self.image.paste(TRANSPARENT, (0, 0, width, height))

    def stroke_path(self, points: Sequence[Tuple[float, float]], color: str, line_width: float) -> None:
        self._draw.line(list(points), fill=color, width=max(1, round(line_width)), joint="curve")

    def fill_rect(self, x: float, y: float, width: float, height: float, color: str) -> None:
        if width == 0 or height == 0:
            return
        left, top = min(x, x + width), min(y, y + height)
        self._draw.rectangle([left, top, left + abs(width), top + abs(height)], fill=color)

    def fill_wedge(self, center_x: float, center_y: float, radius: float, start_angle: float, end_angle: float, color: str) -> None:
        if end_angle - start_angle <= 0:
            return
        box = [center_x - radius, center_y - radius, center_x + radius, center_y + radius]
        self._draw.pieslice(box, math.degrees(start_angle), math.degrees(end_angle), fill=color)

    def fill_text(self, command: FillText) -> None:
        font = _font(command.font_size)
        left, top, right, bottom = self._draw.textbbox((0, 0), command.text, font=font)
        x, y = command.x, command.y
        if command.align == "center":
            x -= (right - left) / 2
        elif command.align == "right":
            x -= right - left
        if command.baseline == "middle":
            y -= (bottom + top) / 2
        elif command.baseline == "alphabetic":
            y -= bottom
        self._draw.text((x, y), command.text, fill=command.color, font=font)

    def tobytes(self) -> bytes:
        return self.image.tobytes()

    def save(self, path: str | Path) -> None:
        self.image.save(Path(path), format="PNG")
        logger.debug("Wrote %dx%d PNG to %s", *self.image.size, path)
