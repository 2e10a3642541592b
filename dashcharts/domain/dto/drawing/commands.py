from enum import Enum
from typing import Annotated, List, Literal, Tuple, Union

from pydantic import BaseModel, Field


class DrawCommandType(str, Enum):
    CLEAR = "CLEAR"
    STROKE_PATH = "STROKE_PATH"
    FILL_RECT = "FILL_RECT"
    FILL_WEDGE = "FILL_WEDGE"
    FILL_TEXT = "FILL_TEXT"


class Clear(BaseModel):
    """Reset the whole surface to transparent"""

    type: Literal[DrawCommandType.CLEAR] = DrawCommandType.CLEAR
    width: int
    height: int


class StrokePath(BaseModel):
    """Open polyline through ``points``"""

    type: Literal[DrawCommandType.STROKE_PATH] = DrawCommandType.STROKE_PATH
    points: List[Tuple[float, float]]
    color: str
    line_width: float = 1.0


class FillRect(BaseModel):
    type: Literal[DrawCommandType.FILL_RECT] = DrawCommandType.FILL_RECT
    x: float
    y: float
    width: float
    height: float
    color: str


class FillWedge(BaseModel):
    """Filled circular sector; angles in radians, clockwise from 3 o'clock (y axis points down)"""

    type: Literal[DrawCommandType.FILL_WEDGE] = DrawCommandType.FILL_WEDGE
    center_x: float
    center_y: float
    radius: float
    start_angle: float
    end_angle: float
    color: str

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle


class FillText(BaseModel):
    type: Literal[DrawCommandType.FILL_TEXT] = DrawCommandType.FILL_TEXT
    text: str
    x: float
    y: float
    color: str
    font_size: int = 12
    font_family: str = "Arial"
    align: Literal["left", "center", "right"] = "center"
    baseline: Literal["alphabetic", "middle", "top"] = "alphabetic"


DrawCommand = Annotated[
    Union[Clear, StrokePath, FillRect, FillWedge, FillText],
    Field(discriminator="type"),
]
