from datetime import datetime, timezone
from typing import List, Type, TypeVar

from pydantic import BaseModel, Field

from .charts.types import ChartType
from .drawing.commands import DrawCommand

C = TypeVar("C", bound=BaseModel)


class DrawingPlan(BaseModel):
    """Ordered drawing commands produced by one render (v1)."""

    schema_version: int = 1
    chart_type: ChartType
    width: int
    height: int
    commands: List[DrawCommand] = []
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def of_type(self, kind: Type[C]) -> List[C]:
        return [cmd for cmd in self.commands if isinstance(cmd, kind)]
