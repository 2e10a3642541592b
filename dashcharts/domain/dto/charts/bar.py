from typing import Literal

from pydantic import BaseModel

from .types import ChartMetadata, ChartType, Dataset, Surface


class BarChart(BaseModel):
    type: Literal[ChartType.BAR] = ChartType.BAR
    metadata: ChartMetadata
    surface: Surface
    data: Dataset
