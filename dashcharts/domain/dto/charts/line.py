from typing import Literal

from pydantic import BaseModel

from .types import ChartMetadata, ChartType, Dataset, Surface


class LineChart(BaseModel):
    type: Literal[ChartType.LINE] = ChartType.LINE
    metadata: ChartMetadata
    surface: Surface
    data: Dataset
