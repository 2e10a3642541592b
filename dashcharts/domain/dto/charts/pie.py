from typing import Literal

from pydantic import BaseModel

from .types import CategoryDataset, ChartMetadata, ChartType, Surface


class PieChart(BaseModel):
    """Pie chart DTO - circular charts"""

    type: Literal[ChartType.PIE] = ChartType.PIE
    metadata: ChartMetadata
    surface: Surface
    data: CategoryDataset
