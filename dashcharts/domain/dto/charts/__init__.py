from .bar import BarChart
from .line import LineChart
from .pie import PieChart
from .types import (
    DEFAULT_PADDING,
    DEFAULT_PALETTE,
    CategoryDataset,
    CategoryEntry,
    ChartMetadata,
    ChartType,
    Dataset,
    Palette,
    Surface,
)
from .union import ChartDTO

__all__ = [
    "DEFAULT_PADDING",
    "DEFAULT_PALETTE",
    "ChartType",
    "ChartMetadata",
    "Dataset",
    "CategoryEntry",
    "CategoryDataset",
    "Surface",
    "Palette",
    "LineChart",
    "BarChart",
    "PieChart",
    "ChartDTO",
]
