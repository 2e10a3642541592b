from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dashcharts.exceptions import ConfigurationError

DEFAULT_PADDING = 40.0

DEFAULT_COLORS: Tuple[str, ...] = (
    "#3498db",
    "#2ecc71",
    "#e74c3c",
    "#f39c12",
    "#9b59b6",
    "#1abc9c",
    "#34495e",
    "#7f8c8d",
)


class ChartType(str, Enum):
    LINE = "LINE"
    PIE = "PIE"
    BAR = "BAR"


class ChartMetadata(BaseModel):
    """Common chart metadata"""

    title: str
    description: Optional[str] = None


class Dataset(BaseModel):
    """Ordered numeric values, optionally labelled (display order = list order)"""

    values: List[float]
    labels: Optional[List[str]] = None


class CategoryEntry(BaseModel):
    name: str
    value: float


class CategoryDataset(BaseModel):
    """Ordered (name, value) pairs for proportional rendering"""

    entries: List[CategoryEntry]

    @classmethod
    def from_pairs(cls, pairs: List[Tuple[str, float]]) -> "CategoryDataset":
        return cls(entries=[CategoryEntry(name=name, value=value) for name, value in pairs])

    @property
    def total(self) -> float:
        return sum(entry.value for entry in self.entries)


class Surface(BaseModel):
    """Pixel canvas dimensions plus the inset reserved for axes and labels"""

    model_config = ConfigDict(frozen=True)

    width: int = Field(gt=0)
    height: int = Field(gt=0)
    padding: float = Field(default=DEFAULT_PADDING, ge=0)


class Palette(BaseModel):
    """Fixed ordered colour list, cycled by index."""

    model_config = ConfigDict(frozen=True)

    colors: Tuple[str, ...] = DEFAULT_COLORS

    @model_validator(mode="after")
    def _require_colors(self) -> "Palette":
        if not self.colors:
            raise ConfigurationError("Palette must contain at least one color")
        return self

    def color_at(self, index: int) -> str:
        return self.colors[index % len(self.colors)]

    def __len__(self) -> int:
        return len(self.colors)


DEFAULT_PALETTE = Palette()
