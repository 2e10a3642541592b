from typing import Annotated, Union

from pydantic import Field

from .bar import BarChart
from .line import LineChart
from .pie import PieChart

ChartDTO = Annotated[
    Union[
        LineChart,
        BarChart,
        PieChart,
    ],
    Field(discriminator="type"),
]
