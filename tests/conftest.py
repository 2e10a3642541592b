"""Pytest fixtures shared across the renderer tests."""

from __future__ import annotations

import pytest

from dashcharts.domain.dto.charts import CategoryDataset, Dataset, Surface
from dashcharts.rendering import ChartRenderer

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun"]
REVENUE = [5000.0, 6000.0, 4500.0, 7000.0, 6500.0, 8000.0]


@pytest.fixture
def renderer() -> ChartRenderer:
    return ChartRenderer()


@pytest.fixture
def bar_surface() -> Surface:
    return Surface(width=800, height=300)


@pytest.fixture
def revenue() -> Dataset:
    """Monthly revenue as shown on the dashboard."""

    return Dataset(values=REVENUE, labels=MONTHS)


@pytest.fixture
def sales() -> CategoryDataset:
    """Sales by product as shown on the dashboard."""

    return CategoryDataset.from_pairs(
        [("Product A", 300), ("Product B", 200), ("Product C", 150), ("Product D", 100), ("Product E", 50)]
    )
