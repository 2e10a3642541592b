"""YAML chart definition loading.

Provides:
- Loading and validation of chart definition files (a YAML list of charts).
- Cached access to the bundled analytics dashboard definitions.

A chart definition looks like::

    - type: BAR
      metadata: {title: Monthly Revenue}
      surface: {width: 800, height: 300}
      data:
        values: [5000, 6000, 4500]
        labels: [Jan, Feb, Mar]
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, List, Tuple

import pydantic
import yaml

from dashcharts.domain.dto.charts import ChartDTO
from dashcharts.exceptions import ChartFileError, ValidationError

BASE_DATA = Path(__file__).resolve().parent / "data"
DASHBOARD_FILE = BASE_DATA / "dashboard.yml"

_CHARTS_ADAPTER: pydantic.TypeAdapter[List[ChartDTO]] = pydantic.TypeAdapter(List[ChartDTO])


def parse_charts(raw: Any, source: str = "<memory>") -> List[ChartDTO]:
    if not isinstance(raw, list):
        raise ValidationError(f"Unexpected YAML structure in {source}; expected a list of charts", {"source": source})
    try:
        return _CHARTS_ADAPTER.validate_python(raw)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid chart definition in {source}: {e}", {"source": source, "errors": e.errors(include_url=False)}) from e


def load_chart_file(path: str | Path) -> List[ChartDTO]:
    path = Path(path)
    if not path.is_file():
        raise ChartFileError(f"Missing chart file: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except UnicodeDecodeError as e:
        raise ValidationError(f"Chart file is not valid UTF-8: {path}", {"source": str(path)}) from e
    except yaml.YAMLError as e:
        raise ValidationError(f"Malformed YAML in {path}: {e}", {"source": str(path)}) from e
    return parse_charts(raw, str(path))


@lru_cache(maxsize=1)
def dashboard_charts() -> Tuple[ChartDTO, ...]:
    """Bundled dashboard panels (mock data), in display order."""
    return tuple(load_chart_file(DASHBOARD_FILE))
