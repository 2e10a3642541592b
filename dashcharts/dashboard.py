"""Analytics dashboard: the panels of the admin panel's overview page."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from dashcharts.domain.dto.charts import ChartDTO
from dashcharts.domain.dto.response import DrawingPlan
from dashcharts.rendering import ChartRenderer
from dashcharts.shared.chart_loader import dashboard_charts
from dashcharts.surfaces import export_plan

logger = logging.getLogger(__name__)


def slugify(title: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "_", title.lower()).strip("_")
    return slug or "chart"


class AnalyticsDashboard:
    def __init__(self, renderer: Optional[ChartRenderer] = None, panels: Optional[Sequence[ChartDTO]] = None):
        self.renderer = renderer or ChartRenderer()
        self.panels: List[ChartDTO] = list(panels) if panels is not None else list(dashboard_charts())

    def render_panels(self) -> List[Tuple[ChartDTO, DrawingPlan]]:
        return [(panel, self.renderer.render(panel)) for panel in self.panels]

    def export(self, output_dir: str | Path, fmt: str) -> List[Path]:
        """Write one file per panel; panels sharing a title get a numeric suffix."""
        written: List[Path] = []
        seen: dict[str, int] = {}
        for panel, plan in self.render_panels():
            slug = slugify(panel.metadata.title)
            seen[slug] = seen.get(slug, 0) + 1
            if seen[slug] > 1:
                slug = f"{slug}_{seen[slug]}"
            written.append(export_plan(plan, fmt, Path(output_dir) / f"{slug}.{fmt}"))
        logger.info("Exported %d dashboard panels to %s", len(written), output_dir)
        return written
