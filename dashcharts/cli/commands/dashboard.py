from __future__ import annotations

from typing import Any, Dict, List

from dashcharts.dashboard import AnalyticsDashboard
from dashcharts.env import get_output_config

from . import Dispatcher, command


@command("dashboard")
def _dashboard(dispatcher: Dispatcher, args: List[str], opts: Dict[str, Any]) -> int:
    output_dir, default_format = get_output_config()
    output_dir = str(opts.get("output-dir", output_dir))
    fmt = str(opts.get("format", default_format)).lower()

    dashboard = AnalyticsDashboard()
    for path in dashboard.export(output_dir, fmt):
        dispatcher.utter_message(text=f"Wrote {path}")
    return 0


_ = (_dashboard,)
