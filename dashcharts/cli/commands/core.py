from __future__ import annotations

from typing import Any, Dict, List

from dashcharts.domain.dto.charts import DEFAULT_PALETTE

from . import Dispatcher, command, names


@command("help")
def _help(dispatcher: Dispatcher, args: List[str], opts: Dict[str, Any]) -> int:
    lines = [
        "Usage: dashcharts <command> [args] [--options]",
        "",
        "Commands:",
        "  help                                Show this help",
        "  palette                             List the default palette colors",
        "  line V1 V2 ... [--labels a,b,...]   Render a line chart",
        "  bar V1 V2 ... [--labels a,b,...]    Render a bar chart",
        "  pie NAME:VALUE ...                  Render a pie chart",
        "  render --file charts.yml            Render every chart in a YAML file",
        "  dashboard [--output-dir DIR]        Render the analytics dashboard panels",
        "",
        "Options: --width N --height N --format json|svg|png --output PATH",
        "",
        f"Available: {', '.join(sorted(names()))}",
    ]
    dispatcher.utter_message(text="\n".join(lines))
    return 0


@command("palette")
def _palette(dispatcher: Dispatcher, args: List[str], opts: Dict[str, Any]) -> int:
    for index, color in enumerate(DEFAULT_PALETTE.colors):
        dispatcher.utter_message(text=f"{index}: {color}")
    return 0


_ = (_help, _palette)
