from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import pydantic

from dashcharts.dashboard import slugify
from dashcharts.domain.dto.charts import CategoryDataset, Surface
from dashcharts.domain.dto.response import DrawingPlan
from dashcharts.env import get_output_config
from dashcharts.exceptions import ValidationError
from dashcharts.rendering import ChartRenderer, plan_summary
from dashcharts.shared.chart_loader import load_chart_file
from dashcharts.surfaces import EXPORT_FORMATS, export_plan

from . import Dispatcher, command

DEFAULT_SIZES = {
    "line": (400, 200),
    "pie": (300, 300),
    "bar": (800, 300),
}


def _surface(kind: str, opts: Dict[str, Any]) -> Surface:
    width, height = DEFAULT_SIZES[kind]
    try:
        return Surface(width=opts.get("width", width), height=opts.get("height", height))
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid surface size: {e.errors(include_url=False)[0]['msg']}", {"kind": kind}) from e


def _parse_values(args: List[str]) -> List[float]:
    values: List[float] = []
    for token in args:
        try:
            values.append(float(token))
        except ValueError:
            raise ValidationError(f"Not a number: {token!r}", {"token": token}) from None
    return values


def _parse_labels(opts: Dict[str, Any]) -> Optional[List[str]]:
    raw = opts.get("labels")
    if raw is None or raw is True:
        return None
    return [label.strip() for label in str(raw).split(",")]


def _parse_categories(args: List[str]) -> CategoryDataset:
    pairs = []
    for token in args:
        name, sep, value = token.rpartition(":")
        if not sep or not name:
            raise ValidationError(f"Expected NAME:VALUE, got {token!r}", {"token": token})
        pairs.append((name, _parse_values([value])[0]))
    return CategoryDataset.from_pairs(pairs)


def _output_format(opts: Dict[str, Any], default_format: str) -> str:
    """--format wins; otherwise a known --output suffix, then the configured default."""
    if "format" in opts:
        return str(opts["format"]).lower()
    output = opts.get("output")
    if output is not None:
        suffix = Path(str(output)).suffix.lstrip(".").lower()
        if suffix in EXPORT_FORMATS:
            return suffix
    return default_format


def emit_plan(dispatcher: Dispatcher, plan: DrawingPlan, opts: Dict[str, Any], default_name: str) -> None:
    """Print JSON to stdout when no file is requested, otherwise export."""
    output_dir, default_format = get_output_config()
    output_dir = str(opts.get("output-dir", output_dir))
    fmt = _output_format(opts, default_format)
    output = opts.get("output")
    if fmt == "json" and output is None:
        dispatcher.utter_message(json_message=json.loads(plan.model_dump_json()))
        return
    target = Path(str(output)) if output is not None else Path(output_dir) / f"{default_name}.{fmt}"
    path = export_plan(plan, fmt, target)
    counts = ", ".join(f"{k}={v}" for k, v in sorted(plan_summary(plan).items()))
    dispatcher.utter_message(text=f"Wrote {path} ({counts})")


@command("line")
def _line(dispatcher: Dispatcher, args: List[str], opts: Dict[str, Any]) -> int:
    plan = ChartRenderer().render_line(_surface("line", opts), _parse_values(args), _parse_labels(opts))
    emit_plan(dispatcher, plan, opts, "line")
    return 0


@command("bar")
def _bar(dispatcher: Dispatcher, args: List[str], opts: Dict[str, Any]) -> int:
    plan = ChartRenderer().render_bar(_surface("bar", opts), _parse_values(args), _parse_labels(opts))
    emit_plan(dispatcher, plan, opts, "bar")
    return 0


@command("pie")
def _pie(dispatcher: Dispatcher, args: List[str], opts: Dict[str, Any]) -> int:
    plan = ChartRenderer().render_pie(_surface("pie", opts), _parse_categories(args))
    emit_plan(dispatcher, plan, opts, "pie")
    return 0


@command("render")
def _render(dispatcher: Dispatcher, args: List[str], opts: Dict[str, Any]) -> int:
    source = opts.get("file") or (args[0] if args else None)
    if not source or source is True:
        dispatcher.utter_error("Usage: dashcharts render --file charts.yml")
        return 2
    charts = load_chart_file(str(source))
    renderer = ChartRenderer()
    for index, chart in enumerate(charts):
        # A single --output only makes sense for a single chart.
        chart_opts = dict(opts)
        if len(charts) > 1:
            chart_opts.pop("output", None)
        emit_plan(dispatcher, renderer.render(chart), chart_opts, f"{index:02d}_{slugify(chart.metadata.title)}")
    return 0


_ = (_line, _bar, _pie, _render)
