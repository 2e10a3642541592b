import logging
from pathlib import Path
from typing import Callable, Dict, Iterable

from dashcharts.domain.dto.response import DrawingPlan
from dashcharts.exceptions import ConfigurationError

from .base import DrawingSurface, RecordingSurface, replay
from .raster import RasterSurface
from .svg import SvgSurface

logger = logging.getLogger(__name__)

SurfaceFactory = Callable[[int, int], DrawingSurface]

_REGISTRY: Dict[str, SurfaceFactory] = {}


def register_surface(name: str, factory: SurfaceFactory) -> None:
    _REGISTRY[name] = factory


def surface_names() -> Iterable[str]:
    return _REGISTRY.keys()


def create_surface(name: str, width: int, height: int) -> DrawingSurface:
    factory = _REGISTRY.get(name)
    if factory is None:
        raise ConfigurationError(
            f"Unknown surface backend: {name}. Try one of: {', '.join(sorted(surface_names()))}",
            {"backend": name},
        )
    return factory(width, height)


register_surface("recording", RecordingSurface)
register_surface("svg", SvgSurface)
register_surface("png", RasterSurface)

EXPORT_FORMATS = ("json", "svg", "png")


def export_plan(plan: DrawingPlan, fmt: str, path: str | Path) -> Path:
    """Write a plan as JSON, or replay it onto an svg/png surface and save that."""
    if fmt not in EXPORT_FORMATS:
        raise ConfigurationError(f"Unsupported export format: {fmt}. Try one of: {', '.join(EXPORT_FORMATS)}", {"format": fmt})
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    if fmt == "json":
        target.write_text(plan.model_dump_json(indent=2) + "\n", encoding="utf-8")
    else:
        surface = create_surface(fmt, plan.width, plan.height)
        replay(plan, surface)
        surface.save(target)  # type: ignore[attr-defined]
    logger.info("Exported %s chart to %s", plan.chart_type.value, target)
    return target


__all__ = [
    "DrawingSurface",
    "RecordingSurface",
    "SvgSurface",
    "RasterSurface",
    "replay",
    "register_surface",
    "surface_names",
    "create_surface",
    "export_plan",
    "EXPORT_FORMATS",
]
