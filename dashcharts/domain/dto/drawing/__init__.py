from .commands import Clear, DrawCommand, DrawCommandType, FillRect, FillText, FillWedge, StrokePath

__all__ = [
    "DrawCommandType",
    "DrawCommand",
    "Clear",
    "StrokePath",
    "FillRect",
    "FillWedge",
    "FillText",
]
