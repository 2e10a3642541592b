"""Error taxonomy for chart rendering.

All errors raised by the renderer, the surface adapters and the chart file
loader derive from :class:`ChartError`. None of them are retried: rendering is
deterministic, so the same input always fails the same way.
"""

import time
from enum import Enum
from typing import Any, Dict, Optional


class ChartErrorType(str, Enum):
    VALIDATION_ERROR = "validation_error"
    CONFIGURATION_ERROR = "configuration_error"


class ChartError(Exception):
    error_type: ChartErrorType

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = details or {}
        self.timestamp = time.time()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_type": self.error_type.value,
            "message": self.message,
            "details": self.details,
            "timestamp": self.timestamp,
        }


class ValidationError(ChartError):
    """Input data cannot be laid out (too few points, zero total, ...)."""

    error_type = ChartErrorType.VALIDATION_ERROR


class ConfigurationError(ChartError):
    """Renderer or backend misconfigured (empty palette, unknown format)."""

    error_type = ChartErrorType.CONFIGURATION_ERROR


class ChartFileError(FileNotFoundError):
    pass
