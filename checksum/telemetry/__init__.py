"""Telemetry subpackage (lightweight).

Exposes the timer and logger helpers used for diagnostics.
"""

from .logging import get_logger
from .metrics import Timer

__all__ = [
    "Timer",
    "get_logger",
]
