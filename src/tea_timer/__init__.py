"""
Tea Timer

Measure and report the elapsed time of tasks in a human-readable format.
"""

__version__ = "0.1.0"

from .display import format_duration
from .timers import Timer, time_and_log, time_and_report, timed_block
from .utils.logging import get_logger

__all__ = [
    "format_duration",
    "Timer",
    "time_and_report",
    "time_and_log",
    "timed_block",
    "get_logger",
]
