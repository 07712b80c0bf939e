"""Timing utilities for measuring and reporting tasks."""

import logging
from contextlib import contextmanager
from time import perf_counter_ns
from typing import Callable, Iterator, Optional, TypeVar

from .display import format_duration

# Handlers are left to the application; see utils.logging.configure_logging
logger = logging.getLogger("tea_timer")

T = TypeVar("T")

class Timer:
    """Stopwatch for a single named task.

    The clock starts on construction. ``stop()`` prints the final report
    and ends the timer's intended use; call ``restart()`` to measure a new
    task with the same object.

    Example:
        >>> timer = Timer("load data")
        >>> ...
        >>> timer.stop()
        load data took 12.34ms
    """

    def __init__(self, task_name: str = ""):
        self.task_name = task_name
        self.start_time = perf_counter_ns()
        self._stopped = False

    def __enter__(self) -> "Timer":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Only a block that completed normally gets a report
        if exc_type is None and not self._stopped:
            self.stop()
        return False

    def __str__(self) -> str:
        return self.elapsed_report()

    __repr__ = __str__

    @property
    def stopped(self) -> bool:
        """Whether ``stop()`` has run since the last (re)start."""
        return self._stopped

    def restart(self, task_name: str = "") -> None:
        """Reset the start time and rename the task.

        Args:
            task_name: Label for the new task
        """
        self.start_time = perf_counter_ns()
        self.task_name = task_name
        self._stopped = False

    def elapsed_duration(self) -> int:
        """Get nanoseconds elapsed since the timer started."""
        return perf_counter_ns() - self.start_time

    def elapsed_string(self) -> str:
        return format_duration(self.elapsed_duration())

    def elapsed_report(self) -> str:
        return f"{self.task_name} elapsed {self.elapsed_string()}"

    def final_report(self) -> str:
        return f"{self.task_name} took {self.elapsed_string()}"

    def report_elapsed(self) -> None:
        """Print the elapsed report to stdout. Safe to call repeatedly."""
        print(self.elapsed_report())

    def log_elapsed(self) -> None:
        """Log the elapsed report at INFO level."""
        logger.info(self.elapsed_report())

    def stop(self) -> None:
        """Print the final report and mark the timer as stopped.

        A second call without an intervening ``restart()`` prints nothing
        and logs a warning instead.
        """
        if self._stopped:
            logger.warning(f"Timer '{self.task_name}' already stopped; call restart() to reuse it")
            return

        print(self.final_report())
        self._stopped = True

def time_and_report(func: Callable[[], T], task_name: Optional[str] = None) -> T:
    """Run ``func`` and print how long it took.

    Args:
        func: Zero-argument callable to time
        task_name: Label for the report

    Returns:
        Whatever ``func`` returned. If it raises, nothing is printed.
    """
    timer = Timer(task_name or "")
    result = func()
    timer.stop()
    return result

def time_and_log(func: Callable[[], T], task_name: Optional[str] = None) -> T:
    """Run ``func`` and log how long it took at INFO level.

    Args:
        func: Zero-argument callable to time
        task_name: Label for the log message

    Returns:
        Whatever ``func`` returned. If it raises, nothing is logged.
    """
    timer = Timer(task_name or "")
    result = func()
    logger.info(timer.final_report())
    return result

@contextmanager
def timed_block(task_name: str = "", use_logger: bool = False) -> Iterator[Timer]:
    """Context manager to time a block of code.

    Args:
        task_name: Label for the report
        use_logger: Log the report instead of printing it
    """
    timer = Timer(task_name)
    yield timer
    # Not reached when the block raises
    if use_logger:
        logger.info(timer.final_report())
        timer._stopped = True
    else:
        timer.stop()
