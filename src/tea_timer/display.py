"""Human-readable rendering of elapsed durations."""

from datetime import timedelta
from typing import Union

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_MICRO = 1_000

def _to_nanos(duration: Union[int, timedelta]) -> int:
    if isinstance(duration, timedelta):
        # timedelta is exact to the microsecond
        return (
            (duration.days * 86_400 + duration.seconds) * NANOS_PER_SECOND
            + duration.microseconds * NANOS_PER_MICRO
        )
    return int(duration)

def format_duration(duration: Union[int, timedelta]) -> str:
    """Format an elapsed duration at the largest sensible unit.

    Args:
        duration: Elapsed time in nanoseconds, or a ``timedelta``

    Returns:
        String such as ``"2.00s"``, ``"12.34ms"``, ``"5.67µs"`` or ``"800ns"``
    """
    nanos = _to_nanos(duration)

    if nanos >= NANOS_PER_SECOND:
        return f"{nanos / NANOS_PER_SECOND:.2f}s"
    # Lower bounds are exclusive: exactly 1ms still reads as µs
    elif nanos > NANOS_PER_MILLI:
        return f"{nanos / NANOS_PER_MILLI:.2f}ms"
    elif nanos > NANOS_PER_MICRO:
        return f"{nanos / NANOS_PER_MICRO:.2f}µs"
    else:
        return f"{nanos}ns"
