"""Formatting helpers for counts, sizes, floats and time deltas.

Every helper returns a short display string. Pass ``capacity`` to truncate
the result as a fixed-size buffer would, or ``buf`` to write into an
existing :class:`~quantfmt.core.buffer.OutputBuffer`.
"""

from __future__ import annotations

import math
from typing import Optional

from quantfmt.core.buffer import OutputBuffer, emit
from quantfmt.core.cascade import BINARY_TIERS, DECIMAL_TIERS, describe
from quantfmt.core.models import TierTable, TimeDelta

NONE_SEEN_YET = "none seen yet"


def _check_int(value: int, name: str = "value") -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def format_count(
    value: int,
    capacity: Optional[int] = None,
    *,
    buf: Optional[OutputBuffer] = None,
    tiers: TierTable = DECIMAL_TIERS,
) -> str:
    """Format an unscaled count with k/M/G/T suffixes.

    Examples:
        9_999 → '9999'
        12_345 → '12.3k'
        999_500_000 → '999M'
        10**15 → 'infty'
    """
    _check_int(value)
    return describe(value, tiers, capacity, buf)


def format_memory_size(
    value: int,
    capacity: Optional[int] = None,
    *,
    buf: Optional[OutputBuffer] = None,
    tiers: TierTable = BINARY_TIERS,
) -> str:
    """Format a byte count with B/kB/MB/GB/TB units (1024-based).

    Examples:
        1023 → '1023 B'
        1024 → '1.0 kB'
        5 * 1024**3 → '5.00 GB'
    """
    _check_int(value)
    return describe(value, tiers, capacity, buf)


def format_float(
    value: float,
    capacity: Optional[int] = None,
    *,
    buf: Optional[OutputBuffer] = None,
    tiers: TierTable = DECIMAL_TIERS,
) -> str:
    """Format a float with two decimals, one decimal, or as a count.

    Examples:
        50.567 → '50.57'
        500.12 → '500.1'
        2_000_000.0 → '2.00M'
    """
    if isinstance(value, bool) or math.isnan(value) or value < 0:
        raise ValueError(f"value must be a non-negative number, got {value!r}")
    if value < 99.995:
        return emit(f"{value:.2f}", capacity, buf)
    elif value < 999.95:
        return emit(f"{value:.1f}", capacity, buf)
    # Truncate like an unsigned cast; infinity goes straight to the overflow marker
    whole = value if math.isinf(value) else int(value)
    return describe(whole, tiers, capacity, buf)


def format_time_delta(
    current_ms: int,
    event_ms: int,
    capacity: Optional[int] = None,
    *,
    buf: Optional[OutputBuffer] = None,
    sentinel: bool = True,
) -> str:
    """Describe the time elapsed since an event.

    An ``event_ms`` of zero means the event never happened and renders as
    ``'none seen yet'``. With ``sentinel=False`` that case is rendered as the
    time since zero instead.

    Examples:
        (90_000_000, 0) → 'none seen yet'
        (90_000_000, 0, sentinel=False) → '1 days, 1 hrs, 0 min, 0 sec'
        (100_000, 40_000) → '0 days, 0 hrs, 1 min, 0 sec'

    Raises:
        ValueError: If either time is negative or ``current_ms`` precedes
            ``event_ms``.
    """
    _check_int(current_ms, "current_ms")
    _check_int(event_ms, "event_ms")

    if event_ms == 0 and sentinel:
        return emit(NONE_SEEN_YET, capacity, buf)
    if current_ms < event_ms:
        raise ValueError(
            f"current_ms ({current_ms}) must not precede event_ms ({event_ms})"
        )

    delta = TimeDelta.from_millis(current_ms - event_ms)
    days = format_count(delta.days)
    text = f"{days} days, {delta.hours} hrs, {delta.minutes} min, {delta.seconds} sec"
    return emit(text, capacity, buf)
