"""quantfmt — Short, human-readable display strings for raw measurements.

Quick start:
    >>> from quantfmt import format_count, format_memory_size
    >>> format_count(123_456)
    '123k'
    >>> format_memory_size(5 * 1024**3)
    '5.00 GB'
"""

from quantfmt.core.buffer import OutputBuffer
from quantfmt.core.cascade import BINARY_TIERS, DECIMAL_TIERS, describe, get_table
from quantfmt.core.models import (
    FormatterConfig,
    Representation,
    Tier,
    TierTable,
    TimeDelta,
)
from quantfmt.formatter import QuantityFormatter
from quantfmt.loader import load_config, load_tier_table
from quantfmt.utils.formatting import (
    NONE_SEEN_YET,
    format_count,
    format_float,
    format_memory_size,
    format_time_delta,
)

__version__ = "0.1.0"

__all__ = [
    # Formatters
    "format_count",
    "format_memory_size",
    "format_float",
    "format_time_delta",
    "NONE_SEEN_YET",
    # Main API
    "QuantityFormatter",
    "OutputBuffer",
    # Cascade engine
    "describe",
    "get_table",
    "DECIMAL_TIERS",
    "BINARY_TIERS",
    # Data models
    "Tier",
    "TierTable",
    "TimeDelta",
    "Representation",
    "FormatterConfig",
    # Loaders
    "load_config",
    "load_tier_table",
]
