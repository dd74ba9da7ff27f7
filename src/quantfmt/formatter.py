"""High-level QuantityFormatter API for quantfmt.

Bundles a FormatterConfig with the module-level formatting helpers so a
status display can format all of its fields with one set of choices.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from quantfmt.core.buffer import OutputBuffer
from quantfmt.core.cascade import BINARY_TIERS, DECIMAL_TIERS
from quantfmt.core.models import FormatterConfig, TierTable
from quantfmt.loader import load_config
from quantfmt.utils.formatting import (
    format_count,
    format_float,
    format_memory_size,
    format_time_delta,
)


class QuantityFormatter:
    """Format counts, sizes, floats and time deltas for display.

    Args:
        capacity: Truncate every result to fit a buffer of this size.
            None leaves results untruncated. A ``buf`` passed to a method
            takes precedence, and that buffer's own capacity applies.
        count_tiers: Tier table for counts. Defaults to the decimal table.
        memory_tiers: Tier table for byte sizes. Defaults to the binary table.
        sentinel: Render ``'none seen yet'`` for a zero event time.

    Example:
        >>> fmt = QuantityFormatter(capacity=16)
        >>> fmt.count(123_456)
        '123k'
        >>> fmt.memory_size(3 * 1024**2)
        '3.00 MB'
    """

    def __init__(
        self,
        capacity: Optional[int] = None,
        count_tiers: Optional[TierTable] = None,
        memory_tiers: Optional[TierTable] = None,
        sentinel: bool = True,
    ) -> None:
        if capacity is not None and capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.config = FormatterConfig(
            capacity=capacity,
            count_tiers=count_tiers,
            memory_tiers=memory_tiers,
            sentinel=sentinel,
        )

    @classmethod
    def from_config(cls, config: FormatterConfig) -> "QuantityFormatter":
        return cls(
            capacity=config.capacity,
            count_tiers=config.count_tiers,
            memory_tiers=config.memory_tiers,
            sentinel=config.sentinel,
        )

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "QuantityFormatter":
        """Build a formatter from a YAML config file."""
        return cls.from_config(load_config(path))

    @property
    def count_tiers(self) -> TierTable:
        return self.config.count_tiers or DECIMAL_TIERS

    @property
    def memory_tiers(self) -> TierTable:
        return self.config.memory_tiers or BINARY_TIERS

    def count(self, value: int, buf: Optional[OutputBuffer] = None) -> str:
        return format_count(value, self.config.capacity, buf=buf, tiers=self.count_tiers)

    def memory_size(self, value: int, buf: Optional[OutputBuffer] = None) -> str:
        return format_memory_size(value, self.config.capacity, buf=buf, tiers=self.memory_tiers)

    def float_value(self, value: float, buf: Optional[OutputBuffer] = None) -> str:
        return format_float(value, self.config.capacity, buf=buf, tiers=self.count_tiers)

    def time_delta(self, current_ms: int, event_ms: int, buf: Optional[OutputBuffer] = None) -> str:
        return format_time_delta(
            current_ms, event_ms, self.config.capacity, buf=buf, sentinel=self.config.sentinel
        )
