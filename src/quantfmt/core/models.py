"""Data models for quantfmt tier tables and configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

Number = Union[int, float]

OVERFLOW_MARKER = "infty"


class Representation(str, Enum):
    """How a value is divided by a tier's divisor before rendering."""
    UNSIGNED = "unsigned"  # integer division, fractional part dropped
    FLOAT = "float"        # floating division


@dataclass(frozen=True)
class Tier:
    """A single magnitude tier.

    A value belongs to the tier when ``value < divisor * limit``. The limit
    is the rounding limit multiplier: ``9.995`` rather than ``10`` for a
    two-decimal format, so values that would round up to an extra digit are
    pushed to the next tier instead.
    """
    divisor: int
    limit: Number
    fmt: str
    representation: Representation = Representation.UNSIGNED

    def __post_init__(self) -> None:
        if self.divisor < 1:
            raise ValueError(f"Tier divisor must be at least 1, got {self.divisor}")
        if not self.fmt.isascii():
            raise ValueError(f"Tier format must be ASCII, got {self.fmt!r}")
        try:
            self.render(0)
        except (IndexError, KeyError, ValueError) as e:
            raise ValueError(f"Tier format {self.fmt!r} cannot render a value: {e}") from None

    @property
    def threshold(self) -> Number:
        return self.divisor * self.limit

    def matches(self, value: Number) -> bool:
        return value < self.threshold

    def render(self, value: Number) -> str:
        """Render ``value`` scaled by this tier's divisor."""
        if self.representation is Representation.UNSIGNED:
            return self.fmt.format(int(value) // self.divisor)
        return self.fmt.format(float(value) / self.divisor)


@dataclass(frozen=True)
class TierTable:
    """Ordered tiers, tried in ascending order; the first match wins."""
    name: str
    tiers: Tuple[Tier, ...]
    overflow: str = OVERFLOW_MARKER

    def __post_init__(self) -> None:
        if not self.tiers:
            raise ValueError(f"Tier table '{self.name}' has no tiers")
        if not self.overflow.isascii():
            raise ValueError(f"Tier table '{self.name}' overflow marker must be ASCII, got {self.overflow!r}")
        thresholds = [t.threshold for t in self.tiers]
        for lower, upper in zip(thresholds, thresholds[1:]):
            if not lower < upper:
                raise ValueError(
                    f"Tier table '{self.name}' thresholds must strictly ascend, "
                    f"got {lower} followed by {upper}"
                )

    @property
    def ceiling(self) -> Number:
        """Smallest value rendered as the overflow marker."""
        return self.tiers[-1].threshold


@dataclass
class TimeDelta:
    """A millisecond duration broken into display fields."""
    days: int
    hours: int
    minutes: int
    seconds: int

    @classmethod
    def from_millis(cls, delta_ms: int) -> "TimeDelta":
        total_seconds = delta_ms // 1000
        return cls(
            days=delta_ms // 86_400_000,
            hours=(total_seconds // 3600) % 24,
            minutes=(total_seconds // 60) % 60,
            seconds=total_seconds % 60,
        )


@dataclass
class FormatterConfig:
    """User-provided formatter configuration."""
    capacity: Optional[int] = None
    count_tiers: Optional[TierTable] = None
    memory_tiers: Optional[TierTable] = None
    # Render "none seen yet" when the event time is zero
    sentinel: bool = True
