"""Magnitude cascade: pick the first tier a value fits and render it.

Both built-in tables live here so the rounding limits are easy to audit.
Within each order of magnitude the tiers go two decimals, one decimal,
then whole numbers, with limits ``9.995``, ``99.95`` and ``1000``:

    9_994_999 -> "9.99M"   (9.994999 still rounds to 9.99)
    9_995_000 -> "10.0M"   (9.995 would round to "10.00", one digit too many)
"""

from __future__ import annotations

import logging
from typing import Optional

from quantfmt.core.buffer import OutputBuffer, emit
from quantfmt.core.models import Number, Representation, Tier, TierTable

logger = logging.getLogger(__name__)

_U = Representation.UNSIGNED
_F = Representation.FLOAT

# ─────────────────────────────────────────────────────────
# Decimal tiers (counts)
# ─────────────────────────────────────────────────────────

_K = 1000
_M = 1000 * 1000
_G = 1000 * 1000 * 1000
_T = 1000 * 1000 * 1000 * 1000

DECIMAL_TIERS = TierTable(
    name="decimal",
    tiers=(
        Tier(1, 10000, "{}", _U),            # 0 - 9999
        Tier(_K, 99.95, "{:.1f}k", _F),      # 10.0k - 99.9k
        Tier(_K, 1000, "{}k", _U),           # 100k - 999k
        Tier(_M, 9.995, "{:.2f}M", _F),      # 1.00M - 9.99M
        Tier(_M, 99.95, "{:.1f}M", _F),      # 10.0M - 99.9M
        Tier(_M, 1000, "{}M", _U),           # 100M - 999M
        Tier(_G, 9.995, "{:.2f}G", _F),      # 1.00G - 9.99G
        Tier(_G, 99.95, "{:.1f}G", _F),      # 10.0G - 99.9G
        Tier(_G, 1000, "{}G", _U),           # 100G - 999G
        Tier(_T, 9.995, "{:.2f}T", _F),      # 1.00T - 9.99T
        Tier(_T, 99.95, "{:.1f}T", _F),      # 10.0T - 99.9T
    ),
)

# ─────────────────────────────────────────────────────────
# Binary tiers (memory sizes)
# ─────────────────────────────────────────────────────────

_KIB = 1024
_MIB = 1024 * 1024
_GIB = 1024 * 1024 * 1024
_TIB = 1024 * 1024 * 1024 * 1024

BINARY_TIERS = TierTable(
    name="binary",
    tiers=(
        Tier(1, 1024, "{} B", _U),               # 0 - 1023 B
        Tier(_KIB, 99.95, "{:.1f} kB", _F),      # 1.0 kB - 99.9 kB
        Tier(_KIB, 1000, "{} kB", _U),           # 100 kB - 999 kB
        Tier(_MIB, 9.995, "{:.2f} MB", _F),      # 0.98 MB - 9.99 MB
        Tier(_MIB, 99.95, "{:.1f} MB", _F),      # 10.0 MB - 99.9 MB
        Tier(_MIB, 1000, "{} MB", _U),           # 100 MB - 999 MB
        Tier(_GIB, 9.995, "{:.2f} GB", _F),      # 0.98 GB - 9.99 GB
        Tier(_GIB, 99.95, "{:.1f} GB", _F),      # 10.0 GB - 99.9 GB
        Tier(_GIB, 1000, "{} GB", _U),           # 100 GB - 999 GB
        Tier(_TIB, 9.995, "{:.2f} TB", _F),      # 0.98 TB - 9.99 TB
        Tier(_TIB, 99.95, "{:.1f} TB", _F),      # 10.0 TB - 99.9 TB
    ),
)

BUILTIN_TABLES = {
    DECIMAL_TIERS.name: DECIMAL_TIERS,
    BINARY_TIERS.name: BINARY_TIERS,
}


def get_table(name: str) -> TierTable:
    """Look up a built-in tier table by name.

    Raises:
        KeyError: If no built-in table has that name.
    """
    try:
        return BUILTIN_TABLES[name.lower()]
    except KeyError:
        available = ", ".join(sorted(BUILTIN_TABLES))
        raise KeyError(
            f"Tier table '{name}' not found. Available tables: {available}"
        ) from None


def select_tier(value: Number, table: TierTable) -> Optional[Tier]:
    """Return the first tier ``value`` fits in, or None past the last tier."""
    for tier in table.tiers:
        if tier.matches(value):
            return tier
    return None


def describe(
    value: Number,
    table: TierTable = DECIMAL_TIERS,
    capacity: Optional[int] = None,
    buf: Optional[OutputBuffer] = None,
) -> str:
    """Render a non-negative value through a tier table.

    Args:
        value: Value to render. Must not be negative.
        table: Tiers to try, in order.
        capacity: Truncate the result to fit a buffer of this size.
        buf: Write the result into this buffer instead.

    Returns:
        The rendered text, or the table's overflow marker when the value is
        past every tier.
    """
    tier = select_tier(value, table)
    if tier is None:
        logger.debug("Value %s exceeds table '%s', using overflow marker", value, table.name)
        return emit(table.overflow, capacity, buf)
    return emit(tier.render(value), capacity, buf)
