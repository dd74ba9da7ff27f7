"""Tests for the magnitude cascade engine and tier tables."""

import pytest

from quantfmt.core.cascade import (
    BINARY_TIERS,
    DECIMAL_TIERS,
    describe,
    get_table,
    select_tier,
)
from quantfmt.core.models import Representation, Tier, TierTable


class TestTier:
    """Single tier behavior."""

    def test_threshold_uses_limit_multiplier(self):
        tier = Tier(1000 * 1000, 9.995, "{:.2f}M", Representation.FLOAT)
        assert tier.threshold == 9_995_000.0
        assert tier.matches(9_994_999)
        assert not tier.matches(9_995_000)

    def test_unsigned_render_truncates(self):
        """Integer tiers drop the fractional part instead of rounding."""
        tier = Tier(1000, 1000, "{}k", Representation.UNSIGNED)
        assert tier.render(999_999) == "999k"

    def test_float_render_rounds(self):
        tier = Tier(1000, 99.95, "{:.1f}k", Representation.FLOAT)
        assert tier.render(12_345) == "12.3k"
        assert tier.render(12_351) == "12.4k"

    def test_non_ascii_format_rejected(self):
        """Formats must fit byte-sized buffers one character per byte."""
        with pytest.raises(ValueError, match="ASCII"):
            Tier(1, 10, "{} \u00b5s")

    @pytest.mark.parametrize("fmt", ["{}{}", "{x}", "{", "{:d}"])
    def test_unrenderable_format_rejected(self, fmt):
        with pytest.raises(ValueError, match="cannot render"):
            Tier(1, 10, fmt, Representation.FLOAT)

    def test_zero_divisor_rejected(self):
        with pytest.raises(ValueError, match="divisor"):
            Tier(0, 10, "{}")


class TestTierTable:
    """Tier table validation."""

    def test_empty_table_rejected(self):
        with pytest.raises(ValueError, match="no tiers"):
            TierTable(name="empty", tiers=())

    def test_non_ascii_overflow_rejected(self):
        with pytest.raises(ValueError, match="ASCII"):
            TierTable(name="u", tiers=(Tier(1, 10, "{} us"),), overflow="\u221e")

    def test_descending_thresholds_rejected(self):
        with pytest.raises(ValueError, match="strictly ascend"):
            TierTable(
                name="bad",
                tiers=(Tier(1000, 1000, "{}k"), Tier(1, 10, "{}")),
            )

    def test_builtin_tables_ascend(self):
        for table in (DECIMAL_TIERS, BINARY_TIERS):
            thresholds = [t.threshold for t in table.tiers]
            assert thresholds == sorted(thresholds)
            assert len(set(thresholds)) == len(thresholds)

    def test_rounding_limits_are_not_round_numbers(self):
        limits = {t.limit for t in DECIMAL_TIERS.tiers}
        assert {9.995, 99.95}.issubset(limits)
        assert 10 not in limits and 100 not in limits

    def test_decimal_ceiling(self):
        assert DECIMAL_TIERS.ceiling == 1000**4 * 99.95

    def test_get_table_by_name(self):
        assert get_table("decimal") is DECIMAL_TIERS
        assert get_table("BINARY") is BINARY_TIERS

    def test_get_unknown_table(self):
        with pytest.raises(KeyError, match="Available tables"):
            get_table("octal")


class TestDescribe:
    """Cascade selection and rendering."""

    def test_first_matching_tier_wins(self):
        """A value is rendered by the first tier it fits, not the tightest."""
        table = TierTable(
            name="two",
            tiers=(Tier(1, 100, "small {}"), Tier(1, 1000, "big {}")),
        )
        assert describe(50, table) == "small 50"
        assert describe(500, table) == "big 500"

    def test_overflow_marker(self):
        assert describe(10**15) == "infty"
        assert select_tier(10**15, DECIMAL_TIERS) is None

    def test_custom_overflow_marker(self):
        table = TierTable(name="tiny", tiers=(Tier(1, 10, "{}"),), overflow="lots")
        assert describe(10, table) == "lots"

    def test_values_beyond_64_bits(self):
        assert describe(2**70) == "infty"
        assert describe(2**70, BINARY_TIERS) == "infty"

    def test_float_input(self):
        assert describe(12_345.0) == "12.3k"
        assert describe(float("inf")) == "infty"

    def test_capacity_truncates(self):
        assert describe(10**15, capacity=3) == "in"
