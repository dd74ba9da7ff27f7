"""Tests for the QuantityFormatter facade."""

import pytest

from quantfmt import FormatterConfig, OutputBuffer, QuantityFormatter
from quantfmt.core.cascade import BINARY_TIERS, DECIMAL_TIERS


class TestQuantityFormatter:
    """Facade behavior with default and custom configuration."""

    def test_defaults(self, formatter):
        assert formatter.count_tiers is DECIMAL_TIERS
        assert formatter.memory_tiers is BINARY_TIERS
        assert formatter.count(123_456) == "123k"
        assert formatter.memory_size(1024) == "1.0 kB"
        assert formatter.float_value(50.567) == "50.57"
        assert formatter.time_delta(90_000_000, 0) == "none seen yet"

    def test_capacity_applies_to_all(self):
        fmt = QuantityFormatter(capacity=4)
        assert fmt.count(10**15) == "inf"
        assert fmt.memory_size(5 * 1024**3) == "5.0"
        assert fmt.float_value(500.12) == "500"
        assert fmt.time_delta(90_000_000, 0) == "non"

    def test_sentinel_off(self):
        fmt = QuantityFormatter(sentinel=False)
        assert fmt.time_delta(90_000_000, 0) == "1 days, 1 hrs, 0 min, 0 sec"

    def test_explicit_buffer(self, formatter, small_buffer):
        assert formatter.count(2_500_000, buf=small_buffer) == "2.50M"
        assert small_buffer.value == "2.50M"

    def test_explicit_buffer_overrides_capacity(self):
        """A caller-supplied buffer is written with its own capacity."""
        fmt = QuantityFormatter(capacity=4)
        buf = OutputBuffer(8)
        assert fmt.count(10**15, buf=buf) == "infty"
        assert fmt.count(10**15) == "inf"

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            QuantityFormatter(capacity=0)

    def test_from_config(self):
        fmt = QuantityFormatter.from_config(FormatterConfig(capacity=8, sentinel=False))
        assert fmt.config.capacity == 8
        assert fmt.time_delta(61_000, 0) == "0 days,"

    def test_from_yaml(self, config_file):
        fmt = QuantityFormatter.from_yaml(config_file)
        assert fmt.memory_size(1500) == "1.50 KB"
        assert fmt.memory_size(10**6) == "huge"
        assert fmt.count(12_345) == "12.3k"
        # capacity 16 truncates the delta, sentinel disabled
        assert fmt.time_delta(90_000_000, 0) == "1 days, 1 hrs, "

    def test_repeated_calls_share_no_state(self, formatter):
        buf_a, buf_b = OutputBuffer(8), OutputBuffer(8)
        assert formatter.count(99_949, buf=buf_a) == formatter.count(99_949, buf=buf_b) == "99.9k"
