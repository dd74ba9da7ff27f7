"""Shared test fixtures."""

import pytest
from quantfmt import OutputBuffer, QuantityFormatter


@pytest.fixture
def formatter():
    """Formatter with default tables and no truncation."""
    return QuantityFormatter()


@pytest.fixture
def small_buffer():
    """Buffer sized for a single cascade result."""
    return OutputBuffer(6)


@pytest.fixture
def si_bytes_yaml():
    """YAML text for a 1000-based byte table with a custom overflow marker."""
    return """\
name: si-bytes
overflow: huge
tiers:
  - {divisor: 1, limit: 1000, format: "{} B", representation: unsigned}
  - {divisor: 1000, limit: 9.995, format: "{:.2f} KB", representation: float}
  - {divisor: 1000, limit: 1000, format: "{} KB", representation: unsigned}
"""


@pytest.fixture
def config_file(tmp_path, si_bytes_yaml):
    """Config file with a capacity, the sentinel disabled and a custom memory table."""
    table = "\n".join("  " + line for line in si_bytes_yaml.splitlines())
    path = tmp_path / "quantfmt.yaml"
    path.write_text(f"capacity: 16\nsentinel: false\ncount_tiers: decimal\nmemory_tiers:\n{table}\n")
    return path
