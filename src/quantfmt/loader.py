"""Load formatter configuration and custom tier tables from YAML files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import yaml

from quantfmt.core.cascade import get_table
from quantfmt.core.models import (
    OVERFLOW_MARKER,
    FormatterConfig,
    Representation,
    Tier,
    TierTable,
)

logger = logging.getLogger(__name__)

_CONFIG_KEYS = {"capacity", "sentinel", "count_tiers", "memory_tiers"}


def _load_yaml(path: Union[str, Path]) -> dict:
    """Load a YAML mapping from ``path``."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")
    return data


def parse_tier(spec: dict) -> Tier:
    """Build a Tier from a mapping with divisor, limit, format, representation."""
    try:
        divisor = spec["divisor"]
        limit = spec["limit"]
        fmt = spec["format"]
    except KeyError as e:
        raise ValueError(f"Tier is missing required key {e.args[0]!r}: {spec}") from None

    if isinstance(divisor, bool) or not isinstance(divisor, int) or divisor < 1:
        raise ValueError(f"Tier divisor must be a positive integer, got {divisor!r}")
    if isinstance(limit, bool) or not isinstance(limit, (int, float)) or limit <= 0:
        raise ValueError(f"Tier limit must be a positive number, got {limit!r}")

    try:
        representation = Representation(spec.get("representation", "unsigned"))
    except ValueError:
        choices = ", ".join(r.value for r in Representation)
        raise ValueError(
            f"Unknown representation {spec.get('representation')!r}, expected one of: {choices}"
        ) from None

    try:
        return Tier(divisor=divisor, limit=limit, fmt=str(fmt), representation=representation)
    except ValueError as e:
        raise ValueError(f"Invalid tier {spec}: {e}") from None


def parse_tier_table(spec: Union[str, dict], name: str = "custom") -> TierTable:
    """Build a TierTable from a built-in table name or a mapping.

    Args:
        spec: Either ``'decimal'``/``'binary'`` or a mapping with ``tiers``
            (a list of tier mappings) and an optional ``overflow`` marker.
        name: Name given to a table built from a mapping.
    """
    if isinstance(spec, str):
        return get_table(spec)
    if not isinstance(spec, dict) or not isinstance(spec.get("tiers"), list):
        raise ValueError(f"Tier table '{name}' must be a table name or a mapping with a 'tiers' list")

    tiers = tuple(parse_tier(t) for t in spec["tiers"])
    return TierTable(
        name=str(spec.get("name", name)),
        tiers=tiers,
        overflow=str(spec.get("overflow", OVERFLOW_MARKER)),
    )


def load_tier_table(path: Union[str, Path]) -> TierTable:
    """Load a single tier table from a YAML file."""
    data = _load_yaml(path)
    table = parse_tier_table(data, name=Path(path).stem)
    logger.debug("Loaded tier table '%s' with %d tiers from %s", table.name, len(table.tiers), path)
    return table


def load_config(path: Optional[Union[str, Path]] = None) -> FormatterConfig:
    """Load a FormatterConfig from YAML.

    Returns the default configuration when ``path`` is None. Unknown keys are
    ignored with a warning.
    """
    if path is None:
        return FormatterConfig()

    data = _load_yaml(path)
    for key in data:
        if key not in _CONFIG_KEYS:
            logger.warning("Config warning: unknown key '%s' in %s ignored.", key, path)

    capacity = data.get("capacity")
    if capacity is not None and (isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1):
        raise ValueError(f"capacity must be a positive integer, got {capacity!r}")

    sentinel = data.get("sentinel", True)
    if not isinstance(sentinel, bool):
        raise ValueError(f"sentinel must be true or false, got {sentinel!r}")

    config = FormatterConfig(
        capacity=capacity,
        count_tiers=parse_tier_table(data["count_tiers"], "count") if "count_tiers" in data else None,
        memory_tiers=parse_tier_table(data["memory_tiers"], "memory") if "memory_tiers" in data else None,
        sentinel=sentinel,
    )
    logger.debug("Loaded formatter config from %s: %s", path, config)
    return config
