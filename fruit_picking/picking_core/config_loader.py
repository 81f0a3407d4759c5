"""
Configuration Loader
====================

Loads and validates picking_config.yaml, providing typed access to all
parameters.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Tuple, Type

import yaml

from fruit_picking.picking_core.fruit import Quality, Size, Taste


@dataclass(frozen=True)
class DisplayConfig:
    """Text labels for every fruit attribute value."""
    taste_labels: Tuple[Tuple[Taste, str], ...]
    size_labels: Tuple[Tuple[Size, str], ...]
    quality_labels: Tuple[Tuple[Quality, str], ...]

    def label(self, value: Enum) -> str:
        """Label of a Taste, Size or Quality member."""
        if isinstance(value, Taste):
            labels = self.taste_labels
        elif isinstance(value, Size):
            labels = self.size_labels
        elif isinstance(value, Quality):
            labels = self.quality_labels
        else:
            raise TypeError(f"No display label for {value!r}")
        return dict(labels)[value]


@dataclass(frozen=True)
class HarvestConfig:
    """Random harvest harness parameters."""
    pickers: int
    fruits: int
    trades: int
    bag_size: int
    taste_weights: Tuple[int, ...]     # One weight per Taste member
    size_weights: Tuple[int, ...]      # One weight per Size member
    quality_weights: Tuple[int, ...]   # One weight per Quality member


@dataclass(frozen=True)
class PickingConfig:
    """
    Complete configuration loaded from YAML.

    All values are immutable to prevent accidental modification during runtime.
    """
    display: DisplayConfig
    harvest: HarvestConfig


def _parse_labels(
    labels_data: Dict[str, str],
    enum_type: Type[Enum]
) -> Tuple[Tuple[Enum, str], ...]:
    """Parse a {MEMBER_NAME: label} mapping for one enumeration."""
    labels = []
    for member_name, label in labels_data.items():
        try:
            member = enum_type[member_name]
        except KeyError:
            raise ValueError(
                f"Unknown {enum_type.__name__} member in display labels: {member_name}"
            ) from None
        if not isinstance(label, str):
            raise ValueError(
                f"Display label for {enum_type.__name__}.{member_name} must be a string, "
                f"got {label!r}"
            )
        labels.append((member, label))
    return tuple(labels)


def _parse_weights(weights_data) -> Tuple[int, ...]:
    """Parse a weight list from YAML."""
    return tuple(int(w) for w in weights_data)


def _validate_config(config: PickingConfig) -> None:
    """Validate configuration consistency."""
    display = config.display
    for enum_type, labels in (
        (Taste, display.taste_labels),
        (Size, display.size_labels),
        (Quality, display.quality_labels),
    ):
        labelled = dict(labels)
        for member in enum_type:
            if not labelled.get(member):
                raise ValueError(
                    f"Missing display label for {enum_type.__name__}.{member.name}"
                )

    harvest = config.harvest
    for field_name in ("pickers", "fruits", "bag_size"):
        value = getattr(harvest, field_name)
        if value <= 0:
            raise ValueError(f"harvest.{field_name} must be positive, got {value}")
    if harvest.trades < 0:
        raise ValueError(f"harvest.trades must not be negative, got {harvest.trades}")

    for enum_type, weights, field_name in (
        (Taste, harvest.taste_weights, "taste_weights"),
        (Size, harvest.size_weights, "size_weights"),
        (Quality, harvest.quality_weights, "quality_weights"),
    ):
        if len(weights) != len(enum_type):
            raise ValueError(
                f"harvest.{field_name} length ({len(weights)}) must match "
                f"{enum_type.__name__} member count ({len(enum_type)})"
            )
        if any(w < 0 for w in weights) or sum(weights) <= 0:
            raise ValueError(
                f"harvest.{field_name} must be non-negative with a positive sum, got {weights}"
            )


def load_config(config_path: Optional[str] = None) -> PickingConfig:
    """
    Load and validate picking configuration from YAML.

    Args:
        config_path: Path to picking_config.yaml. If None, uses default location.

    Returns:
        Validated PickingConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "picking_config.yaml"
        )

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    display_data = raw["display"]
    display = DisplayConfig(
        taste_labels=_parse_labels(display_data["taste"], Taste),
        size_labels=_parse_labels(display_data["size"], Size),
        quality_labels=_parse_labels(display_data["quality"], Quality)
    )

    harvest_data = raw["harvest"]
    harvest = HarvestConfig(
        pickers=int(harvest_data["pickers"]),
        fruits=int(harvest_data["fruits"]),
        trades=int(harvest_data.get("trades", 0)),
        bag_size=int(harvest_data["bag_size"]),
        taste_weights=_parse_weights(harvest_data.get("taste_weights", [1] * len(Taste))),
        size_weights=_parse_weights(harvest_data.get("size_weights", [1] * len(Size))),
        quality_weights=_parse_weights(harvest_data.get("quality_weights", [1] * len(Quality)))
    )

    config = PickingConfig(display=display, harvest=harvest)

    _validate_config(config)
    return config


# Module-level singleton for convenience
_cached_config: Optional[PickingConfig] = None


def get_config() -> PickingConfig:
    """Get the cached picking configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> PickingConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config
