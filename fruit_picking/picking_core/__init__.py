"""
Picking Core - Fruit, pickers and rankings.

Main exports:
- Fruit, Taste, Size, Quality: the fruit value type and its attributes
- Picker: ordered fruit collection with spoilage and infestation rules
- Ranking: pickers kept sorted by the ranking law, mergeable
- PickingConfig: configuration loaded from picking_config.yaml
- FruitBag: seeded weighted shuffle-bag of random fruit
"""

from fruit_picking.picking_core.fruit import (
    Fruit,
    Taste,
    Size,
    Quality,
    YUMMY_ONE,
    ROTTY_ONE,
)
from fruit_picking.picking_core.picker import Picker, DEFAULT_PICKER_NAME
from fruit_picking.picking_core.ranking import Ranking
from fruit_picking.picking_core.config_loader import PickingConfig, load_config
from fruit_picking.picking_core.display import format_fruit, format_picker, format_ranking
from fruit_picking.picking_core.rng import FruitBag

__all__ = [
    "Fruit",
    "Taste",
    "Size",
    "Quality",
    "YUMMY_ONE",
    "ROTTY_ONE",
    "Picker",
    "DEFAULT_PICKER_NAME",
    "Ranking",
    "PickingConfig",
    "load_config",
    "format_fruit",
    "format_picker",
    "format_ranking",
    "FruitBag",
]
