"""
Display
=======

Deterministic text rendering of fruits, pickers and rankings.

    [sweet large healthy]

    Alice:
    	[sweet large healthy]
    	[sour small rotten]

A ranking renders as its pickers one after another, best first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from fruit_picking.picking_core.config_loader import PickingConfig, get_config

if TYPE_CHECKING:
    from fruit_picking.picking_core.fruit import Fruit
    from fruit_picking.picking_core.picker import Picker
    from fruit_picking.picking_core.ranking import Ranking


def format_fruit(fruit: "Fruit", config: Optional[PickingConfig] = None) -> str:
    """
    Render one fruit as "[<taste> <size> <quality>]".

    Args:
        fruit: Fruit to render.
        config: Configuration with display labels. Uses default if None.
    """
    if config is None:
        config = get_config()
    display = config.display
    return "[{} {} {}]".format(
        display.label(fruit.taste),
        display.label(fruit.size),
        display.label(fruit.quality),
    )


def format_picker(picker: "Picker", config: Optional[PickingConfig] = None) -> str:
    """Render a picker's name followed by one tab-indented line per fruit."""
    if config is None:
        config = get_config()
    lines = [f"{picker.name}:\n"]
    for fruit in picker:
        lines.append(f"\t{format_fruit(fruit, config)}\n")
    return "".join(lines)


def format_ranking(ranking: "Ranking", config: Optional[PickingConfig] = None) -> str:
    """Render all pickers in ranking order. An empty ranking renders as ""."""
    if config is None:
        config = get_config()
    return "".join(format_picker(picker, config) for picker in ranking)
