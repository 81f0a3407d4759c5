"""
RNG - Weighted Fruit Bag
========================

Deals random fruit for the harvest harness with reduced variance through a
weighted shuffle-bag mechanism.
"""

from __future__ import annotations

import itertools
import random
from typing import List, Optional

from fruit_picking.picking_core.config_loader import PickingConfig, get_config
from fruit_picking.picking_core.fruit import Fruit, FruitTuple, Quality, Size, Taste


class FruitBag:
    """
    Weighted shuffle-bag of fruit kinds.

    A fruit kind is one (taste, size, quality) combination; its weight is the
    product of the configured per-attribute weights. The bag holds a weighted
    distribution of kinds and refills and reshuffles once exhausted.
    """

    def __init__(
        self,
        config: Optional[PickingConfig] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize fruit bag.

        Args:
            config: Picking configuration. Uses default if None.
            seed: Random seed for reproducibility. Random if None.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._rng = random.Random(seed)

        harvest = config.harvest
        self._kinds: List[FruitTuple] = []
        self._weights: List[int] = []
        for (taste, tw), (size, sw), (quality, qw) in itertools.product(
            zip(Taste, harvest.taste_weights),
            zip(Size, harvest.size_weights),
            zip(Quality, harvest.quality_weights),
        ):
            weight = tw * sw * qw
            if weight > 0:
                self._kinds.append((taste, size, quality))
                self._weights.append(weight)

        # Build bag template from weights
        self._bag_template: List[FruitTuple] = []
        for kind, weight in zip(self._kinds, self._weights):
            self._bag_template.extend([kind] * weight)

        # Adjust to target bag size
        target_size = harvest.bag_size
        if len(self._bag_template) < target_size:
            # Pad with weighted random selections
            while len(self._bag_template) < target_size:
                self._bag_template.append(self._weighted_choice())
        elif len(self._bag_template) > target_size:
            # Keep a random subset so every kind still has a chance
            self._bag_template = self._rng.sample(self._bag_template, target_size)

        # Current bag and position
        self._bag: List[FruitTuple] = []
        self._index: int = 0
        self._refill_bag()

    def _weighted_choice(self) -> FruitTuple:
        """Choose a random fruit kind weighted by config weights."""
        return self._rng.choices(self._kinds, weights=self._weights, k=1)[0]

    def _refill_bag(self) -> None:
        """Refill and shuffle the bag."""
        self._bag = self._bag_template.copy()
        self._rng.shuffle(self._bag)
        self._index = 0

    @property
    def bag_size(self) -> int:
        return len(self._bag_template)

    def draw(self) -> Fruit:
        """
        Take the next fruit out of the bag.

        Returns:
            A new Fruit. The bag refills once empty.
        """
        if self._index >= len(self._bag):
            self._refill_bag()
        kind = self._bag[self._index]
        self._index += 1
        return Fruit.from_tuple(kind)

    def peek(self, count: int = 2) -> List[Fruit]:
        """
        Peek at upcoming fruits without consuming them.

        Only fruits left in the current bag are returned, so fewer than
        `count` fruits may come back right before a refill.

        Args:
            count: Number of upcoming fruits to peek.

        Returns:
            List of upcoming fruits.
        """
        upcoming = self._bag[self._index:self._index + count]
        return [Fruit.from_tuple(kind) for kind in upcoming]

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Reset the bag with optional new seed.

        Args:
            seed: New random seed. Keeps current generator if None.
        """
        if seed is not None:
            self._rng = random.Random(seed)
        self._refill_bag()
