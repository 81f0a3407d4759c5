"""
Tests for the weighted fruit bag.
"""

import dataclasses

import pytest
from collections import Counter

from fruit_picking.picking_core.config_loader import load_config
from fruit_picking.picking_core.fruit import Fruit, Quality, Size, Taste
from fruit_picking.picking_core.rng import FruitBag


@pytest.fixture
def config():
    return load_config()


def with_harvest(config, **changes):
    return dataclasses.replace(
        config, harvest=dataclasses.replace(config.harvest, **changes)
    )


class TestFruitBag:
    """Test weighted shuffle-bag dealing."""

    def test_deterministic_with_seed(self, config):
        """Same seed should produce same sequence."""
        b1 = FruitBag(config, seed=42)
        b2 = FruitBag(config, seed=42)

        seq1 = [b1.draw().as_tuple() for _ in range(100)]
        seq2 = [b2.draw().as_tuple() for _ in range(100)]

        assert seq1 == seq2

    def test_different_seeds_differ(self, config):
        """Different seeds should produce different sequences."""
        b1 = FruitBag(config, seed=42)
        b2 = FruitBag(config, seed=123)

        seq1 = [b1.draw().as_tuple() for _ in range(100)]
        seq2 = [b2.draw().as_tuple() for _ in range(100)]

        assert seq1 != seq2

    def test_draws_fresh_fruit(self, config):
        bag = FruitBag(config, seed=1)
        fruit = bag.draw()
        assert isinstance(fruit, Fruit)
        assert fruit is not bag.draw()

    def test_zero_weight_never_drawn(self, config):
        """Kinds with a zero weight do not appear."""
        config = with_harvest(config, quality_weights=(1, 0, 0))
        bag = FruitBag(config, seed=42)

        for _ in range(200):
            assert bag.draw().quality is Quality.HEALTHY

    def test_weighted_distribution(self, config):
        """Fruits should appear roughly according to weights."""
        config = with_harvest(config, taste_weights=(5, 1))
        bag = FruitBag(config, seed=42)

        counts = Counter(bag.draw().taste for _ in range(1200))

        assert counts[Taste.SOUR] > 0
        assert counts[Taste.SWEET] > counts[Taste.SOUR]

    def test_all_kinds_appear(self, config):
        bag = FruitBag(config, seed=42)
        kinds = {bag.draw().as_tuple() for _ in range(bag.bag_size * 5)}
        assert len(kinds) == len(Taste) * len(Size) * len(Quality)

    def test_bag_size(self, config):
        assert FruitBag(config, seed=1).bag_size == config.harvest.bag_size

        small = with_harvest(config, bag_size=4)
        assert FruitBag(small, seed=1).bag_size == 4

    def test_peek_does_not_consume(self, config):
        bag = FruitBag(config, seed=42)

        upcoming = bag.peek(3)
        drawn = [bag.draw() for _ in range(3)]

        assert upcoming == drawn

    def test_reset_restores_sequence(self, config):
        """Reset with same seed should restore sequence."""
        bag = FruitBag(config, seed=42)

        bag.reset(seed=7)
        first = [bag.draw().as_tuple() for _ in range(30)]
        bag.reset(seed=7)
        second = [bag.draw().as_tuple() for _ in range(30)]

        assert first == second

    def test_bag_exhaustion_refill(self, config):
        """Bag should refill when exhausted."""
        config = with_harvest(config, bag_size=5)
        bag = FruitBag(config, seed=42)

        drawn = [bag.draw() for _ in range(5 * 3)]
        assert len(drawn) == 15
