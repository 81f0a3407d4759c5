"""
Tests for picker equality and the ranking law.
"""

import pytest

from fruit_picking.picking_core.fruit import (
    Fruit,
    Taste,
    Size,
    Quality,
    YUMMY_ONE,
    ROTTY_ONE,
)
from fruit_picking.picking_core.picker import Picker


def make_picker(name, *fruits):
    picker = Picker(name)
    for fruit in fruits:
        picker.append(fruit)
    return picker


class TestPickerEquality:
    """Equality is name plus ordered fruit sequence."""

    def test_same_name_same_fruits(self):
        assert make_picker("Arnold", YUMMY_ONE, ROTTY_ONE) == make_picker("Arnold", YUMMY_ONE, ROTTY_ONE)

    def test_order_matters(self):
        """Same fruits in a different order are not equal."""
        first = make_picker("Arnold", YUMMY_ONE, ROTTY_ONE)
        second = make_picker("Arnold", ROTTY_ONE, YUMMY_ONE)
        assert first != second

    def test_name_matters(self):
        assert make_picker("Eq", YUMMY_ONE) != make_picker("Other", YUMMY_ONE)

    def test_length_matters(self):
        assert make_picker("Eq", YUMMY_ONE) != make_picker("Eq", YUMMY_ONE, ROTTY_ONE)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Picker("Alice"))


class TestRankingLaw:
    """Each key decides only when all earlier keys tie."""

    def test_healthy_count_first(self):
        """More healthy fruit wins regardless of everything else."""
        healthy = make_picker("A", Fruit(Taste.SOUR, Size.SMALL, Quality.HEALTHY))
        rich = make_picker(
            "B",
            Fruit(Taste.SWEET, Size.LARGE, Quality.ROTTEN),
            Fruit(Taste.SWEET, Size.LARGE, Quality.ROTTEN),
            Fruit(Taste.SWEET, Size.LARGE, Quality.ROTTEN),
        )
        assert healthy < rich
        assert rich > healthy
        assert healthy.compare(rich) == -1
        assert rich.compare(healthy) == 1

    def test_sweet_count_second(self):
        sweet = make_picker("A", Fruit(Taste.SWEET, Size.SMALL, Quality.HEALTHY))
        sour = make_picker("B", Fruit(Taste.SOUR, Size.LARGE, Quality.HEALTHY))
        assert sweet < sour

    def test_large_count_third(self):
        large = make_picker("A", Fruit(Taste.SOUR, Size.LARGE, Quality.HEALTHY))
        medium = make_picker("B", Fruit(Taste.SOUR, Size.MEDIUM, Quality.HEALTHY))
        assert large < medium

    def test_medium_count_fourth(self):
        medium = make_picker("A", Fruit(Taste.SOUR, Size.MEDIUM, Quality.HEALTHY))
        small = make_picker("B", Fruit(Taste.SOUR, Size.SMALL, Quality.HEALTHY))
        assert medium < small

    def test_small_count_fifth(self):
        two_small = make_picker(
            "A",
            Fruit(Taste.SOUR, Size.SMALL, Quality.HEALTHY),
            Fruit(Taste.SOUR, Size.SMALL, Quality.WORMY),
        )
        one_small = make_picker("B", Fruit(Taste.SOUR, Size.SMALL, Quality.HEALTHY))
        assert two_small < one_small

    def test_rank_counts(self):
        picker = make_picker("A", YUMMY_ONE, YUMMY_ONE, ROTTY_ONE)
        assert picker.rank_counts() == (1, 2, 2, 0, 1, 3)
        assert picker.rank_key() == (-1, -2, -2, 0, -1, -3)

    def test_step_by_step_tie_breaks(self):
        """Comparison follows each change to either picker."""
        a = make_picker("A", YUMMY_ONE)
        b = make_picker("B", YUMMY_ONE)
        assert a.compare(b) == 0

        a += Fruit(Taste.SOUR, Size.LARGE, Quality.ROTTEN)
        assert a > b

        b += Fruit(Taste.SOUR, Size.SMALL, Quality.ROTTEN)
        assert a < b

        a += Fruit(Taste.SWEET, Size.SMALL, Quality.ROTTEN)
        assert a < b

        b += Fruit(Taste.SWEET, Size.LARGE, Quality.ROTTEN)
        a += Fruit(Taste.SWEET, Size.MEDIUM, Quality.ROTTEN)
        assert a < b

    def test_equivalent_but_not_equal(self):
        """Ranking ignores names and fruit order."""
        arnold = make_picker("Arnold", YUMMY_ONE)
        sylvester = make_picker("Sylvester", YUMMY_ONE)

        assert arnold.compare(sylvester) == 0
        assert arnold != sylvester
        assert arnold <= sylvester
        assert arnold >= sylvester
        assert not arnold < sylvester
        assert not arnold > sylvester

    def test_empty_pickers_equivalent(self):
        assert Picker("A").compare(Picker("B")) == 0

    def test_mixed_comparisons(self):
        """Pickers from a trading sequence compare as expected."""
        p1 = make_picker(
            "Alice",
            YUMMY_ONE,
            YUMMY_ONE,
            ROTTY_ONE,
            Fruit(Taste.SWEET, Size.MEDIUM, Quality.WORMY),
            Fruit(Taste.SOUR, Size.LARGE, Quality.HEALTHY),
        )
        p2 = make_picker("Bob", Fruit(Taste.SOUR, Size.LARGE, Quality.HEALTHY))
        p2 += p1
        p3 = Picker("Carol")
        p1 -= p3

        assert p2 < p3
        assert p2 <= p3
        assert p2 != p3
        assert p3 > p1
        assert p3 >= p1

    def test_compare_with_non_picker(self):
        with pytest.raises(TypeError):
            Picker("A") < 1
