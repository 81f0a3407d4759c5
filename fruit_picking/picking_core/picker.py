"""
Picker
======

A fruit picker: the ordered sequence of fruits one person collected, and the
rules applied every time a fruit lands in it.

Every append runs two rules, in order:

1. Contact spoilage. The new fruit and the one picked just before it are
   compared. If one is rotten and the other healthy, the healthy one rots.
   Only that single pair is examined.
2. Worm infestation. If the new fruit is wormy, every healthy sweet fruit
   picked after the previous wormy fruit (or since the start) becomes wormy.
   The new fruit then becomes the boundary for the next infestation.

Fruit can move between pickers. The donor loses its oldest fruit and only
shifts its infestation boundary; the receiver appends the fruit through the
full pipeline above.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Iterator, Optional, Tuple, Union

from fruit_picking.picking_core.fruit import Fruit, Quality, Size, Taste

logger = logging.getLogger(__name__)

DEFAULT_PICKER_NAME = "Anonymous"

# Ordering key: (healthy, sweet, large, medium, small, total)
RankKey = Tuple[int, int, int, int, int, int]


class Picker:
    """
    Ordered collection of picked fruit.

    Equality is structural (same name, same fruits in the same order).
    Ordering follows the ranking law instead: a picker that sorts first has
    more healthy fruit, then more sweet fruit, then more large, medium and
    small fruit, then more fruit overall. Two pickers can therefore be
    equivalent for ranking purposes while not being equal.
    """

    __hash__ = None

    def __init__(self, name: str = DEFAULT_PICKER_NAME):
        """
        Create an empty picker.

        Args:
            name: Display name. Empty names become DEFAULT_PICKER_NAME.
        """
        self._name: str = name if name else DEFAULT_PICKER_NAME
        self._fruits: Deque[Fruit] = deque()
        # Index of the last wormy fruit appended, None if there is none
        self._last_wormy_index: Optional[int] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def fruits(self) -> Tuple[Fruit, ...]:
        """Snapshot of the fruits in picking order."""
        return tuple(self._fruits)

    @property
    def last_wormy_index(self) -> Optional[int]:
        """Boundary of the next infestation window (None: from the start)."""
        return self._last_wormy_index

    def count_fruits(self) -> int:
        return len(self._fruits)

    def count_taste(self, taste: Taste) -> int:
        return sum(1 for fruit in self._fruits if fruit.taste is taste)

    def count_size(self, size: Size) -> int:
        return sum(1 for fruit in self._fruits if fruit.size is size)

    def count_quality(self, quality: Quality) -> int:
        return sum(1 for fruit in self._fruits if fruit.quality is quality)

    # ------------------------------------------------------------------
    # Picking
    # ------------------------------------------------------------------

    def append(self, fruit: Fruit) -> None:
        """
        Pick a fruit.

        A copy of the fruit is stored, then contact spoilage and worm
        infestation are applied.

        Args:
            fruit: The fruit to add at the end of the sequence.
        """
        if not isinstance(fruit, Fruit):
            raise TypeError(f"Can only pick a Fruit, got {type(fruit).__name__}")

        self._fruits.append(fruit.copy())
        self._spoil_last_pair()
        self._spread_worms()

    def _spoil_last_pair(self) -> None:
        if len(self._fruits) < 2:
            return

        last = self._fruits[-1]
        previous = self._fruits[-2]

        if last.quality is Quality.ROTTEN and previous.is_healthy:
            previous.go_rotten()
            logger.debug("%s: fruit %d rotted from contact", self._name, len(self._fruits) - 2)
        elif last.is_healthy and previous.quality is Quality.ROTTEN:
            last.go_rotten()
            logger.debug("%s: fruit %d rotted from contact", self._name, len(self._fruits) - 1)

    def _spread_worms(self) -> None:
        new_index = len(self._fruits) - 1
        if self._fruits[new_index].quality is not Quality.WORMY:
            return

        start = 0 if self._last_wormy_index is None else self._last_wormy_index + 1

        infested = 0
        for i in range(start, new_index):
            fruit = self._fruits[i]
            if fruit.is_healthy and fruit.taste is Taste.SWEET:
                fruit.become_worm_infested()
                infested += 1

        if infested:
            logger.debug(
                "%s: worms spread to %d fruit in window [%d, %d)",
                self._name, infested, start, new_index
            )

        self._last_wormy_index = new_index

    # ------------------------------------------------------------------
    # Transfers
    # ------------------------------------------------------------------

    def _pop_oldest(self) -> Optional[Fruit]:
        """Remove the oldest fruit and shift the infestation boundary."""
        if not self._fruits:
            return None

        fruit = self._fruits.popleft()

        if self._last_wormy_index is not None:
            if self._last_wormy_index == 0:
                self._last_wormy_index = None
            else:
                self._last_wormy_index -= 1

        return fruit

    def give(self, target: "Picker") -> None:
        """
        Hand the oldest fruit to another picker.

        Does nothing if this picker has no fruit. The target applies its
        append rules to the arriving fruit.

        Args:
            target: Picker receiving the fruit. May be this picker.
        """
        fruit = self._pop_oldest()
        if fruit is None:
            return
        logger.debug("%s gives %r to %s", self._name, fruit, target.name)
        target.append(fruit)

    def take(self, source: "Picker") -> None:
        """
        Take the oldest fruit of another picker.

        Does nothing if the source has no fruit.

        Args:
            source: Picker losing the fruit. May be this picker.
        """
        source.give(self)

    def __iadd__(self, other: Union[Fruit, "Picker"]) -> "Picker":
        if isinstance(other, Fruit):
            self.append(other)
        elif isinstance(other, Picker):
            self.take(other)
        else:
            return NotImplemented
        return self

    def __isub__(self, other: "Picker") -> "Picker":
        if not isinstance(other, Picker):
            return NotImplemented
        self.give(other)
        return self

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def rank_counts(self) -> RankKey:
        """Counts used by the ranking law, most significant first."""
        return (
            self.count_quality(Quality.HEALTHY),
            self.count_taste(Taste.SWEET),
            self.count_size(Size.LARGE),
            self.count_size(Size.MEDIUM),
            self.count_size(Size.SMALL),
            self.count_fruits(),
        )

    def rank_key(self) -> RankKey:
        """Sort key: ascending order puts the best picker first."""
        return tuple(-count for count in self.rank_counts())

    def compare(self, other: "Picker") -> int:
        """
        Three-way comparison under the ranking law.

        Returns:
            -1 if self ranks ahead of other, 1 if behind, 0 if equivalent.
        """
        mine = self.rank_key()
        theirs = other.rank_key()
        return (mine > theirs) - (mine < theirs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Picker):
            return NotImplemented
        return self._name == other._name and self._fruits == other._fruits

    def __lt__(self, other: "Picker") -> bool:
        if not isinstance(other, Picker):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: "Picker") -> bool:
        if not isinstance(other, Picker):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "Picker") -> bool:
        if not isinstance(other, Picker):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: "Picker") -> bool:
        if not isinstance(other, Picker):
            return NotImplemented
        return self.compare(other) >= 0

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def copy(self) -> "Picker":
        """Independent picker with the same name, fruits and boundary."""
        clone = Picker(self._name)
        clone._fruits = deque(fruit.copy() for fruit in self._fruits)
        clone._last_wormy_index = self._last_wormy_index
        return clone

    def __len__(self) -> int:
        return len(self._fruits)

    def __iter__(self) -> Iterator[Fruit]:
        return iter(self._fruits)

    def __repr__(self) -> str:
        return f"Picker({self._name!r}, fruits={len(self._fruits)})"

    def __str__(self) -> str:
        from fruit_picking.picking_core.display import format_picker
        return format_picker(self)
