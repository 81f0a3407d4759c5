"""
Fruit
=====

Fruit attributes and the fruit value type.

A fruit has three independent attributes. Taste and size are fixed when the
fruit is picked; quality can only degrade once, from HEALTHY to either
ROTTEN or WORMY.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class Taste(Enum):
    """How the fruit tastes."""
    SWEET = 0
    SOUR = 1


class Size(Enum):
    """How big the fruit is."""
    LARGE = 0
    MEDIUM = 1
    SMALL = 2


class Quality(Enum):
    """Condition of the fruit. Leaves HEALTHY at most once."""
    HEALTHY = 0
    ROTTEN = 1
    WORMY = 2


FruitTuple = Tuple[Taste, Size, Quality]


def _check_attribute(value, expected: type, field: str) -> None:
    if not isinstance(value, expected):
        raise TypeError(
            f"Fruit {field} must be a {expected.__name__}, got {type(value).__name__}"
        )


class Fruit:
    """
    A single picked fruit.

    Fruits compare by value. Because quality can change, fruits are not
    hashable. Conversion to and from a plain tuple is explicit only
    (`from_tuple` / `as_tuple`); a fruit cannot be unpacked.
    """

    __hash__ = None

    def __init__(self, taste: Taste, size: Size, quality: Quality):
        """
        Create a fruit.

        Args:
            taste: Fruit taste.
            size: Fruit size.
            quality: Initial quality.

        Raises:
            TypeError: If an attribute is not a member of its enumeration.
        """
        _check_attribute(taste, Taste, "taste")
        _check_attribute(size, Size, "size")
        _check_attribute(quality, Quality, "quality")

        self._taste = taste
        self._size = size
        self._quality = quality

    @classmethod
    def from_tuple(cls, attributes: FruitTuple) -> "Fruit":
        """Build a fruit from a `(taste, size, quality)` tuple."""
        taste, size, quality = attributes
        return cls(taste, size, quality)

    def as_tuple(self) -> FruitTuple:
        """Return the attributes as a `(taste, size, quality)` tuple."""
        return (self._taste, self._size, self._quality)

    @property
    def taste(self) -> Taste:
        return self._taste

    @property
    def size(self) -> Size:
        return self._size

    @property
    def quality(self) -> Quality:
        return self._quality

    @property
    def is_healthy(self) -> bool:
        return self._quality is Quality.HEALTHY

    def go_rotten(self) -> None:
        """Turn a healthy fruit rotten. No effect on rotten or wormy fruit."""
        if self._quality is Quality.HEALTHY:
            self._quality = Quality.ROTTEN

    def become_worm_infested(self) -> None:
        """Turn a healthy fruit wormy. No effect on rotten or wormy fruit."""
        if self._quality is Quality.HEALTHY:
            self._quality = Quality.WORMY

    def copy(self) -> "Fruit":
        """Independent fruit with the same attributes."""
        return Fruit(self._taste, self._size, self._quality)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fruit):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self) -> str:
        return (
            f"Fruit({self._taste.name}, {self._size.name}, {self._quality.name})"
        )

    def __str__(self) -> str:
        from fruit_picking.picking_core.display import format_fruit
        return format_fruit(self)


# Sample fruits. Pickers and rankings store copies, so these are never
# mutated by picking.
YUMMY_ONE = Fruit(Taste.SWEET, Size.LARGE, Quality.HEALTHY)
ROTTY_ONE = Fruit(Taste.SOUR, Size.SMALL, Quality.ROTTEN)
