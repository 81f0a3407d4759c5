"""
Ranking
=======

Pickers kept in ranking order.

The ranking is always sorted by the picker ranking law (see `Picker`), best
picker first. Pickers that are equivalent under the law keep the order in
which they entered the ranking. Rankings can be merged; both inputs are
already sorted, so a stable two-way merge keeps the result sorted.
"""

from __future__ import annotations

import logging
import operator
from typing import Iterable, Iterator, List, Union

from fruit_picking.picking_core.picker import Picker

logger = logging.getLogger(__name__)


def merge_sorted(left: List[Picker], right: List[Picker]) -> List[Picker]:
    """
    Stable merge of two lists already sorted by the ranking law.

    On ties the left element is taken first. The returned list holds copies
    of the input pickers.

    Args:
        left: Sorted pickers.
        right: Sorted pickers.

    Returns:
        New sorted list of len(left) + len(right) pickers.
    """
    left_keys = [picker.rank_key() for picker in left]
    right_keys = [picker.rank_key() for picker in right]

    merged: List[Picker] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right_keys[j] < left_keys[i]:
            merged.append(right[j].copy())
            j += 1
        else:
            merged.append(left[i].copy())
            i += 1

    merged.extend(picker.copy() for picker in left[i:])
    merged.extend(picker.copy() for picker in right[j:])
    return merged


class Ranking:
    """
    Sorted collection of pickers.

    The ranking owns copies of the pickers added to it, so later changes to
    the caller's pickers do not disturb the order.

    Indexing past the end returns the last picker instead of failing.
    Indexing an empty ranking raises IndexError.
    """

    def __init__(self, pickers: Iterable[Picker] = ()):
        """
        Create a ranking.

        Args:
            pickers: Initial pickers, in any order. Sorted once, stably.
        """
        self._pickers: List[Picker] = [picker.copy() for picker in pickers]
        self._sort()

    def _sort(self) -> None:
        # list.sort is stable
        self._pickers.sort(key=Picker.rank_key)

    def count_pickers(self) -> int:
        return len(self._pickers)

    def add(self, picker: Picker) -> None:
        """Insert a copy of a picker and restore ranking order."""
        self._pickers.append(picker.copy())
        self._sort()

    def remove(self, picker: Picker) -> None:
        """
        Remove the highest-ranked picker equal to the given one.

        Equality is structural (name and fruits), not the ranking law.
        Nothing happens if no picker matches.
        """
        for i, candidate in enumerate(self._pickers):
            if candidate == picker:
                del self._pickers[i]
                return

    def merge(self, other: "Ranking") -> None:
        """
        Merge another ranking into this one.

        Args:
            other: Ranking to merge. May be this ranking, in which case every
                picker ends up listed twice.
        """
        before = len(self._pickers)
        self._pickers = merge_sorted(self._pickers, list(other._pickers))
        logger.debug(
            "Merged rankings: %d + %d -> %d pickers",
            before, len(self._pickers) - before, len(self._pickers)
        )

    def copy(self) -> "Ranking":
        clone = Ranking()
        clone._pickers = [picker.copy() for picker in self._pickers]
        return clone

    def __iadd__(self, other: Union[Picker, "Ranking"]) -> "Ranking":
        if isinstance(other, Picker):
            self.add(other)
        elif isinstance(other, Ranking):
            self.merge(other)
        else:
            return NotImplemented
        return self

    def __isub__(self, other: Picker) -> "Ranking":
        if not isinstance(other, Picker):
            return NotImplemented
        self.remove(other)
        return self

    def __add__(self, other: "Ranking") -> "Ranking":
        if not isinstance(other, Ranking):
            return NotImplemented
        result = Ranking()
        result._pickers = merge_sorted(self._pickers, other._pickers)
        return result

    def __getitem__(self, index: int) -> Picker:
        """
        Picker at a ranking position.

        Positions past the end, and negative positions, give the last picker.

        Raises:
            IndexError: If the ranking is empty.
            TypeError: If index is not an integer.
        """
        if isinstance(index, bool):
            raise TypeError("Ranking index must be an integer, got bool")
        index = operator.index(index)
        if not self._pickers:
            raise IndexError("Ranking is empty")
        if index < 0 or index >= len(self._pickers):
            return self._pickers[-1]
        return self._pickers[index]

    def __len__(self) -> int:
        return len(self._pickers)

    def __iter__(self) -> Iterator[Picker]:
        return iter(self._pickers)

    def __repr__(self) -> str:
        names = ", ".join(picker.name for picker in self._pickers)
        return f"Ranking([{names}])"

    def __str__(self) -> str:
        from fruit_picking.picking_core.display import format_ranking
        return format_ranking(self)
