# bspgeom/euclidean/one_d/intervals.py
"""Sets of intervals on a line: the sub-hyperplane regions of 2D lines."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from bspgeom.config import TOLERANCE
from bspgeom.partitioning.enums import Side

Interval = tuple[float, float]


def _normalize(intervals: Iterable[Interval]) -> tuple[Interval, ...]:
    """Sort, drop reversed bounds and merge overlapping intervals."""
    ordered = sorted((float(lo), float(hi)) for lo, hi in intervals if lo <= hi)
    merged: list[Interval] = []
    for lo, hi in ordered:
        if merged and lo <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], hi))
        else:
            merged.append((lo, hi))
    return tuple(merged)


@dataclass(frozen=True, slots=True)
class IntervalsSet:
    """Union of disjoint closed intervals, the whole line by default."""

    intervals: tuple[Interval, ...] = ((-math.inf, math.inf),)

    def __post_init__(self) -> None:
        object.__setattr__(self, "intervals", _normalize(self.intervals))

    @classmethod
    def between(cls, lower: float, upper: float) -> IntervalsSet:
        return cls(((lower, upper),))

    @classmethod
    def empty(cls) -> IntervalsSet:
        return cls(())

    def copy_self(self) -> IntervalsSet:
        return IntervalsSet(self.intervals)

    def is_empty(self) -> bool:
        # single points have no length and are not kept as content
        return all(hi - lo <= TOLERANCE for lo, hi in self.intervals)

    def size(self) -> float:
        return sum(hi - lo for lo, hi in self.intervals)

    @property
    def inf(self) -> float:
        return self.intervals[0][0] if self.intervals else math.inf

    @property
    def sup(self) -> float:
        return self.intervals[-1][1] if self.intervals else -math.inf

    def contains(self, abscissa: float) -> bool:
        return any(lo - TOLERANCE <= abscissa <= hi + TOLERANCE for lo, hi in self.intervals)

    def side(self, abscissa: float, increasing_is_plus: bool) -> Side:
        """Position of the set with respect to a cut point on the line.

        Args:
            abscissa: Location of the cut point
            increasing_is_plus: True when abscissae above the cut point are
                on the plus side of the cutting hyperplane
        """
        above = any(hi > abscissa + TOLERANCE for lo, hi in self.intervals if hi - lo > TOLERANCE)
        below = any(lo < abscissa - TOLERANCE for lo, hi in self.intervals if hi - lo > TOLERANCE)
        if above and below:
            return Side.BOTH
        if above:
            return Side.PLUS if increasing_is_plus else Side.MINUS
        if below:
            return Side.MINUS if increasing_is_plus else Side.PLUS
        return Side.HYPER

    def split(self, abscissa: float) -> tuple[IntervalsSet, IntervalsSet]:
        """Return the parts above and below ``abscissa``."""
        upper = [(max(lo, abscissa), hi) for lo, hi in self.intervals if hi > abscissa]
        lower = [(lo, min(hi, abscissa)) for lo, hi in self.intervals if lo < abscissa]
        return IntervalsSet(tuple(upper)), IntervalsSet(tuple(lower))


__all__ = ["Interval", "IntervalsSet"]
