# bspgeom/partitioning/sub_hyperplane.py
"""Bounded pieces of hyperplanes and the result of splitting them."""

from __future__ import annotations

from dataclasses import dataclass

from bspgeom.partitioning.enums import Side
from bspgeom.partitioning.protocols import Hyperplane, Region


@dataclass(frozen=True, slots=True)
class SubHyperplane:
    """A region of points confined to a hyperplane.

    Attributes:
        hyperplane: Embedding hyperplane
        remaining_region: Region of the hyperplane's sub-space covered by
            the instance
    """

    hyperplane: Hyperplane
    remaining_region: Region

    @classmethod
    def whole(cls, hyperplane: Hyperplane) -> SubHyperplane:
        """Sub-hyperplane covering its whole hyperplane."""
        return cls(hyperplane, hyperplane.whole_hyperplane())

    def copy_self(self) -> SubHyperplane:
        return SubHyperplane(self.hyperplane.copy_self(), self.remaining_region.copy_self())

    def is_empty(self) -> bool:
        return self.remaining_region.is_empty()

    def size(self) -> float:
        return self.remaining_region.size()

    def side(self, hyperplane: Hyperplane) -> Side:
        """Position of the instance with respect to ``hyperplane``."""
        return hyperplane.side(self)

    def split(self, hyperplane: Hyperplane) -> SplitSubHyperplane:
        """Parts of the instance on each side of ``hyperplane``."""
        return hyperplane.split(self)


@dataclass(frozen=True, slots=True)
class SplitSubHyperplane:
    """Pair of parts of a split sub-hyperplane.

    Either part is None when nothing lies on that side.
    """

    plus: SubHyperplane | None
    minus: SubHyperplane | None

    @property
    def side(self) -> Side:
        """Summary of where the split sub-hyperplane lied."""
        has_plus = self.plus is not None and not self.plus.is_empty()
        has_minus = self.minus is not None and not self.minus.is_empty()
        if has_plus:
            return Side.BOTH if has_minus else Side.PLUS
        return Side.MINUS if has_minus else Side.HYPER


__all__ = ["SplitSubHyperplane", "SubHyperplane"]
