# bspgeom/partitioning/bsp_tree.py
"""Binary space partitioning tree nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from bspgeom.config import TOLERANCE
from bspgeom.partitioning.enums import Location

if TYPE_CHECKING:
    from bspgeom.partitioning.sub_hyperplane import SubHyperplane


@dataclass(slots=True, eq=False)
class BSPTree:
    """A BSP tree node.

    A leaf carries a boolean ``attribute`` (True for inside cells). An
    internal node carries a ``cut`` sub-hyperplane and two children: ``plus``
    holds the half-space on the positive side of the cut hyperplane,
    ``minus`` the other one.
    """

    cut: SubHyperplane | None = None
    plus: BSPTree | None = None
    minus: BSPTree | None = None
    attribute: bool | None = None

    def __post_init__(self) -> None:
        if self.cut is None:
            if self.plus is not None or self.minus is not None:
                raise ValueError("a leaf node cannot have children")
            if self.attribute is None:
                raise ValueError("a leaf node needs an inside/outside attribute")
        elif self.plus is None or self.minus is None:
            raise ValueError("an internal node needs both children")

    @classmethod
    def leaf(cls, inside: bool) -> BSPTree:
        return cls(attribute=bool(inside))

    @classmethod
    def node(cls, cut: SubHyperplane, plus: BSPTree, minus: BSPTree) -> BSPTree:
        return cls(cut=cut, plus=plus, minus=minus)

    def is_leaf(self) -> bool:
        return self.cut is None

    def copy_self(self) -> BSPTree:
        """Deep copy: cut hyperplanes are copied, nothing mutable is shared."""
        if self.cut is None:
            return BSPTree.leaf(bool(self.attribute))
        assert self.plus is not None and self.minus is not None
        return BSPTree.node(self.cut.copy_self(), self.plus.copy_self(), self.minus.copy_self())

    def leaves(self) -> Iterator[BSPTree]:
        if self.cut is None:
            yield self
            return
        assert self.plus is not None and self.minus is not None
        yield from self.plus.leaves()
        yield from self.minus.leaves()

    def has_inside_leaf(self) -> bool:
        return any(leaf.attribute for leaf in self.leaves())

    def depth(self) -> int:
        if self.cut is None:
            return 0
        assert self.plus is not None and self.minus is not None
        return 1 + max(self.plus.depth(), self.minus.depth())

    def locate(self, point: Any) -> Location:
        """Classify a space point by walking down the cuts.

        A point lying on a cut is pushed down both branches; it is on the
        boundary when the two answers disagree.
        """
        if self.cut is None:
            return Location.INSIDE if self.attribute else Location.OUTSIDE
        assert self.plus is not None and self.minus is not None

        offset = self.cut.hyperplane.offset(point)
        if offset > TOLERANCE:
            return self.plus.locate(point)
        if offset < -TOLERANCE:
            return self.minus.locate(point)

        plus_location = self.plus.locate(point)
        minus_location = self.minus.locate(point)
        if plus_location == minus_location:
            return plus_location
        return Location.BOUNDARY


def is_empty_tree(tree: BSPTree) -> bool:
    """Check that no leaf of an already pruned tree is inside."""
    return not tree.has_inside_leaf()


__all__ = ["BSPTree", "is_empty_tree"]
