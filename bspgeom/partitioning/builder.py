# bspgeom/partitioning/builder.py
"""Build a BSP tree from the boundary of a region.

Only the hyperplane contract is used here, so the same builder serves
polygons (boundary made of segments) and polyhedra (boundary made of
facets).
"""

from __future__ import annotations

from collections.abc import Iterable

from bspgeom.partitioning.bsp_tree import BSPTree
from bspgeom.partitioning.enums import Side
from bspgeom.partitioning.sub_hyperplane import SubHyperplane
from bspgeom.utils.logger import get_logger

_log = get_logger("bspgeom.partitioning.builder")


def build_tree(boundary: Iterable[SubHyperplane]) -> BSPTree:
    """Partition space with the hyperplanes of a closed, oriented boundary.

    The boundary must be oriented with the region interior on the minus
    side of each piece. The first remaining piece provides the cut at every
    level, the others are sorted by ``side`` and cut by ``split`` when they
    straddle it; pieces coplanar with the cut are absorbed by it. A leaf
    reached through a plus branch is outside, through a minus branch inside.

    An empty boundary gives the empty region.
    """
    pieces = list(boundary)
    tree = _insert_cuts(pieces, inside=False)
    _log.debug(f"built BSP tree from {len(pieces)} boundary pieces, depth={tree.depth()}")
    return tree


def _insert_cuts(pieces: list[SubHyperplane], inside: bool) -> BSPTree:
    pieces = [piece for piece in pieces if not piece.is_empty()]
    if not pieces:
        return BSPTree.leaf(inside)

    cut_hyperplane = pieces[0].hyperplane
    plus_pieces: list[SubHyperplane] = []
    minus_pieces: list[SubHyperplane] = []
    for other in pieces[1:]:
        side = cut_hyperplane.side(other)
        if side is Side.PLUS:
            plus_pieces.append(other)
        elif side is Side.MINUS:
            minus_pieces.append(other)
        elif side is Side.BOTH:
            parts = cut_hyperplane.split(other)
            if parts.plus is not None:
                plus_pieces.append(parts.plus)
            if parts.minus is not None:
                minus_pieces.append(parts.minus)
        # Side.HYPER: lies in the cut already

    return BSPTree.node(
        SubHyperplane.whole(cut_hyperplane.copy_self()),
        plus=_insert_cuts(plus_pieces, inside=False),
        minus=_insert_cuts(minus_pieces, inside=True),
    )


__all__ = ["build_tree"]
