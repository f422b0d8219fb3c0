# bspgeom/partitioning/__init__.py
"""Dimension-agnostic BSP machinery: trees, sub-hyperplanes, contracts."""

from __future__ import annotations

from bspgeom.partitioning.bsp_tree import BSPTree, is_empty_tree
from bspgeom.partitioning.builder import build_tree
from bspgeom.partitioning.enums import HyperplaneKind, Location, Side
from bspgeom.partitioning.protocols import Hyperplane, Region
from bspgeom.partitioning.sub_hyperplane import SplitSubHyperplane, SubHyperplane

__all__ = [
    "BSPTree",
    "Hyperplane",
    "HyperplaneKind",
    "Location",
    "Region",
    "Side",
    "SplitSubHyperplane",
    "SubHyperplane",
    "build_tree",
    "is_empty_tree",
]
