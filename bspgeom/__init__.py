# bspgeom/__init__.py
"""BSP geometry toolkit: oriented planes, lines and partitioned regions."""

from __future__ import annotations

from bspgeom.config import TOLERANCE, Settings, get_settings
from bspgeom.errors import DegenerateGeometryError
from bspgeom.euclidean.three_d import Line3D, Plane, PolyhedronsSet, facet
from bspgeom.euclidean.two_d import Line2D, PolygonsSet
from bspgeom.partitioning import (
    BSPTree,
    Location,
    Side,
    SplitSubHyperplane,
    SubHyperplane,
    build_tree,
)

__all__ = [
    "BSPTree",
    "DegenerateGeometryError",
    "Line2D",
    "Line3D",
    "Location",
    "Plane",
    "PolygonsSet",
    "PolyhedronsSet",
    "Settings",
    "Side",
    "SplitSubHyperplane",
    "SubHyperplane",
    "TOLERANCE",
    "build_tree",
    "facet",
    "get_settings",
]
