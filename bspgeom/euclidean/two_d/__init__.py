# bspgeom/euclidean/two_d/__init__.py
"""Two-dimensional lines and polygonal regions."""

from __future__ import annotations

from bspgeom.euclidean.two_d.line import Line2D
from bspgeom.euclidean.two_d.polygons import PolygonsSet

__all__ = ["Line2D", "PolygonsSet"]
