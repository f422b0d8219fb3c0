# bspgeom/euclidean/three_d/__init__.py
"""Three-dimensional lines, planes and polyhedral regions."""

from __future__ import annotations

from bspgeom.euclidean.three_d.line import Line3D
from bspgeom.euclidean.three_d.plane import Plane
from bspgeom.euclidean.three_d.polyhedrons import PolyhedronsSet, facet

__all__ = ["Line3D", "Plane", "PolyhedronsSet", "facet"]
