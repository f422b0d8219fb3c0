# bspgeom/euclidean/three_d/polyhedrons.py
"""Polyhedral regions of 3D space stored as BSP trees of planes."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

import numpy.typing as npt

from bspgeom.config import TOLERANCE
from bspgeom.core.vectors import as_vector
from bspgeom.errors import DegenerateGeometryError
from bspgeom.euclidean.three_d.plane import Plane
from bspgeom.euclidean.two_d.polygons import PolygonsSet
from bspgeom.partitioning.bsp_tree import BSPTree
from bspgeom.partitioning.builder import build_tree
from bspgeom.partitioning.enums import Location
from bspgeom.partitioning.sub_hyperplane import SubHyperplane
from bspgeom.utils.format import format_vector


def facet(vertices: Sequence[npt.ArrayLike]) -> SubHyperplane:
    """Planar polygonal facet through the given vertices.

    The facet normal follows the right-hand rule on the first three
    vertices, so a counterclockwise outline seen from outside gives an
    outward normal.
    """
    points = [as_vector(v) for v in vertices]
    if len(points) < 3:
        raise DegenerateGeometryError("facet", "a facet needs at least 3 vertices", count=len(points))
    plane = Plane.from_three_points(points[0], points[1], points[2])
    for point in points[3:]:
        if not plane.contains(point):
            raise DegenerateGeometryError(
                "facet", "vertices are not coplanar", point=format_vector(point)
            )
    region = PolygonsSet.from_vertices([plane.to_sub_space(p) for p in points])
    return SubHyperplane(plane, region)


class PolyhedronsSet:
    """Region of 3D space, the whole space by default.

    The interior lies on the minus side of the boundary facets.
    """

    def __init__(
        self, tree: BSPTree | None = None, boundary: Iterable[SubHyperplane] | None = None
    ) -> None:
        self._tree = tree if tree is not None else BSPTree.leaf(True)
        self._boundary = tuple(boundary) if boundary is not None else None

    @classmethod
    def from_boundary(cls, facets: Iterable[SubHyperplane]) -> PolyhedronsSet:
        """Polyhedron enclosed by closed, outward oriented facets."""
        boundary = tuple(facets)
        return cls(build_tree(boundary), boundary=boundary)

    @classmethod
    def from_box(
        cls,
        x_min: float,
        x_max: float,
        y_min: float,
        y_max: float,
        z_min: float,
        z_max: float,
    ) -> PolyhedronsSet:
        if x_max - x_min < TOLERANCE or y_max - y_min < TOLERANCE or z_max - z_min < TOLERANCE:
            raise DegenerateGeometryError(
                "PolyhedronsSet.from_box",
                "box has no volume",
                x=(x_min, x_max),
                y=(y_min, y_max),
                z=(z_min, z_max),
            )
        x0, x1, y0, y1, z0, z1 = x_min, x_max, y_min, y_max, z_min, z_max
        return cls.from_boundary(
            [
                facet([(x0, y0, z0), (x0, y1, z0), (x1, y1, z0), (x1, y0, z0)]),
                facet([(x0, y0, z1), (x1, y0, z1), (x1, y1, z1), (x0, y1, z1)]),
                facet([(x0, y0, z0), (x0, y0, z1), (x0, y1, z1), (x0, y1, z0)]),
                facet([(x1, y0, z0), (x1, y1, z0), (x1, y1, z1), (x1, y0, z1)]),
                facet([(x0, y0, z0), (x1, y0, z0), (x1, y0, z1), (x0, y0, z1)]),
                facet([(x0, y1, z0), (x0, y1, z1), (x1, y1, z1), (x1, y1, z0)]),
            ]
        )

    def get_tree(self) -> BSPTree:
        return self._tree

    @property
    def boundary(self) -> tuple[SubHyperplane, ...] | None:
        return self._boundary

    def copy_self(self) -> PolyhedronsSet:
        boundary = None
        if self._boundary is not None:
            boundary = [piece.copy_self() for piece in self._boundary]
        return PolyhedronsSet(self._tree.copy_self(), boundary=boundary)

    def is_empty(self) -> bool:
        # leaf check only: trees built from a closed boundary have no empty inside cell
        return not self._tree.has_inside_leaf()

    def size(self) -> float:
        """Volume of the region.

        A single-leaf tree is the whole space (``inf``) or nothing; other
        regions need their boundary, integrated with the divergence
        theorem.
        """
        if self._tree.is_leaf():
            return math.inf if self._tree.attribute else 0.0
        if self._boundary is None:
            raise ValueError("volume of a polyhedron built from a bare tree is unknown")
        volume = 0.0
        for piece in self._boundary:
            plane: Plane = piece.hyperplane  # type: ignore[assignment]
            # origin_offset is minus the distance of the space origin along the normal
            volume -= piece.size() * plane.origin_offset
        return volume / 3.0

    def check_point(self, point: npt.ArrayLike) -> Location:
        return self._tree.locate(as_vector(point))

    def __repr__(self) -> str:
        return f"PolyhedronsSet(depth={self._tree.depth()})"


__all__ = ["PolyhedronsSet", "facet"]
