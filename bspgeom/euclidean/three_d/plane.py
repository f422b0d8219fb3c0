# bspgeom/euclidean/three_d/plane.py
"""Oriented planes of 3D space, the hyperplanes of 3D partitioning.

A plane keeps a right-handed orthonormal frame ``(u, v, w)``: ``w`` is the
unit normal, ``u`` and ``v`` span the plane. Its equation is
``w . p + origin_offset = 0`` and its plus side is where the left-hand side
is positive.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, overload

import numpy.typing as npt
from scipy.spatial.transform import Rotation as SciRot

from bspgeom.config import TOLERANCE
from bspgeom.core.rotation import apply_rotation
from bspgeom.core.vectors import (
    Vector,
    angle,
    as_vector,
    cross,
    dot,
    linear_combination,
    norm,
    orthogonal,
)
from bspgeom.errors import DegenerateGeometryError
from bspgeom.euclidean.three_d.line import Line3D
from bspgeom.euclidean.two_d.line import Line2D
from bspgeom.euclidean.two_d.polygons import PolygonsSet
from bspgeom.partitioning.bsp_tree import BSPTree, is_empty_tree
from bspgeom.partitioning.enums import HyperplaneKind, Side
from bspgeom.partitioning.sub_hyperplane import SplitSubHyperplane, SubHyperplane
from bspgeom.utils.format import format_matrix, format_vector
from bspgeom.utils.logger import get_logger

if TYPE_CHECKING:
    from bspgeom.euclidean.three_d.polyhedrons import PolyhedronsSet

_log = get_logger("bspgeom.euclidean.three_d.plane")


class Plane:
    """Oriented plane in 3D space.

    Build it with ``Plane(normal)`` (plane through the space origin),
    ``Plane(normal, point=p)``, :meth:`from_point_and_normal` or
    :meth:`from_three_points`. Queries never modify the instance;
    :meth:`reset`, :meth:`reset_from` and :meth:`revert_self` update it in
    place, :meth:`rotate` and :meth:`translate` return new planes.
    """

    kind = HyperplaneKind.PLANE_3D

    def __init__(self, normal: npt.ArrayLike, point: npt.ArrayLike | None = None) -> None:
        operation = "Plane(normal)" if point is None else "Plane(normal, point)"
        self._w = self._unit_normal(normal, operation)
        self._origin_offset = 0.0 if point is None else -dot(as_vector(point), self._w)
        self._set_frame()

    # ────────────── construction ──────────────

    @classmethod
    def from_normal(cls, normal: npt.ArrayLike) -> Plane:
        return cls(normal)

    @classmethod
    def from_point_and_normal(cls, point: npt.ArrayLike, normal: npt.ArrayLike) -> Plane:
        return cls(normal, point=point)

    @classmethod
    def from_three_points(
        cls, p1: npt.ArrayLike, p2: npt.ArrayLike, p3: npt.ArrayLike
    ) -> Plane:
        """Plane through three points, oriented along ``(p2 - p1) x (p3 - p1)``.

        Raises:
            DegenerateGeometryError: if the points are collinear
        """
        a, b, c = as_vector(p1), as_vector(p2), as_vector(p3)
        normal = cross(b - a, c - a)
        if norm(normal) < TOLERANCE:
            _log.debug(f"collinear points {format_vector(a)} {format_vector(b)} {format_vector(c)}")
            raise DegenerateGeometryError(
                "Plane.from_three_points",
                "points are collinear",
                p1=format_vector(a),
                p2=format_vector(b),
                p3=format_vector(c),
            )
        return cls(normal, point=a)

    def copy_self(self) -> Plane:
        """Independent copy; the frame vectors are immutable and shared."""
        plane = Plane.__new__(Plane)
        plane._copy_frame(self)
        return plane

    def reset(self, point: npt.ArrayLike, normal: npt.ArrayLike) -> None:
        """Re-derive the instance in place from a point and a normal."""
        w = self._unit_normal(normal, "Plane.reset")
        self._w = w
        self._origin_offset = -dot(as_vector(point), w)
        self._set_frame()

    def reset_from(self, original: Plane) -> None:
        """Make the instance an independent copy of ``original``."""
        self._copy_frame(original)

    def _copy_frame(self, other: Plane) -> None:
        self._origin_offset = other._origin_offset
        self._origin = other._origin
        self._u = other._u
        self._v = other._v
        self._w = other._w

    @staticmethod
    def _unit_normal(normal: npt.ArrayLike, operation: str) -> Vector:
        vec = as_vector(normal)
        length = norm(vec)
        if length < TOLERANCE:
            _log.debug(f"{operation}: rejecting normal {format_vector(vec)}")
            raise DegenerateGeometryError(
                operation, "normal norm too small", normal=format_vector(vec)
            )
        return as_vector(vec / length)

    def _set_frame(self) -> None:
        self._origin = as_vector(-self._origin_offset * self._w)
        self._u = orthogonal(self._w)
        self._v = cross(self._w, self._u)

    # ────────────── accessors ──────────────

    @property
    def origin(self) -> Vector:
        """Projection of the space origin on the plane."""
        return self._origin

    @property
    def origin_offset(self) -> float:
        return self._origin_offset

    @property
    def normal(self) -> Vector:
        """Unit normal; ``(u, v, normal)`` is right-handed."""
        return self._w

    @property
    def u(self) -> Vector:
        return self._u

    @property
    def v(self) -> Vector:
        return self._v

    def revert_self(self) -> None:
        """Flip the orientation in place, keeping the same point set.

        ``u`` and ``v`` are exchanged and the normal is reversed, so a point
        with in-plane coordinates ``(x, y)`` and offset ``z`` gets
        coordinates ``(y, x)`` and offset ``-z``.
        """
        self._u, self._v = self._v, self._u
        self._w = as_vector(-self._w)
        self._origin_offset = -self._origin_offset

    # ────────────── coordinate mapping ──────────────

    def to_sub_space(self, point: npt.ArrayLike) -> Vector:
        """In-plane coordinates of a space point."""
        p = as_vector(point)
        return as_vector((dot(p, self._u), dot(p, self._v)), 2)

    def to_space(self, point: npt.ArrayLike) -> Vector:
        """Space point of the plane with the given in-plane coordinates."""
        q = as_vector(point, 2)
        return linear_combination(
            (float(q[0]), self._u), (float(q[1]), self._v), (-self._origin_offset, self._w)
        )

    def point_at(self, in_plane: npt.ArrayLike, offset: float) -> Vector:
        """Space point with given in-plane coordinates and offset."""
        q = as_vector(in_plane, 2)
        return linear_combination(
            (float(q[0]), self._u),
            (float(q[1]), self._v),
            (offset - self._origin_offset, self._w),
        )

    # ────────────── metric queries ──────────────

    @overload
    def offset(self, other: Plane) -> float: ...

    @overload
    def offset(self, other: npt.ArrayLike) -> float: ...

    def offset(self, other):
        """Oriented distance of a point, or of a parallel plane.

        For a plane the result is only meaningful when both planes are
        parallel: it is 0 for the same plane, positive when ``other`` lies
        on the plus side of the instance.
        """
        if isinstance(other, Plane):
            if self.same_orientation_as(other):
                return self._origin_offset - other._origin_offset
            return self._origin_offset + other._origin_offset
        return dot(as_vector(other), self._w) + self._origin_offset

    def contains(self, point: npt.ArrayLike) -> bool:
        return abs(self.offset(point)) < TOLERANCE

    def same_orientation_as(self, other: Plane) -> bool:
        if getattr(other, "kind", None) is not HyperplaneKind.PLANE_3D:
            raise TypeError(f"cannot compare a plane orientation with {type(other).__name__}")
        return dot(self._w, other._w) > 0.0

    def is_similar_to(self, other: Plane) -> bool:
        """Check if both planes hold the same points, whatever their normals."""
        theta = angle(self._w, other._w)
        return (
            theta < TOLERANCE and abs(self._origin_offset - other._origin_offset) < TOLERANCE
        ) or (
            theta > math.pi - TOLERANCE
            and abs(self._origin_offset + other._origin_offset) < TOLERANCE
        )

    # ────────────── rigid motions ──────────────

    def rotate(self, center: npt.ArrayLike, rotation: SciRot) -> Plane:
        """New plane rotated around ``center``; the instance is unchanged."""
        c = as_vector(center)
        _log.debug(
            f"rotating {self} about {format_vector(c)} by\n{format_matrix(rotation.as_matrix())}"
        )
        delta = self._origin - c
        plane = Plane(apply_rotation(rotation, self._w), point=c + apply_rotation(rotation, delta))
        # carry the frame along instead of rebuilding an arbitrary one
        plane._u = apply_rotation(rotation, self._u)
        plane._v = apply_rotation(rotation, self._v)
        return plane

    def translate(self, translation: npt.ArrayLike) -> Plane:
        """New plane shifted by ``translation``; the instance is unchanged."""
        plane = Plane(self._w, point=self._origin + as_vector(translation))
        plane._u = self._u
        plane._v = self._v
        return plane

    # ────────────── intersections ──────────────

    def intersection(self, other: Plane | Line3D) -> Line3D | Vector | None:
        """Crossing line with a plane, or crossing point with a line.

        Returns None when ``other`` is parallel to the instance.
        """
        if isinstance(other, Line3D):
            return self.intersection_with_line(other)
        if getattr(other, "kind", None) is not HyperplaneKind.PLANE_3D:
            raise TypeError(f"cannot intersect a plane with {type(other).__name__}")
        return self.intersection_with_plane(other)

    def intersection_with_line(self, line: Line3D) -> Vector | None:
        direction = line.direction
        d = dot(self._w, direction)
        if abs(d) < TOLERANCE:
            _log.debug(f"{line} is parallel to {self}")
            return None
        point = line.to_space(0.0)
        k = -(self._origin_offset + dot(self._w, point)) / d
        return linear_combination((1.0, point), (k, direction))

    def intersection_with_plane(self, other: Plane) -> Line3D | None:
        direction = cross(self._w, other._w)
        if norm(direction) < TOLERANCE:
            return None
        point = Plane.intersection_of(self, other, Plane(direction))
        if point is None:
            return None
        return Line3D(point, direction)

    @staticmethod
    def intersection_of(plane1: Plane, plane2: Plane, plane3: Plane) -> Vector | None:
        """Common point of three planes, None if some of them are parallel.

        Solves the 3x3 system of plane equations with Cramer's rule.
        """
        a1, b1, c1 = (float(x) for x in plane1._w)
        d1 = plane1._origin_offset
        a2, b2, c2 = (float(x) for x in plane2._w)
        d2 = plane2._origin_offset
        a3, b3, c3 = (float(x) for x in plane3._w)
        d3 = plane3._origin_offset

        a23 = b2 * c3 - b3 * c2
        b23 = c2 * a3 - c3 * a2
        c23 = a2 * b3 - a3 * b2
        determinant = a1 * a23 + b1 * b23 + c1 * c23
        if abs(determinant) < TOLERANCE:
            return None

        r = 1.0 / determinant
        return as_vector(
            (
                (-a23 * d1 - (c1 * b3 - c3 * b1) * d2 - (c2 * b1 - c1 * b2) * d3) * r,
                (-b23 * d1 - (c3 * a1 - c1 * a3) * d2 - (c1 * a2 - c2 * a1) * d3) * r,
                (-c23 * d1 - (b1 * a3 - b3 * a1) * d2 - (b2 * a1 - b1 * a2) * d3) * r,
            )
        )

    # ────────────── regions ──────────────

    def whole_hyperplane(self) -> PolygonsSet:
        return PolygonsSet()

    def whole_space(self) -> PolyhedronsSet:
        from bspgeom.euclidean.three_d.polyhedrons import PolyhedronsSet

        return PolyhedronsSet()

    # ────────────── BSP classification ──────────────

    @staticmethod
    def _embedding_plane(sub: SubHyperplane) -> Plane:
        hyperplane = sub.hyperplane
        if getattr(hyperplane, "kind", None) is not HyperplaneKind.PLANE_3D:
            raise TypeError(
                f"a plane can only classify sub-hyperplanes of planes, "
                f"got {type(hyperplane).__name__}"
            )
        return hyperplane  # type: ignore[return-value]

    def _crossing_line_points(self, other: Plane, crossing: Line3D) -> tuple[Vector, Vector]:
        """Two points of the crossing line in ``other``'s 2D frame.

        They are ordered so that the plus side of the 2D line from the first
        to the second point lies on the plus side of the instance.
        """
        p = other.to_sub_space(crossing.to_space(0.0))
        q = other.to_sub_space(crossing.to_space(1.0))
        if dot(cross(crossing.direction, other.normal), self._w) < 0:
            p, q = q, p
        return p, q

    def side(self, sub: SubHyperplane) -> Side:
        """Position of a sub-hyperplane with respect to the instance.

        Returns:
            PLUS or MINUS when ``sub`` lies on one side, BOTH when it
            straddles the plane, HYPER when it lies in the plane
        """
        other = self._embedding_plane(sub)
        crossing = self.intersection_with_plane(other)

        if crossing is None:
            # parallel planes: any point tells the relative position
            global_offset = self.offset(other)
            if global_offset < -TOLERANCE:
                return Side.MINUS
            if global_offset > TOLERANCE:
                return Side.PLUS
            return Side.HYPER

        p, q = self._crossing_line_points(other, crossing)
        region: PolygonsSet = sub.remaining_region  # type: ignore[assignment]
        return region.side(Line2D(p, q))

    def split(self, sub: SubHyperplane) -> SplitSubHyperplane:
        """Parts of a sub-hyperplane on the plus and minus sides of the instance.

        A sub-hyperplane parallel to the instance goes whole to the plus part
        when strictly above it, whole to the minus part otherwise (coincident
        included). Crossing sub-hyperplanes are cut along the crossing line;
        both parts are embedded in their own copy of the other plane.
        """
        other = self._embedding_plane(sub)
        crossing = self.intersection_with_plane(other)

        if crossing is None:
            # coincident sub-hyperplanes belong to the minus part
            if self.offset(other) > TOLERANCE:
                return SplitSubHyperplane(sub, None)
            return SplitSubHyperplane(None, sub)

        p, q = self._crossing_line_points(other, crossing)
        minus_line = Line2D(p, q)
        plus_line = Line2D(q, p)

        region: PolygonsSet = sub.remaining_region  # type: ignore[assignment]
        plus_part, minus_part = region.split(minus_line)

        if is_empty_tree(plus_part):
            plus_tree = BSPTree.leaf(False)
        else:
            plus_tree = BSPTree.node(SubHyperplane.whole(plus_line), BSPTree.leaf(False), plus_part)
        if is_empty_tree(minus_part):
            minus_tree = BSPTree.leaf(False)
        else:
            minus_tree = BSPTree.node(
                SubHyperplane.whole(minus_line), BSPTree.leaf(False), minus_part
            )

        _log.debug(
            f"split by {self}: plus_empty={plus_tree.is_leaf()} minus_empty={minus_tree.is_leaf()}"
        )
        return SplitSubHyperplane(
            SubHyperplane(other.copy_self(), PolygonsSet(plus_tree)),
            SubHyperplane(other.copy_self(), PolygonsSet(minus_tree)),
        )

    def __repr__(self) -> str:
        return (
            f"Plane(normal={format_vector(self._w)}, "
            f"origin_offset={self._origin_offset + 0.0:.6f})"
        )


__all__ = ["Plane"]
