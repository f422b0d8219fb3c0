# bspgeom/euclidean/three_d/line.py
"""Oriented lines of 3D space."""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

from bspgeom.config import TOLERANCE
from bspgeom.core.vectors import Vector, angle, as_vector, dot, linear_combination, norm
from bspgeom.errors import DegenerateGeometryError
from bspgeom.utils.format import format_vector


class Line3D:
    """Line through a point along a direction.

    The line is stored with a unit ``direction`` and its ``origin``, the
    point of the line closest to the space origin. Abscissae are measured
    from that origin along the direction.
    """

    def __init__(self, point: npt.ArrayLike, direction: npt.ArrayLike) -> None:
        self.reset(point, direction)

    @classmethod
    def through(cls, p1: npt.ArrayLike, p2: npt.ArrayLike) -> Line3D:
        start = as_vector(p1)
        return cls(start, as_vector(p2) - start)

    def reset(self, point: npt.ArrayLike, direction: npt.ArrayLike) -> None:
        p = as_vector(point)
        d = as_vector(direction)
        length = norm(d)
        if length < TOLERANCE:
            raise DegenerateGeometryError(
                "Line3D.reset", "direction norm too small", direction=format_vector(d)
            )
        self._direction = as_vector(d / length)
        self._origin = linear_combination((1.0, p), (-dot(p, self._direction), self._direction))

    @property
    def direction(self) -> Vector:
        return self._direction

    @property
    def origin(self) -> Vector:
        return self._origin

    def copy_self(self) -> Line3D:
        return Line3D(self._origin, self._direction)

    def revert(self) -> Line3D:
        """New line with the same points and opposite direction."""
        return Line3D(self._origin, -self._direction)

    def abscissa(self, point: npt.ArrayLike) -> float:
        return dot(as_vector(point) - self._origin, self._direction)

    def point_at(self, abscissa: float) -> Vector:
        return linear_combination((1.0, self._origin), (abscissa, self._direction))

    def to_sub_space(self, point: npt.ArrayLike) -> float:
        return self.abscissa(point)

    def to_space(self, abscissa: float) -> Vector:
        return self.point_at(abscissa)

    def distance(self, point: npt.ArrayLike) -> float:
        p = as_vector(point)
        delta = p - self._origin
        orthogonal_part = delta - dot(delta, self._direction) * self._direction
        return float(np.linalg.norm(orthogonal_part))

    def contains(self, point: npt.ArrayLike) -> bool:
        return self.distance(point) < TOLERANCE

    def is_similar_to(self, line: Line3D) -> bool:
        """Check if both lines hold the same points, whatever their direction."""
        theta = angle(self._direction, line._direction)
        return (theta < TOLERANCE or theta > math.pi - TOLERANCE) and self.contains(line._origin)

    def __repr__(self) -> str:
        return (
            f"Line3D(origin={format_vector(self._origin)}, "
            f"direction={format_vector(self._direction)})"
        )


__all__ = ["Line3D"]
