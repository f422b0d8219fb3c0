# bspgeom/euclidean/two_d/line.py
"""Oriented lines of the plane, the hyperplanes of 2D space."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy.typing as npt

from bspgeom.config import TOLERANCE
from bspgeom.core.vectors import Vector, as_vector
from bspgeom.errors import DegenerateGeometryError
from bspgeom.euclidean.one_d.intervals import IntervalsSet
from bspgeom.partitioning.enums import HyperplaneKind, Side
from bspgeom.partitioning.sub_hyperplane import SplitSubHyperplane, SubHyperplane
from bspgeom.utils.format import format_vector
from bspgeom.utils.logger import get_logger

if TYPE_CHECKING:
    from bspgeom.euclidean.two_d.polygons import PolygonsSet

_log = get_logger("bspgeom.euclidean.two_d.line")


class Line2D:
    """Oriented line through two points.

    The line goes from ``p`` to ``q``; its plus side is on the right of that
    direction. The line is stored as ``sin*x - cos*y + origin_offset = 0``.
    """

    kind = HyperplaneKind.LINE_2D

    def __init__(self, p: npt.ArrayLike, q: npt.ArrayLike) -> None:
        self.cos = 1.0
        self.sin = 0.0
        self.origin_offset = 0.0
        self.reset(p, q)

    @classmethod
    def from_angle(cls, point: npt.ArrayLike, angle: float) -> Line2D:
        """Line through ``point`` with direction angle ``angle`` (radians)."""
        start = as_vector(point, 2)
        end = as_vector((start[0] + math.cos(angle), start[1] + math.sin(angle)), 2)
        return cls(start, end)

    def reset(self, p: npt.ArrayLike, q: npt.ArrayLike) -> None:
        start = as_vector(p, 2)
        end = as_vector(q, 2)
        dx = float(end[0] - start[0])
        dy = float(end[1] - start[1])
        length = math.hypot(dx, dy)
        if length < TOLERANCE:
            _log.debug(f"rejecting line through coincident points {format_vector(start)}")
            raise DegenerateGeometryError(
                "Line2D.reset",
                "points are too close to define a line",
                p=format_vector(start),
                q=format_vector(end),
            )
        self.cos = dx / length
        self.sin = dy / length
        self.origin_offset = (float(end[0]) * float(start[1]) - float(start[0]) * float(end[1])) / length

    def copy_self(self) -> Line2D:
        line = Line2D.__new__(Line2D)
        line.cos = self.cos
        line.sin = self.sin
        line.origin_offset = self.origin_offset
        return line

    def revert_self(self) -> None:
        """Flip the orientation, keeping the same point set."""
        self.cos = -self.cos
        self.sin = -self.sin
        self.origin_offset = -self.origin_offset

    def reverse(self) -> Line2D:
        line = self.copy_self()
        line.revert_self()
        return line

    @property
    def angle(self) -> float:
        """Direction angle in ``[0, 2*pi)``."""
        return math.atan2(self.sin, self.cos) % (2.0 * math.pi)

    @property
    def direction(self) -> Vector:
        return as_vector((self.cos, self.sin), 2)

    def to_sub_space(self, point: npt.ArrayLike) -> float:
        """Abscissa of the projection of ``point`` on the line."""
        p = as_vector(point, 2)
        return self.cos * float(p[0]) + self.sin * float(p[1])

    def to_space(self, abscissa: float) -> Vector:
        return as_vector(
            (
                abscissa * self.cos - self.origin_offset * self.sin,
                abscissa * self.sin + self.origin_offset * self.cos,
            ),
            2,
        )

    def offset(self, point: npt.ArrayLike) -> float:
        p = as_vector(point, 2)
        return self.sin * float(p[0]) - self.cos * float(p[1]) + self.origin_offset

    def offset_of(self, line: Line2D) -> float:
        """Offset of a parallel line; meaningless for crossing lines."""
        if self.same_orientation_as(line):
            return self.origin_offset - line.origin_offset
        return self.origin_offset + line.origin_offset

    def contains(self, point: npt.ArrayLike) -> bool:
        return abs(self.offset(point)) < TOLERANCE

    def same_orientation_as(self, other: Line2D) -> bool:
        return (self.sin * other.sin + self.cos * other.cos) >= 0.0

    def is_parallel_to(self, other: Line2D) -> bool:
        return abs(self.sin * other.cos - self.cos * other.sin) < TOLERANCE

    def intersection(self, other: Line2D) -> Vector | None:
        """Crossing point of two lines, None if they are parallel."""
        d = self.sin * other.cos - other.sin * self.cos
        if abs(d) < TOLERANCE:
            return None
        return as_vector(
            (
                (self.cos * other.origin_offset - other.cos * self.origin_offset) / d,
                (self.sin * other.origin_offset - other.sin * self.origin_offset) / d,
            ),
            2,
        )

    def whole_hyperplane(self) -> IntervalsSet:
        return IntervalsSet()

    def whole_space(self) -> PolygonsSet:
        from bspgeom.euclidean.two_d.polygons import PolygonsSet

        return PolygonsSet()

    def segment(self, start: npt.ArrayLike, end: npt.ArrayLike) -> SubHyperplane:
        """Sub-hyperplane between the projections of two points."""
        return SubHyperplane(
            self, IntervalsSet.between(self.to_sub_space(start), self.to_sub_space(end))
        )

    def _embedding_line(self, sub: SubHyperplane) -> Line2D:
        hyperplane = sub.hyperplane
        if getattr(hyperplane, "kind", None) is not HyperplaneKind.LINE_2D:
            raise TypeError(
                f"Line2D can only classify segments of 2D lines, got {type(hyperplane).__name__}"
            )
        return hyperplane  # type: ignore[return-value]

    def _abscissa_orientation(self, other: Line2D) -> bool:
        # moving along ``other`` by +1 changes our offset by this amount
        return (self.sin * other.cos - self.cos * other.sin) > 0.0

    def side(self, sub: SubHyperplane) -> Side:
        other = self._embedding_line(sub)
        crossing = self.intersection(other)
        if crossing is None:
            global_offset = self.offset_of(other)
            if global_offset < -TOLERANCE:
                return Side.MINUS
            if global_offset > TOLERANCE:
                return Side.PLUS
            return Side.HYPER

        region: IntervalsSet = sub.remaining_region  # type: ignore[assignment]
        return region.side(other.to_sub_space(crossing), self._abscissa_orientation(other))

    def split(self, sub: SubHyperplane) -> SplitSubHyperplane:
        other = self._embedding_line(sub)
        crossing = self.intersection(other)
        if crossing is None:
            if self.offset_of(other) > TOLERANCE:
                return SplitSubHyperplane(sub, None)
            return SplitSubHyperplane(None, sub)

        region: IntervalsSet = sub.remaining_region  # type: ignore[assignment]
        upper, lower = region.split(other.to_sub_space(crossing))
        plus_part, minus_part = (
            (upper, lower) if self._abscissa_orientation(other) else (lower, upper)
        )
        return SplitSubHyperplane(
            SubHyperplane(other.copy_self(), plus_part),
            SubHyperplane(other.copy_self(), minus_part),
        )

    def __repr__(self) -> str:
        point = self.to_space(0.0)
        return f"Line2D(point={format_vector(point)}, direction={format_vector(self.direction)})"


__all__ = ["Line2D"]
