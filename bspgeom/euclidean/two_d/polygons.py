# bspgeom/euclidean/two_d/polygons.py
"""Polygonal regions of the plane stored as BSP trees of lines.

The interior of a region is on the minus side of its boundary lines. Tree
cells are rebuilt on demand as convex polygons, starting from a square of
half-size ``REGION_CLIP_EXTENT`` that stands in for the whole plane and
clipping it with the cuts met on the way down. Every clipped vertex is
computed as the crossing of two supporting lines, so precision does not
depend on the size of that square.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence

import numpy as np
import numpy.typing as npt

from bspgeom.config import REGION_CLIP_EXTENT, TOLERANCE
from bspgeom.core.vectors import Vector, as_vector
from bspgeom.errors import DegenerateGeometryError
from bspgeom.euclidean.two_d.line import Line2D
from bspgeom.partitioning.bsp_tree import BSPTree, is_empty_tree
from bspgeom.partitioning.builder import build_tree
from bspgeom.partitioning.enums import Location, Side
from bspgeom.utils.logger import get_logger

_log = get_logger("bspgeom.euclidean.two_d.polygons")

# convex cell: (vertex, supporting line of the edge leaving that vertex)
Cell = list[tuple[Vector, Line2D]]


def _signed_area(points: Sequence[Vector]) -> float:
    xs = np.array([p[0] for p in points], dtype=np.float64)
    ys = np.array([p[1] for p in points], dtype=np.float64)
    return 0.5 * float(np.dot(xs, np.roll(ys, -1)) - np.dot(np.roll(xs, -1), ys))


def _root_cell() -> Cell:
    e = REGION_CLIP_EXTENT
    corners = [as_vector(c, 2) for c in ((-e, -e), (e, -e), (e, e), (-e, e))]
    return [(corners[i], Line2D(corners[i], corners[(i + 1) % 4])) for i in range(4)]


def _crossing(a: Vector, b: Vector, va: float, vb: float, edge: Line2D, line: Line2D) -> Vector:
    point = edge.intersection(line)
    if point is None:
        # nearly parallel: fall back to interpolation along the edge
        t = va / (va - vb)
        point = as_vector(a + t * (b - a), 2)
    return point


def _clip(cell: Cell, line: Line2D, keep_plus: bool) -> Cell:
    """Part of a convex cell on one side of ``line`` (boundary included)."""
    if not cell:
        return []
    sign = 1.0 if keep_plus else -1.0
    values = [sign * line.offset(vertex) for vertex, _ in cell]
    clipped: Cell = []
    n = len(cell)
    for i in range(n):
        a, edge = cell[i]
        b = cell[(i + 1) % n][0]
        va, vb = values[i], values[(i + 1) % n]
        a_in = va >= -TOLERANCE
        b_in = vb >= -TOLERANCE
        if a_in:
            clipped.append((a, edge))
        if a_in and not b_in:
            if va <= TOLERANCE:
                # a is on the clipping line, the next kept edge runs along it
                clipped[-1] = (a, line)
            else:
                clipped.append((_crossing(a, b, va, vb, edge, line), line))
        elif b_in and not a_in and vb > TOLERANCE:
            clipped.append((_crossing(a, b, va, vb, edge, line), edge))
    return clipped


def _cell_area(cell: Cell) -> float:
    if len(cell) < 3:
        return 0.0
    return abs(_signed_area([vertex for vertex, _ in cell]))


def _is_empty_cell(cell: Cell) -> bool:
    return _cell_area(cell) <= TOLERANCE


def _is_unbounded_cell(cell: Cell) -> bool:
    limit = 0.5 * REGION_CLIP_EXTENT
    return any(float(np.max(np.abs(vertex))) >= limit for vertex, _ in cell)


def _prune(node: BSPTree, cell: Cell) -> BSPTree:
    """Copy of ``node`` restricted to ``cell`` with empty branches removed."""
    if node.cut is None:
        return BSPTree.leaf(bool(node.attribute) and not _is_empty_cell(cell))
    assert node.plus is not None and node.minus is not None

    line: Line2D = node.cut.hyperplane  # type: ignore[assignment]
    plus_cell = _clip(cell, line, keep_plus=True)
    minus_cell = _clip(cell, line, keep_plus=False)
    plus_empty = _is_empty_cell(plus_cell)
    minus_empty = _is_empty_cell(minus_cell)

    if plus_empty and minus_empty:
        return BSPTree.leaf(False)
    if plus_empty:
        return _prune(node.minus, minus_cell)
    if minus_empty:
        return _prune(node.plus, plus_cell)

    plus = _prune(node.plus, plus_cell)
    minus = _prune(node.minus, minus_cell)
    if plus.is_leaf() and minus.is_leaf() and plus.attribute == minus.attribute:
        return BSPTree.leaf(bool(plus.attribute))
    return BSPTree.node(node.cut.copy_self(), plus, minus)


class PolygonsSet:
    """Region of the plane, the whole plane by default."""

    def __init__(self, tree: BSPTree | None = None) -> None:
        self._tree = tree if tree is not None else BSPTree.leaf(True)

    @classmethod
    def from_vertices(cls, vertices: Sequence[npt.ArrayLike]) -> PolygonsSet:
        """Simple polygon bounded by the given vertices, in either winding."""
        points = [as_vector(v, 2) for v in vertices]
        if len(points) < 3:
            raise DegenerateGeometryError(
                "PolygonsSet.from_vertices", "a polygon needs at least 3 vertices", count=len(points)
            )
        area = _signed_area(points)
        if abs(area) <= TOLERANCE:
            raise DegenerateGeometryError(
                "PolygonsSet.from_vertices", "vertices enclose no area", area=area
            )
        if area < 0:
            points.reverse()

        # counterclockwise boundary: the interior is on the minus side
        segments = []
        for start, end in zip(points, points[1:] + points[:1]):
            if float(np.hypot(*(end - start))) < TOLERANCE:
                continue
            segments.append(Line2D(start, end).segment(start, end))
        return cls(build_tree(segments))

    @classmethod
    def from_box(cls, x_min: float, x_max: float, y_min: float, y_max: float) -> PolygonsSet:
        return cls.from_vertices(
            [(x_min, y_min), (x_max, y_min), (x_max, y_max), (x_min, y_max)]
        )

    def get_tree(self) -> BSPTree:
        return self._tree

    def copy_self(self) -> PolygonsSet:
        return PolygonsSet(self._tree.copy_self())

    def _cells(self, inside: bool) -> Iterator[Cell]:
        stack: list[tuple[BSPTree, Cell]] = [(self._tree, _root_cell())]
        while stack:
            node, cell = stack.pop()
            if _is_empty_cell(cell):
                continue
            if node.cut is None:
                if bool(node.attribute) == inside:
                    yield cell
                continue
            assert node.plus is not None and node.minus is not None
            line: Line2D = node.cut.hyperplane  # type: ignore[assignment]
            stack.append((node.plus, _clip(cell, line, keep_plus=True)))
            stack.append((node.minus, _clip(cell, line, keep_plus=False)))

    def is_empty(self) -> bool:
        return next(self._cells(inside=True), None) is None

    def size(self) -> float:
        """Area of the region, ``inf`` when it is unbounded."""
        total = 0.0
        for cell in self._cells(inside=True):
            if _is_unbounded_cell(cell):
                return math.inf
            total += _cell_area(cell)
        return total

    def check_point(self, point: npt.ArrayLike) -> Location:
        return self._tree.locate(as_vector(point, 2))

    def side(self, line: Line2D) -> Side:
        """Position of the region with respect to ``line``."""
        on_plus = False
        on_minus = False
        for cell in self._cells(inside=True):
            offsets = [line.offset(vertex) for vertex, _ in cell]
            on_plus = on_plus or max(offsets) > TOLERANCE
            on_minus = on_minus or min(offsets) < -TOLERANCE
            if on_plus and on_minus:
                return Side.BOTH
        if on_plus:
            return Side.PLUS
        if on_minus:
            return Side.MINUS
        return Side.HYPER

    def split(self, line: Line2D) -> tuple[BSPTree, BSPTree]:
        """Trees of the parts on the plus and minus sides of ``line``.

        Each returned tree only describes the region inside its own half
        plane; empty parts come back as a single outside leaf.
        """
        root = _root_cell()
        plus_tree = _prune(self._tree, _clip(root, line, keep_plus=True))
        minus_tree = _prune(self._tree, _clip(root, line, keep_plus=False))
        _log.debug(
            f"split region by {line}: plus_empty={is_empty_tree(plus_tree)} "
            f"minus_empty={is_empty_tree(minus_tree)}"
        )
        return plus_tree, minus_tree

    def __repr__(self) -> str:
        return f"PolygonsSet(depth={self._tree.depth()})"


__all__ = ["PolygonsSet"]
