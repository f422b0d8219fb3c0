# tests/test_polygons.py
"""Tests for polygonal regions, the sub-hyperplane regions of planes."""

from __future__ import annotations

import math

import pytest

from bspgeom.errors import DegenerateGeometryError
from bspgeom.euclidean.two_d import Line2D, PolygonsSet
from bspgeom.partitioning import BSPTree, Location, Side, SubHyperplane, is_empty_tree


def _clamp_to_half_plane(tree: BSPTree, boundary: Line2D) -> PolygonsSet:
    """Region of ``tree`` restricted to the minus side of ``boundary``."""
    return PolygonsSet(BSPTree.node(SubHyperplane.whole(boundary), BSPTree.leaf(False), tree))


def test_whole_and_empty_regions() -> None:
    whole = PolygonsSet()
    assert whole.size() == math.inf
    assert not whole.is_empty()
    assert whole.check_point((1e6, -1e6)) is Location.INSIDE

    nothing = PolygonsSet(BSPTree.leaf(False))
    assert nothing.is_empty()
    assert nothing.size() == 0.0


def test_square_area_and_points(unit_square: PolygonsSet) -> None:
    assert unit_square.size() == pytest.approx(1.0)
    assert not unit_square.is_empty()
    assert unit_square.check_point((0.5, 0.5)) is Location.INSIDE
    assert unit_square.check_point((2.0, 2.0)) is Location.OUTSIDE
    assert unit_square.check_point((-0.5, 0.5)) is Location.OUTSIDE
    assert unit_square.check_point((1.0, 0.5)) is Location.BOUNDARY
    assert unit_square.check_point((1.0, 1.0)) is Location.BOUNDARY


def test_winding_does_not_matter() -> None:
    clockwise = PolygonsSet.from_vertices([(0.0, 0.0), (0.0, 2.0), (3.0, 2.0), (3.0, 0.0)])
    assert clockwise.size() == pytest.approx(6.0)
    assert clockwise.check_point((1.0, 1.0)) is Location.INSIDE
    assert clockwise.check_point((4.0, 1.0)) is Location.OUTSIDE


@pytest.mark.parametrize(
    "vertices",
    [
        [(0.0, 0.0), (1.0, 0.0)],
        [(0.0, 0.0), (1.0, 1.0), (2.0, 2.0)],
    ],
    ids=["too_few", "collinear"],
)
def test_degenerate_outlines_rejected(vertices: list[tuple[float, float]]) -> None:
    with pytest.raises(DegenerateGeometryError) as info:
        PolygonsSet.from_vertices(vertices)
    assert info.value.operation == "PolygonsSet.from_vertices"


def test_non_convex_region(l_shape: PolygonsSet) -> None:
    assert l_shape.size() == pytest.approx(3.0)
    assert l_shape.check_point((1.5, 1.5)) is Location.OUTSIDE
    assert l_shape.check_point((0.5, 1.5)) is Location.INSIDE
    assert l_shape.check_point((1.5, 0.5)) is Location.INSIDE
    assert l_shape.check_point((1.5, 1.0)) is Location.BOUNDARY


def test_side_of_lines(unit_square: PolygonsSet) -> None:
    assert unit_square.side(Line2D((3.0, 0.0), (3.0, 1.0))) is Side.MINUS
    assert unit_square.side(Line2D((3.0, 1.0), (3.0, 0.0))) is Side.PLUS
    assert unit_square.side(Line2D((1.0, 0.0), (1.0, 1.0))) is Side.MINUS
    assert unit_square.side(Line2D((0.5, 0.0), (0.5, 1.0))) is Side.BOTH


def test_side_of_non_convex_region(l_shape: PolygonsSet) -> None:
    assert l_shape.side(Line2D((1.5, 0.0), (1.5, 1.0))) is Side.BOTH
    assert l_shape.side(Line2D((0.0, 2.5), (1.0, 2.5))) is Side.PLUS


def test_side_of_empty_region() -> None:
    assert PolygonsSet(BSPTree.leaf(False)).side(Line2D((0.0, 0.0), (1.0, 0.0))) is Side.HYPER


def test_split_crossing_line(unit_square: PolygonsSet) -> None:
    line = Line2D((0.5, 0.0), (0.5, 1.0))
    plus_tree, minus_tree = unit_square.split(line)
    assert not is_empty_tree(plus_tree)
    assert not is_empty_tree(minus_tree)

    plus_part = _clamp_to_half_plane(plus_tree, line.reverse())
    minus_part = _clamp_to_half_plane(minus_tree, line)
    assert plus_part.size() == pytest.approx(0.5)
    assert minus_part.size() == pytest.approx(0.5)

    assert plus_part.check_point((0.75, 0.5)) is Location.INSIDE
    assert plus_part.check_point((0.25, 0.5)) is Location.OUTSIDE
    assert minus_part.check_point((0.25, 0.5)) is Location.INSIDE
    assert minus_part.check_point((0.5, 0.5)) is Location.BOUNDARY


def test_split_missing_line(unit_square: PolygonsSet) -> None:
    plus_tree, minus_tree = unit_square.split(Line2D((3.0, 0.0), (3.0, 1.0)))
    assert is_empty_tree(plus_tree)
    assert plus_tree.is_leaf()
    assert not is_empty_tree(minus_tree)


def test_split_non_convex_region(l_shape: PolygonsSet) -> None:
    line = Line2D((0.0, 1.5), (1.0, 1.5))
    plus_tree, minus_tree = l_shape.split(line)
    below = _clamp_to_half_plane(plus_tree, line.reverse())
    above = _clamp_to_half_plane(minus_tree, line)
    assert below.size() == pytest.approx(2.5)
    assert above.size() == pytest.approx(0.5)
    assert above.check_point((1.5, 1.75)) is Location.OUTSIDE


def test_copy_is_independent(unit_square: PolygonsSet) -> None:
    copy = unit_square.copy_self()
    assert copy.get_tree() is not unit_square.get_tree()
    assert copy.get_tree().cut is not None
    assert copy.get_tree().cut.hyperplane is not unit_square.get_tree().cut.hyperplane  # type: ignore[union-attr]
    assert copy.size() == pytest.approx(1.0)
