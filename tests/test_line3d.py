# tests/test_line3d.py
"""Tests for 3D lines."""

from __future__ import annotations

import math

import numpy as np
import pytest

from bspgeom.errors import DegenerateGeometryError
from bspgeom.euclidean.three_d import Line3D


@pytest.fixture
def vertical_line() -> Line3D:
    return Line3D((1.0, 2.0, 3.0), (0.0, 0.0, 2.0))


def test_normalized_storage(vertical_line: Line3D) -> None:
    np.testing.assert_allclose(vertical_line.direction, (0.0, 0.0, 1.0))
    np.testing.assert_allclose(vertical_line.origin, (1.0, 2.0, 0.0))


def test_abscissa_mapping(vertical_line: Line3D) -> None:
    assert vertical_line.abscissa((1.0, 2.0, 5.0)) == pytest.approx(5.0)
    assert vertical_line.to_sub_space((7.0, 7.0, -2.0)) == pytest.approx(-2.0)
    np.testing.assert_allclose(vertical_line.point_at(-1.0), (1.0, 2.0, -1.0))
    np.testing.assert_allclose(vertical_line.to_space(4.0), (1.0, 2.0, 4.0))


def test_distance_and_contains(vertical_line: Line3D) -> None:
    assert vertical_line.distance((4.0, 6.0, 0.0)) == pytest.approx(5.0)
    assert vertical_line.contains((1.0, 2.0, 100.0))
    assert not vertical_line.contains((1.0, 2.1, 0.0))


def test_revert_and_similarity(vertical_line: Line3D) -> None:
    reverted = vertical_line.revert()
    np.testing.assert_allclose(reverted.direction, (0.0, 0.0, -1.0))
    assert vertical_line.is_similar_to(reverted)
    assert vertical_line.is_similar_to(vertical_line.copy_self())
    assert not vertical_line.is_similar_to(Line3D((0.0, 0.0, 0.0), (0.0, 0.0, 1.0)))


def test_through_two_points() -> None:
    line = Line3D.through((0.0, 0.0, 1.0), (1.0, 1.0, 1.0))
    half = 1.0 / math.sqrt(2.0)
    np.testing.assert_allclose(line.direction, (half, half, 0.0))
    assert line.contains((-3.0, -3.0, 1.0))


def test_degenerate_direction() -> None:
    with pytest.raises(DegenerateGeometryError) as info:
        Line3D((0.0, 0.0, 0.0), (0.0, 0.0, 0.0))
    assert info.value.operation == "Line3D.reset"
