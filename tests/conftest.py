# tests/conftest.py
"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from bspgeom.euclidean.three_d import Plane
    from bspgeom.euclidean.two_d import PolygonsSet
    from bspgeom.partitioning import SubHyperplane


@pytest.fixture
def xy_plane() -> Plane:
    """Plane z = 0 with normal +z."""
    from bspgeom.euclidean.three_d import Plane

    return Plane((0.0, 0.0, 1.0))


@pytest.fixture
def tilted_plane() -> Plane:
    """Plane through (1, 2, 3) with normal (1, 1, 1)."""
    from bspgeom.euclidean.three_d import Plane

    return Plane.from_point_and_normal((1.0, 2.0, 3.0), (1.0, 1.0, 1.0))


@pytest.fixture
def unit_square() -> PolygonsSet:
    """Unit square [0, 1] x [0, 1]."""
    from bspgeom.euclidean.two_d import PolygonsSet

    return PolygonsSet.from_box(0.0, 1.0, 0.0, 1.0)


@pytest.fixture
def l_shape() -> PolygonsSet:
    """Non-convex L-shaped polygon made of three unit squares."""
    from bspgeom.euclidean.two_d import PolygonsSet

    return PolygonsSet.from_vertices(
        [(0.0, 0.0), (2.0, 0.0), (2.0, 1.0), (1.0, 1.0), (1.0, 2.0), (0.0, 2.0)]
    )


@pytest.fixture
def vertical_facet() -> SubHyperplane:
    """Square facet in the plane x = 0 spanning y, z in [-1, 1]."""
    from bspgeom.euclidean.three_d import facet

    return facet([(0.0, -1.0, -1.0), (0.0, 1.0, -1.0), (0.0, 1.0, 1.0), (0.0, -1.0, 1.0)])


@pytest.fixture
def horizontal_facet() -> Callable[[float], SubHyperplane]:
    """Factory of unit square facets at a given height, normal +z."""
    from bspgeom.euclidean.three_d import facet

    def _make(z: float) -> SubHyperplane:
        return facet([(0.0, 0.0, z), (1.0, 0.0, z), (1.0, 1.0, z), (0.0, 1.0, z)])

    return _make
