# bspgeom/partitioning/enums.py
"""Enumerations shared by every dimension of the partitioning machinery."""

from __future__ import annotations

from enum import Enum


class Side(str, Enum):
    """Position of a sub-hyperplane with respect to a hyperplane."""

    PLUS = "plus"
    MINUS = "minus"
    BOTH = "both"
    HYPER = "hyper"


class Location(str, Enum):
    """Position of a point with respect to a region."""

    INSIDE = "inside"
    OUTSIDE = "outside"
    BOUNDARY = "boundary"


class HyperplaneKind(str, Enum):
    """Tag identifying which concrete hyperplane a value is.

    ``side`` and ``split`` dispatch on this tag to check that a
    sub-hyperplane lives in a compatible space.
    """

    LINE_2D = "line_2d"
    PLANE_3D = "plane_3d"


__all__ = ["HyperplaneKind", "Location", "Side"]
