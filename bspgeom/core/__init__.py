# bspgeom/core/__init__.py
"""Vector value helpers and rotation operators."""

from __future__ import annotations

from bspgeom.core.rotation import (
    apply_rotation,
    axis_angle_from_rotation,
    rotation_about_axis,
    rotation_from_euler,
)
from bspgeom.core.vectors import (
    PLUS_I,
    PLUS_J,
    PLUS_K,
    ZERO_3D,
    Vector,
    angle,
    as_vector,
    cross,
    dot,
    linear_combination,
    norm,
    orthogonal,
)

__all__ = [
    "PLUS_I",
    "PLUS_J",
    "PLUS_K",
    "ZERO_3D",
    "Vector",
    "angle",
    "apply_rotation",
    "as_vector",
    "axis_angle_from_rotation",
    "cross",
    "dot",
    "linear_combination",
    "norm",
    "orthogonal",
    "rotation_about_axis",
    "rotation_from_euler",
]
