# bspgeom/core/rotation.py
"""Rotation operators: axis-angle and Euler builders on top of SciPy."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt
from scipy.spatial.transform import Rotation as SciRot

from bspgeom.config import TOLERANCE
from bspgeom.core.vectors import Vector, as_vector, norm
from bspgeom.errors import DegenerateGeometryError
from bspgeom.utils.format import format_vector


def rotation_about_axis(
    axis: npt.ArrayLike, angle: float, degrees: bool = True
) -> SciRot:
    """Build the rotation of ``angle`` around ``axis`` (right-hand rule).

    Args:
        axis: Rotation axis, any non-zero length
        angle: Rotation angle
        degrees: Interpret ``angle`` in degrees if True, radians if False

    Returns:
        SciPy rotation operator
    """
    vec = as_vector(axis)
    length = norm(vec)
    if length < TOLERANCE:
        raise DegenerateGeometryError(
            "rotation_about_axis", "axis norm too small", axis=format_vector(vec)
        )
    theta = np.deg2rad(angle) if degrees else float(angle)
    return SciRot.from_rotvec(vec / length * theta)


def rotation_from_euler(
    angles: npt.ArrayLike, seq: str = "xyz", degrees: bool = True
) -> SciRot:
    """Build a rotation from Euler angles.

    Args:
        angles: Euler angles in ``seq`` order
        seq: Euler sequence (e.g., 'xyz', 'zyx')
        degrees: Input angles in degrees if True, radians if False
    """
    return SciRot.from_euler(seq, angles, degrees=degrees)


def axis_angle_from_rotation(rotation: SciRot) -> tuple[float, Vector]:
    """Convert a rotation to axis-angle representation.

    Returns:
        Tuple of (angle_degrees, axis_unit_vector)
    """
    rotvec = rotation.as_rotvec()

    angle_rad = float(np.linalg.norm(rotvec))
    angle_deg = angle_rad * 180.0 / np.pi

    if angle_rad > 1e-12:
        axis = as_vector(rotvec / angle_rad)
    else:
        axis = as_vector((0.0, 0.0, 1.0))  # Arbitrary axis for zero rotation

    return angle_deg, axis


def apply_rotation(rotation: SciRot, vec: Vector) -> Vector:
    """Rotate a single vector, returning an immutable result."""
    # Rotation.apply needs a writeable buffer
    return as_vector(rotation.apply(np.array(vec, dtype=np.float64)))


__all__ = [
    "apply_rotation",
    "axis_angle_from_rotation",
    "rotation_about_axis",
    "rotation_from_euler",
]
