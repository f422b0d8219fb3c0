# bspgeom/core/vectors.py
"""Immutable NumPy vectors and the handful of operations planes need."""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

from bspgeom.config import ORTHOGONAL_THRESHOLD, TOLERANCE
from bspgeom.errors import DegenerateGeometryError
from bspgeom.utils.format import format_vector

Vector = npt.NDArray[np.float64]


def as_vector(values: npt.ArrayLike, dim: int = 3) -> Vector:
    """Return a read-only float64 copy of ``values`` with shape ``(dim,)``.

    Read-only arrays behave as value types: they can be shared between
    planes without one instance mutating another's frame.
    """
    vec = np.array(values, dtype=np.float64).reshape(-1)
    if vec.shape != (dim,):
        raise ValueError(f"expected {dim} coordinates, got shape {vec.shape}")
    vec.setflags(write=False)
    return vec


def norm(vec: Vector) -> float:
    return float(np.linalg.norm(vec))


def dot(a: Vector, b: Vector) -> float:
    return float(np.dot(a, b))


def cross(a: Vector, b: Vector) -> Vector:
    return as_vector(np.cross(a, b))


def linear_combination(*terms: tuple[float, Vector]) -> Vector:
    """Compute ``a1*v1 + a2*v2 + ...`` for ``(a_i, v_i)`` pairs."""
    if not terms:
        raise ValueError("linear_combination needs at least one term")
    dim = len(terms[0][1])
    acc = np.zeros(dim, dtype=np.float64)
    for scale, vec in terms:
        acc += float(scale) * np.asarray(vec, dtype=np.float64)
    return as_vector(acc, dim)


def angle(a: Vector, b: Vector) -> float:
    """Angular separation of two vectors, in radians within ``[0, pi]``.

    Near-parallel and near-antiparallel vectors go through the cross product
    norm, where ``acos`` of the dot product would lose precision.
    """
    norm_product = norm(a) * norm(b)
    if norm_product == 0.0:
        raise DegenerateGeometryError(
            "angle", "zero norm", a=format_vector(a), b=format_vector(b)
        )

    cosine = dot(a, b) / norm_product
    if cosine < -0.9999 or cosine > 0.9999:
        sine = norm(np.cross(a, b))
        if cosine >= 0:
            return math.asin(sine / norm_product)
        return math.pi - math.asin(sine / norm_product)
    return math.acos(cosine)


def orthogonal(vec: Vector) -> Vector:
    """Return a unit vector orthogonal to ``vec``.

    The result is deterministic: the component chosen to be zeroed is the
    first one whose magnitude is below ``ORTHOGONAL_THRESHOLD * |vec|``,
    which keeps the remaining pair well away from zero.
    """
    x, y, z = (float(c) for c in vec)
    length = norm(vec)
    if length < TOLERANCE:
        raise DegenerateGeometryError(
            "orthogonal", "vector norm too small", vec=format_vector(vec)
        )

    threshold = ORTHOGONAL_THRESHOLD * length
    if abs(x) <= threshold:
        inverse = 1.0 / math.sqrt(y * y + z * z)
        return as_vector((0.0, inverse * z, -inverse * y))
    if abs(y) <= threshold:
        inverse = 1.0 / math.sqrt(x * x + z * z)
        return as_vector((-inverse * z, 0.0, inverse * x))
    inverse = 1.0 / math.sqrt(x * x + y * y)
    return as_vector((inverse * y, -inverse * x, 0.0))


ZERO_3D = as_vector((0.0, 0.0, 0.0))
PLUS_I = as_vector((1.0, 0.0, 0.0))
PLUS_J = as_vector((0.0, 1.0, 0.0))
PLUS_K = as_vector((0.0, 0.0, 1.0))


__all__ = [
    "Vector",
    "ZERO_3D",
    "PLUS_I",
    "PLUS_J",
    "PLUS_K",
    "angle",
    "as_vector",
    "cross",
    "dot",
    "linear_combination",
    "norm",
    "orthogonal",
]
