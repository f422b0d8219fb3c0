# tests/test_vectors.py
"""Tests for vector helpers and rotation operators."""

from __future__ import annotations

import math

import numpy as np
import pytest

from bspgeom.core import (
    PLUS_I,
    PLUS_J,
    PLUS_K,
    angle,
    apply_rotation,
    as_vector,
    axis_angle_from_rotation,
    cross,
    dot,
    linear_combination,
    orthogonal,
    rotation_about_axis,
    rotation_from_euler,
)
from bspgeom.errors import DegenerateGeometryError


def test_as_vector_is_read_only() -> None:
    vec = as_vector([1, 2, 3])
    assert vec.dtype == np.float64
    with pytest.raises(ValueError):
        vec[0] = 5.0


def test_as_vector_checks_shape() -> None:
    with pytest.raises(ValueError):
        as_vector((1.0, 2.0))
    assert as_vector((1.0, 2.0), 2).shape == (2,)


def test_linear_combination() -> None:
    result = linear_combination((2.0, PLUS_I), (-1.0, PLUS_J), (0.5, PLUS_K))
    np.testing.assert_allclose(result, (2.0, -1.0, 0.5))
    with pytest.raises(ValueError):
        linear_combination()


def test_cross_and_dot() -> None:
    np.testing.assert_allclose(cross(PLUS_I, PLUS_J), PLUS_K)
    assert dot(PLUS_I, PLUS_J) == 0.0


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), math.pi / 2),
        ((1.0, 0.0, 0.0), (1.0, 1e-9, 0.0), 1e-9),
        ((1.0, 0.0, 0.0), (-1.0, 1e-9, 0.0), math.pi - 1e-9),
        ((1.0, 1.0, 0.0), (1.0, 0.0, 0.0), math.pi / 4),
    ],
)
def test_angle(a: tuple[float, ...], b: tuple[float, ...], expected: float) -> None:
    assert angle(as_vector(a), as_vector(b)) == pytest.approx(expected, rel=1e-6, abs=1e-15)


def test_angle_of_zero_vector() -> None:
    with pytest.raises(DegenerateGeometryError):
        angle(as_vector((0.0, 0.0, 0.0)), PLUS_I)


@pytest.mark.parametrize(
    ("vec", "expected"),
    [
        ((0.0, 0.0, 1.0), (0.0, 1.0, 0.0)),
        ((1.0, 0.0, 0.0), (0.0, 0.0, 1.0)),
        ((1.0, 1.0, 1.0), (0.0, 1.0 / math.sqrt(2.0), -1.0 / math.sqrt(2.0))),
        ((1.0, 1.0, 0.0), (1.0 / math.sqrt(2.0), -1.0 / math.sqrt(2.0), 0.0)),
    ],
)
def test_orthogonal_choice(vec: tuple[float, ...], expected: tuple[float, ...]) -> None:
    result = orthogonal(as_vector(vec))
    np.testing.assert_allclose(result, expected, atol=1e-15)
    assert dot(result, as_vector(vec)) == pytest.approx(0.0, abs=1e-12)


def test_orthogonal_of_tiny_vector() -> None:
    with pytest.raises(DegenerateGeometryError) as info:
        orthogonal(as_vector((1e-12, 0.0, 0.0)))
    assert info.value.operation == "orthogonal"


def test_rotation_about_axis() -> None:
    rotation = rotation_about_axis((0.0, 0.0, 2.0), 90.0)
    np.testing.assert_allclose(apply_rotation(rotation, PLUS_I), PLUS_J, atol=1e-12)

    radians = rotation_about_axis(PLUS_K, math.pi / 2, degrees=False)
    np.testing.assert_allclose(apply_rotation(radians, PLUS_I), PLUS_J, atol=1e-12)


def test_rotation_about_zero_axis() -> None:
    with pytest.raises(DegenerateGeometryError):
        rotation_about_axis((0.0, 0.0, 0.0), 30.0)


def test_axis_angle_round_trip() -> None:
    rotation = rotation_from_euler((0.0, 0.0, 45.0))
    angle_deg, axis = axis_angle_from_rotation(rotation)
    assert angle_deg == pytest.approx(45.0)
    np.testing.assert_allclose(axis, PLUS_K, atol=1e-12)

    identity_angle, identity_axis = axis_angle_from_rotation(rotation_from_euler((0.0, 0.0, 0.0)))
    assert identity_angle == 0.0
    np.testing.assert_allclose(identity_axis, PLUS_K)


def test_apply_rotation_on_read_only_vector() -> None:
    vec = as_vector((0.0, 0.0, 1.0))
    assert not vec.flags.writeable

    rotated = apply_rotation(rotation_about_axis(PLUS_I, 90.0), vec)
    np.testing.assert_allclose(rotated, (0.0, -1.0, 0.0), atol=1e-12)
    assert not rotated.flags.writeable
    np.testing.assert_array_equal(vec, (0.0, 0.0, 1.0))
