"""Axis-angle rotations and 4x4 column-major matrices.

A rotation vector ``r`` is ``(angle_in_degrees, ux, uy, uz)``; the axis
need not be unit length, and a zero axis means the identity.  Matrices are
flat sequences of 16 numbers in column-major order.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

__all__ = [
    "rotate",
    "axis_angle_to_matrix",
    "vector_to_matrix",
    "matrix_to_vector",
    "multiply_matrices",
    "vector_multiply_left",
    "cross_product",
]

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def _unit_axis(u0: float, u1: float, u2: float):
    norm2 = u0 * u0 + u1 * u1 + u2 * u2
    if norm2 <= 0.0:
        return None
    norm = math.sqrt(norm2)
    return u0 / norm, u1 / norm, u2 / norm


def rotate(r: Sequence[float], x: Sequence[float]) -> Tuple[float, float, float]:
    """Rotate the 3-vector ``x`` by the rotation vector ``r``."""
    axis = _unit_axis(r[1], r[2], r[3])
    if axis is None:
        return (x[0], x[1], x[2])
    u0, u1, u2 = axis
    ang = math.radians(r[0])
    c, s = math.cos(ang), math.sin(ang)
    ux = u0 * x[0] + u1 * x[1] + u2 * x[2]
    v0, v1, v2 = x[0] - ux * u0, x[1] - ux * u1, x[2] - ux * u2
    w0, w1, w2 = u1 * v2 - u2 * v1, u2 * v0 - u0 * v2, u0 * v1 - u1 * v0
    return (
        ux * u0 + c * v0 + s * w0,
        ux * u1 + c * v1 + s * w1,
        ux * u2 + c * v2 + s * w2,
    )


def axis_angle_to_matrix(
    angle_deg: float, u0: float, u1: float, u2: float
) -> List[float]:
    """Column-major 4x4 matrix of the rotation by ``angle_deg`` about (u0, u1, u2)."""
    axis = _unit_axis(u0, u1, u2)
    if axis is None:
        return list(_IDENTITY)
    u0, u1, u2 = axis
    ang = math.radians(angle_deg)
    c, s = math.cos(ang), math.sin(ang)
    d = 1.0 - c
    return [
        u0 * u0 * d + c, u1 * u0 * d + u2 * s, u0 * u2 * d - u1 * s, 0.0,
        u0 * u1 * d - u2 * s, u1 * u1 * d + c, u1 * u2 * d + u0 * s, 0.0,
        u0 * u2 * d + u1 * s, u1 * u2 * d - u0 * s, u2 * u2 * d + c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ]


def vector_to_matrix(r: Sequence[float]) -> List[float]:
    """Column-major 4x4 matrix of the rotation vector ``r``."""
    return axis_angle_to_matrix(r[0], r[1], r[2], r[3])


def matrix_to_vector(m: Sequence[float]) -> Tuple[float, float, float, float]:
    """Rotation vector (degrees, unit axis) of a column-major rotation matrix.

    Returns all zeros when the rotation has no well-defined axis.
    """
    su2 = (m[1] - m[4]) / 2.0
    su1 = (m[8] - m[2]) / 2.0
    su0 = (m[6] - m[9]) / 2.0
    s = math.sqrt(su0 * su0 + su1 * su1 + su2 * su2)
    c = 1.0 - (3.0 - m[0] - m[5] - m[10]) / 2.0
    if s == 0.0:
        return (0.0, 0.0, 0.0, 0.0)
    return (math.degrees(math.atan2(s, c)), su0 / s, su1 / s, su2 / s)


def multiply_matrices(a: Sequence[float], b: Sequence[float]) -> List[float]:
    """Product ``a * b`` of two column-major 4x4 matrices."""
    return [
        sum(a[i + 4 * k] * b[k + 4 * j] for k in range(4))
        for j in range(4)
        for i in range(4)
    ]


def vector_multiply_left(
    angle_deg: float, u0: float, u1: float, u2: float, r: Sequence[float]
) -> Tuple[float, float, float, float]:
    """Compose the rotation (angle_deg, u0, u1, u2) after ``r``; return the result."""
    a = axis_angle_to_matrix(angle_deg, u0, u1, u2)
    b = vector_to_matrix(r)
    return matrix_to_vector(multiply_matrices(a, b))


def cross_product(
    x: Sequence[float], y: Sequence[float]
) -> Tuple[float, float, float]:
    """Cross product of two 3-vectors."""
    return (
        x[1] * y[2] - x[2] * y[1],
        x[2] * y[0] - x[0] * y[2],
        x[0] * y[1] - x[1] * y[0],
    )