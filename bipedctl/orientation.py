"""Rotation utilities for 3D orientation.

Orientation is described with coordinate transformations: a rotation matrix
maps world coordinates into body coordinates, which is the transpose of the
matrix that would rotate the body itself. Quaternions are stored as
``[w, x, y, z]``.
"""

from __future__ import annotations

import math
from enum import Enum

import numpy as np

QUATERNION_DERIVATIVE_STABILIZATION = 0.1


class CoordinateAxis(Enum):
    """Axis of an elementary coordinate rotation."""

    X = "x"
    Y = "y"
    Z = "z"


def _vector(value, size: int, what: str) -> np.ndarray:
    arr = np.asarray(value, dtype=float)
    if arr.shape not in ((size,), (size, 1)):
        raise ValueError(f"{what} must have {size} elements, got shape {arr.shape}")
    return arr.reshape(size)


def _matrix3(value, what: str) -> np.ndarray:
    arr = np.asarray(value, dtype=float)
    if arr.shape != (3, 3):
        raise ValueError(f"{what} must be a 3x3 matrix, got shape {arr.shape}")
    return arr


def rad2deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * 180.0 / math.pi


def deg2rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * math.pi / 180.0


def coordinate_rotation(axis: CoordinateAxis, theta: float) -> np.ndarray:
    """Coordinate transformation into a frame rotated by ``theta`` about ``axis``.

    Applying the result to a vector rotates that vector by ``-theta``.
    """
    s = math.sin(theta)
    c = math.cos(theta)
    if axis is CoordinateAxis.X:
        rows = [[1.0, 0.0, 0.0], [0.0, c, s], [0.0, -s, c]]
    elif axis is CoordinateAxis.Y:
        rows = [[c, 0.0, -s], [0.0, 1.0, 0.0], [s, 0.0, c]]
    elif axis is CoordinateAxis.Z:
        rows = [[c, s, 0.0], [-s, c, 0.0], [0.0, 0.0, 1.0]]
    else:
        raise ValueError(f"unknown coordinate axis: {axis!r}")
    return np.array(rows)


def rpy_to_rot_mat(v) -> np.ndarray:
    """Rotation matrix from roll, pitch and yaw."""
    roll, pitch, yaw = _vector(v, 3, "rpy")
    return (
        coordinate_rotation(CoordinateAxis.X, roll)
        @ coordinate_rotation(CoordinateAxis.Y, pitch)
        @ coordinate_rotation(CoordinateAxis.Z, yaw)
    )


def vector_to_skew_mat(v) -> np.ndarray:
    """Skew-symmetric cross-product matrix of a 3-vector."""
    x, y, z = _vector(v, 3, "vector")
    return np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])


def mat_to_skew_vec(m) -> np.ndarray:
    """Skew-symmetric part of a 3x3 matrix as a 3-vector."""
    m = _matrix3(m, "matrix")
    return 0.5 * np.array(
        [m[2, 1] - m[1, 2], m[0, 2] - m[2, 0], m[1, 0] - m[0, 1]]
    )


def rotation_matrix_to_quaternion(r1) -> np.ndarray:
    """Orientation quaternion of a coordinate transformation matrix."""
    r = _matrix3(r1, "rotation matrix").T
    q = np.empty(4)
    diagonal_sum = float(r[0, 0] + r[1, 1] + r[2, 2])
    if diagonal_sum > 0.0:
        s = math.sqrt(diagonal_sum + 1.0) * 2.0
        q[0] = 0.25 * s
        q[1] = (r[2, 1] - r[1, 2]) / s
        q[2] = (r[0, 2] - r[2, 0]) / s
        q[3] = (r[1, 0] - r[0, 1]) / s
    elif r[0, 0] > r[1, 1] and r[0, 0] > r[2, 2]:
        s = math.sqrt(1.0 + r[0, 0] - r[1, 1] - r[2, 2]) * 2.0
        q[0] = (r[2, 1] - r[1, 2]) / s
        q[1] = 0.25 * s
        q[2] = (r[0, 1] + r[1, 0]) / s
        q[3] = (r[0, 2] + r[2, 0]) / s
    elif r[1, 1] > r[2, 2]:
        s = math.sqrt(1.0 + r[1, 1] - r[0, 0] - r[2, 2]) * 2.0
        q[0] = (r[0, 2] - r[2, 0]) / s
        q[1] = (r[0, 1] + r[1, 0]) / s
        q[2] = 0.25 * s
        q[3] = (r[1, 2] + r[2, 1]) / s
    else:
        s = math.sqrt(1.0 + r[2, 2] - r[0, 0] - r[1, 1]) * 2.0
        q[0] = (r[1, 0] - r[0, 1]) / s
        q[1] = (r[0, 2] + r[2, 0]) / s
        q[2] = (r[1, 2] + r[2, 1]) / s
        q[3] = 0.25 * s
    return q


def quaternion_to_rotation_matrix(q) -> np.ndarray:
    """Coordinate transformation into the frame oriented as ``q``."""
    e0, e1, e2, e3 = _vector(q, 4, "quaternion")
    r = np.array(
        [
            [1 - 2 * (e2 * e2 + e3 * e3), 2 * (e1 * e2 - e0 * e3), 2 * (e1 * e3 + e0 * e2)],
            [2 * (e1 * e2 + e0 * e3), 1 - 2 * (e1 * e1 + e3 * e3), 2 * (e2 * e3 - e0 * e1)],
            [2 * (e1 * e3 - e0 * e2), 2 * (e2 * e3 + e0 * e1), 1 - 2 * (e1 * e1 + e2 * e2)],
        ]
    )
    return r.T


def quat_to_rpy(q) -> np.ndarray:
    """Roll, pitch and yaw of a quaternion (ZYX order)."""
    q = _vector(q, 4, "quaternion")
    sin_pitch = min(2.0 * (q[2] * q[0] - q[1] * q[3]), 1.00001)
    roll = math.atan2(
        2.0 * (q[0] * q[1] + q[2] * q[3]), 1.0 - 2.0 * (q[1] * q[1] + q[2] * q[2])
    )
    with np.errstate(invalid="ignore"):
        pitch = float(np.arcsin(sin_pitch))
    yaw = math.atan2(
        2.0 * (q[0] * q[3] + q[1] * q[2]), 1.0 - 2.0 * (q[2] * q[2] + q[3] * q[3])
    )
    return np.array([roll, pitch, yaw])


def rpy_to_quat(rpy) -> np.ndarray:
    """Quaternion from roll, pitch and yaw."""
    return rotation_matrix_to_quaternion(rpy_to_rot_mat(rpy))


def quat_to_so3(q) -> np.ndarray:
    """Rotation vector of a quaternion, computed from its scalar part."""
    q = _vector(q, 4, "quaternion")
    with np.errstate(invalid="ignore", divide="ignore"):
        theta = 2.0 * np.arccos(q[0])
        return theta * q[1:] / np.sin(theta / 2.0)


def rotation_matrix_to_rpy(r) -> np.ndarray:
    """Roll, pitch and yaw of a rotation matrix."""
    return quat_to_rpy(rotation_matrix_to_quaternion(r))


def quat_derivative(q, omega) -> np.ndarray:
    """Time derivative of ``q`` for a body-frame angular velocity ``omega``."""
    q = _vector(q, 4, "quaternion")
    omega = _vector(omega, 3, "angular velocity")
    big_q = np.array(
        [
            [q[0], -q[1], -q[2], -q[3]],
            [q[1], q[0], -q[3], q[2]],
            [q[2], q[3], q[0], -q[1]],
            [q[3], -q[2], q[1], q[0]],
        ]
    )
    stabilization = (
        QUATERNION_DERIVATIVE_STABILIZATION
        * np.linalg.norm(omega)
        * (1.0 - np.linalg.norm(q))
    )
    qq = np.concatenate(([stabilization], omega))
    return 0.5 * big_q @ qq


def quat_product(q1, q2) -> np.ndarray:
    """Hamilton product ``q1 * q2``."""
    q1 = _vector(q1, 4, "quaternion")
    q2 = _vector(q2, 4, "quaternion")
    r1, v1 = q1[0], q1[1:]
    r2, v2 = q2[0], q2[1:]
    r = r1 * r2 - v1 @ v2
    v = r1 * v2 + r2 * v1 + np.cross(v1, v2)
    return np.concatenate(([r], v))


def _step_quaternion(omega, dt) -> np.ndarray:
    omega = _vector(omega, 3, "angular velocity")
    ang = float(np.linalg.norm(omega))
    axis = omega / ang if ang > 0 else np.array([1.0, 0.0, 0.0])
    ang *= dt
    return np.concatenate(([math.cos(ang / 2)], math.sin(ang / 2) * axis))


def integrate_quat(quat, omega, dt) -> np.ndarray:
    """Integrate ``quat`` over ``dt`` with a world-frame angular velocity."""
    quat_new = quat_product(_step_quaternion(omega, dt), quat)
    return quat_new / np.linalg.norm(quat_new)


def integrate_quat_implicit(quat, omega, dt) -> np.ndarray:
    """Integrate ``quat`` over ``dt``, applying the step on the right."""
    quat_new = quat_product(quat, _step_quaternion(omega, dt))
    return quat_new / np.linalg.norm(quat_new)


def quaternion_to_so3(quat) -> np.ndarray:
    """Rotation vector of a quaternion, computed from its vector part."""
    quat = _vector(quat, 4, "quaternion")
    so3 = quat[1:].copy()
    with np.errstate(invalid="ignore"):
        theta = 2.0 * float(np.arcsin(np.sqrt(so3 @ so3)))
    if abs(theta) < 0.0000001:
        return np.zeros(3)
    return so3 / math.sin(theta / 2.0) * theta


def so3_to_quat(so3) -> np.ndarray:
    """Quaternion of a rotation vector."""
    so3 = _vector(so3, 3, "rotation vector")
    theta = math.sqrt(float(so3 @ so3))
    if abs(theta) < 1.0e-6:
        return np.array([1.0, 0.0, 0.0, 0.0])
    half = math.sin(theta / 2.0)
    return np.concatenate(([math.cos(theta / 2.0)], so3 / theta * half))