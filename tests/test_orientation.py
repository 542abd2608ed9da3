import math

import numpy as np
import pytest

from bipedctl import orientation as ori

QUATS = [
    np.array([1.0, 0.0, 0.0, 0.0]),
    np.array([0.0, 1.0, 0.0, 0.0]),
    np.array([0.0, 0.0, 1.0, 0.0]),
    np.array([0.0, 0.0, 0.0, 1.0]),
    np.array([0.9, 0.1, -0.3, 0.2]) / np.linalg.norm([0.9, 0.1, -0.3, 0.2]),
    np.array([0.2, -0.7, 0.5, 0.4]) / np.linalg.norm([0.2, -0.7, 0.5, 0.4]),
]

RPYS = [
    np.array([0.1, -0.2, 0.3]),
    np.array([-1.0, 0.5, 2.5]),
    np.array([0.0, 0.0, 0.0]),
    np.array([2.0, -1.2, -2.9]),
]


def _same_rotation(q1, q2):
    return np.allclose(q1, q2, atol=1e-9) or np.allclose(q1, -q2, atol=1e-9)


def test_rad_deg_conversion():
    assert ori.rad2deg(math.pi) == pytest.approx(180.0)
    assert ori.deg2rad(180.0) == pytest.approx(math.pi)
    assert ori.deg2rad(ori.rad2deg(0.37)) == pytest.approx(0.37)


def test_coordinate_rotation_z_quarter_turn():
    r = ori.coordinate_rotation(ori.CoordinateAxis.Z, math.pi / 2)
    assert np.allclose(r, [[0, 1, 0], [-1, 0, 0], [0, 0, 1]])


@pytest.mark.parametrize("axis", list(ori.CoordinateAxis))
def test_coordinate_rotation_composes(axis):
    a = ori.coordinate_rotation(axis, 0.3)
    b = ori.coordinate_rotation(axis, 0.5)
    assert np.allclose(a @ b, ori.coordinate_rotation(axis, 0.8))
    assert np.allclose(a @ a.T, np.eye(3))


def test_coordinate_rotation_rejects_unknown_axis():
    with pytest.raises(ValueError):
        ori.coordinate_rotation("w", 0.1)


@pytest.mark.parametrize("rpy", RPYS)
def test_rpy_to_rot_mat_is_proper_rotation(rpy):
    r = ori.rpy_to_rot_mat(rpy)
    assert np.allclose(r @ r.T, np.eye(3))
    assert np.linalg.det(r) == pytest.approx(1.0)


def test_skew_round_trip_and_cross_product():
    v = np.array([0.4, -1.5, 2.0])
    w = np.array([1.0, 0.3, -0.7])
    m = ori.vector_to_skew_mat(v)
    assert np.allclose(m, -m.T)
    assert np.allclose(m @ w, np.cross(v, w))
    assert np.allclose(ori.mat_to_skew_vec(m), v)


def test_vector_shape_is_checked():
    with pytest.raises(ValueError):
        ori.vector_to_skew_mat([1.0, 2.0])
    with pytest.raises(ValueError):
        ori.mat_to_skew_vec(np.eye(2))
    with pytest.raises(ValueError):
        ori.quaternion_to_rotation_matrix([1.0, 0.0, 0.0])


@pytest.mark.parametrize("q", QUATS)
def test_quaternion_matrix_round_trip(q):
    r = ori.quaternion_to_rotation_matrix(q)
    assert np.allclose(r @ r.T, np.eye(3))
    assert _same_rotation(ori.rotation_matrix_to_quaternion(r), q)


@pytest.mark.parametrize("rpy", RPYS)
def test_rpy_quaternion_consistency(rpy):
    q = ori.rpy_to_quat(rpy)
    assert np.linalg.norm(q) == pytest.approx(1.0)
    assert np.allclose(ori.quaternion_to_rotation_matrix(q), ori.rpy_to_rot_mat(rpy))
    assert np.allclose(ori.quat_to_rpy(q), rpy)
    assert np.allclose(ori.rotation_matrix_to_rpy(ori.rpy_to_rot_mat(rpy)), rpy)


def test_quat_to_rpy_of_identity():
    assert np.allclose(ori.quat_to_rpy([1.0, 0.0, 0.0, 0.0]), np.zeros(3))


@pytest.mark.parametrize("q", QUATS[4:])
def test_so3_conversions_agree_and_round_trip(q):
    a = ori.quat_to_so3(q)
    b = ori.quaternion_to_so3(q)
    assert np.allclose(a, b)
    assert np.allclose(ori.so3_to_quat(b), q)


def test_small_rotation_vectors_map_to_identity():
    assert np.array_equal(ori.so3_to_quat([0.0, 0.0, 1e-9]), [1.0, 0.0, 0.0, 0.0])
    assert np.array_equal(ori.quaternion_to_so3([1.0, 0.0, 0.0, 0.0]), np.zeros(3))


@pytest.mark.parametrize("q", QUATS)
def test_quat_product_identity_and_inverse(q):
    identity = np.array([1.0, 0.0, 0.0, 0.0])
    conj = q * np.array([1.0, -1.0, -1.0, -1.0])
    assert np.allclose(ori.quat_product(identity, q), q)
    assert np.allclose(ori.quat_product(q, identity), q)
    assert np.allclose(ori.quat_product(q, conj), identity)


@pytest.mark.parametrize("q", QUATS)
def test_quat_derivative_for_unit_quaternion(q):
    omega = np.array([0.3, -1.2, 0.8])
    expected = 0.5 * ori.quat_product(q, np.concatenate(([0.0], omega)))
    assert np.allclose(ori.quat_derivative(q, omega), expected)


def test_quat_derivative_stabilizes_non_unit_quaternion():
    q = np.array([2.0, 0.0, 0.0, 0.0])
    omega = np.array([0.0, 0.0, 1.0])
    dq = ori.quat_derivative(q, omega)
    # scalar part pulls the norm back towards one
    assert dq[0] < 0


@pytest.mark.parametrize("q", QUATS)
def test_integrate_quat_matches_rotation_vector_step(q):
    omega = np.array([0.5, -0.2, 1.1])
    dt = 0.01
    step = ori.so3_to_quat(omega * dt)
    explicit = ori.integrate_quat(q, omega, dt)
    implicit = ori.integrate_quat_implicit(q, omega, dt)
    assert np.linalg.norm(explicit) == pytest.approx(1.0)
    assert np.allclose(explicit, ori.quat_product(step, q))
    assert np.allclose(implicit, ori.quat_product(q, step))


def test_integrate_quat_with_zero_rate_normalizes():
    q = np.array([2.0, 0.0, 0.0, 0.0])
    result = ori.integrate_quat(q, np.zeros(3), 0.1)
    assert np.allclose(result, q / np.linalg.norm(q))
    assert np.allclose(ori.integrate_quat_implicit(q, np.zeros(3), 0.1), result)