import pytest

from animkit.vecmath import Quat, Vec3, dot, lerp, mix


def test_vec3_zero_is_additive_identity():
    a = Vec3(1.5, -2.0, 3.0)
    assert a + Vec3() == a


def test_vec3_scalar_multiplication_commutes():
    a = Vec3(1.5, -2.0, 3.0)
    assert 2 * a == a * 2
    assert a * 2 == a + a


def test_vec3_times_vec3_is_type_error():
    a = Vec3(1.0, 2.0, 3.0)
    with pytest.raises(TypeError):
        a * a
    assert a == Vec3(1.0, 2.0, 3.0)


def test_lerp_endpoints():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 8.0, 0.5)
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b


def test_lerp_midpoint_is_equidistant():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 8.0, 0.5)
    m = lerp(a, b, 0.5)
    assert list(m * 2) == pytest.approx(list(a + b))


def test_quat_default_is_identity():
    assert Quat() == Quat(0.0, 0.0, 0.0, 1.0)


def test_normalized_has_unit_length():
    q = Quat(1.0, 2.0, 3.0, 4.0)
    assert q.normalized().length() == pytest.approx(1.0)


def test_normalized_keeps_direction():
    q = Quat(1.0, 2.0, 3.0, 4.0)
    assert dot(q.normalized(), q) == pytest.approx(q.length())


def test_zero_quat_normalized_is_unchanged():
    zero = Quat(0.0, 0.0, 0.0, 0.0)
    assert zero.normalized() == zero


def test_double_negation():
    q = Quat(1.0, -2.0, 3.0, -4.0)
    assert -(-q) == q
    assert q + (-q) == Quat(0.0, 0.0, 0.0, 0.0)


def test_dot_with_self_is_length_squared():
    q = Quat(1.0, -2.0, 3.0, 0.5)
    assert dot(q, q) == pytest.approx(q.length() ** 2)


def test_quat_scaling_and_addition_agree():
    q = Quat(1.0, -2.0, 3.0, 0.5)
    assert q + q == 2 * q
    assert q * 2 == 2 * q


def test_mix_endpoints():
    a = Quat(0.0, 0.0, 0.0, 1.0)
    b = Quat(1.0, 0.0, 0.0, 0.0)
    assert mix(a, b, 0.0) == a
    assert mix(a, b, 1.0) == b