import math

import pytest

from tinkerkit.quaternion import Quaternion


def test_std_types_defaults():
    assert Quaternion() == Quaternion(0, 0, 0, 0)
    assert Quaternion() == Quaternion(0.0, 0.0, 0.0, 0.0)


def test_interior_numeric_conversion():
    q = Quaternion(0.0, 0.0, 0.0, 0.0)
    assert Quaternion(*(float(x) for x in q)) == Quaternion(0.0, 0.0, 0.0, 0.0)
    qi = Quaternion(0, 0, 0, 0)
    assert Quaternion(*(int(x) for x in qi)) == Quaternion(0, 0, 0, 0)


def test_conjugate_negates_vector_part():
    assert Quaternion(1, 2, 3, 4).conjugate() == Quaternion(1, -2, -3, -4)


def test_norm_float():
    assert Quaternion(1.0, 2.0, 2.0, 4.0).norm() == 5.0


def test_norm_integer_uses_isqrt():
    assert Quaternion(1, 1, 1, 1).norm() == 2
    assert Quaternion(1, 1, 1, 0).norm() == 1


def test_norm2():
    assert Quaternion(1, 2, 3, 4).norm2() == 30


def test_normalize_has_unit_norm():
    q = Quaternion(1.0, -2.0, 3.0, 0.5).normalize()
    assert q.norm() == pytest.approx(1.0)


def test_hamilton_product_basis():
    i = Quaternion(0, 1, 0, 0)
    j = Quaternion(0, 0, 1, 0)
    k = Quaternion(0, 0, 0, 1)
    assert i * j == k
    assert j * i == -k
    assert i * i == Quaternion(-1, 0, 0, 0)


def test_recip_gives_identity():
    q = Quaternion(1.0, 2.0, -3.0, 0.5)
    product = q * q.recip()
    assert list(product) == pytest.approx([1.0, 0.0, 0.0, 0.0])


def test_add_sub_round_trip():
    p = Quaternion(1, 2, 3, 4)
    q = Quaternion(-5, 6, 0, 2)
    assert (p + q) - q == p


def test_scalar_multiply_and_divide():
    q = Quaternion(1.5, -2.0, 0.25, 4.0)
    assert (q * 2.0) / 2.0 == q
    assert 3 * q == q * 3


def test_integer_division_truncates():
    assert Quaternion(-7, 7, 0, 1) / 2 == Quaternion(-3, 3, 0, 0)


def test_integer_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Quaternion(1, 2, 3, 4) / 0


def test_rot_conj_requires_pure_quaternion():
    with pytest.raises(ValueError):
        Quaternion(1.0, 1.0, 0.0, 0.0).rot_conj(0.5)


def test_rot_conj_is_unit_for_unit_axis():
    axis = Quaternion(0.0, 0.0, 1.0, 0.0)
    r = axis.rot_conj(math.pi / 2)
    assert list(r) == pytest.approx([0.0, 0.0, 1.0, 0.0], abs=1e-12)
    assert axis.rot_conj(0.3).norm() == pytest.approx(1.0)