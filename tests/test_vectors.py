import math

import pytest

from cafrecord.vectors import SRLorentzVector, SRVector3D


def _nan_flags(values):
    return [math.isnan(v) for v in values]


def test_default_vector_is_nan():
    v = SRVector3D()
    assert _nan_flags((v.x, v.y, v.z)) == [True, True, True]


def test_mag_consistent_with_mag2():
    v = SRVector3D(1.5, -2.0, 7.25)
    assert v.mag() ** 2 == pytest.approx(v.mag2())


def test_dot_with_self_is_mag2():
    v = SRVector3D(0.3, 4.1, -2.2)
    assert v.dot(v) == pytest.approx(v.mag2())


def test_dot_of_orthogonal_vectors_is_zero():
    assert SRVector3D(1, 0, 0).dot(SRVector3D(0, 5, 0)) == 0


def test_unit_has_length_one_and_same_direction():
    v = SRVector3D(2.0, -3.0, 6.0)
    u = v.unit()
    assert u.mag() == pytest.approx(1.0)
    assert u.dot(v) == pytest.approx(v.mag())


def test_unit_of_zero_vector_is_nan():
    u = SRVector3D(0, 0, 0).unit()
    assert _nan_flags(u) == [True, True, True]


def test_add_then_subtract_round_trip():
    a = SRVector3D(1.0, 2.0, 3.0)
    b = SRVector3D(-0.5, 4.0, 10.0)
    assert (a + b) - b == a


def test_add_componentwise():
    a = SRVector3D(1.0, 2.0, 3.0)
    b = SRVector3D(10.0, 20.0, 30.0)
    s = a + b
    assert tuple(s) == (a.x + b.x, a.y + b.y, a.z + b.z)


def test_add_rejects_other_types():
    with pytest.raises(TypeError):
        SRVector3D(1, 2, 3) + 1


def test_str_format():
    assert str(SRVector3D(1, 2, 3)) == "(1,2,3)"
    assert str(SRVector3D(1.5, -2, 0)) == "(1.5,-2,0)"


def test_str_of_default_vector():
    assert str(SRVector3D()) == "(nan,nan,nan)"


def test_default_lorentz_vector_is_nan():
    p = SRLorentzVector()
    assert _nan_flags((p.E, p.px, p.py, p.pz)) == [True, True, True, True]


def test_vect_returns_spatial_part():
    p = SRLorentzVector(E=5.0, px=1.0, py=2.0, pz=3.0)
    assert p.vect() == SRVector3D(1.0, 2.0, 3.0)
    assert p.mag() == pytest.approx(p.vect().mag())


def test_beta_is_momentum_over_energy():
    p = SRLorentzVector(E=5.0, px=1.0, py=-2.0, pz=0.5)
    assert p.beta() * p.E == pytest.approx(p.mag())


def test_gamma_invariant():
    p = SRLorentzVector(E=10.0, px=3.0, py=1.0, pz=-4.0)
    b = p.beta()
    g = p.gamma()
    assert g * g * (1 - b * b) == pytest.approx(1.0)
    assert g >= 1.0


def test_at_rest_gamma_is_one():
    p = SRLorentzVector(E=0.938, px=0.0, py=0.0, pz=0.0)
    assert p.beta() == 0.0
    assert p.gamma() == 1.0


def test_zero_energy_gives_infinite_beta():
    p = SRLorentzVector(E=0.0, px=1.0, py=0.0, pz=0.0)
    assert p.beta() == math.inf


def test_superluminal_gamma_is_nan():
    p = SRLorentzVector(E=1.0, px=2.0, py=0.0, pz=0.0)
    assert _nan_flags([p.gamma()]) == [True]