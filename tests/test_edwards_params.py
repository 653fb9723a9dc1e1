import pytest

from edwardsff import edwards_params as ep
from edwardsff.edwards_params import (
    EdwardsFq,
    EdwardsFq3,
    EdwardsFq6,
    EdwardsFr,
    PrimeFieldElement,
)

Q = ep.MODULUS_Q
R = ep.MODULUS_R


def _sample_fq3():
    return EdwardsFq3(2, 3, 5)


def _sample_fq6():
    return EdwardsFq6(EdwardsFq3(2, 3, 5), EdwardsFq3(7, 11, 13))


def test_moduli_match_source():
    assert int(EdwardsFq.field_char()) == 6210044120409721004947206240885978274523751269793792001
    assert int(EdwardsFr.field_char()) == 1552511030102430251236801561344621993261920897571225601
    assert EdwardsFq.field_char().max_bits() == 192


@pytest.mark.parametrize("field", [EdwardsFr, EdwardsFq])
def test_prime_field_parameters_consistent(field):
    p = field.modulus
    assert field.num_bits == p.bit_length()
    assert field.t * 2**field.s + 1 == p
    assert field.t % 2 == 1
    assert field.euler == (p - 1) // 2
    assert field.t_minus_1_over_2 == (field.t - 1) // 2


def test_extension_parameters_consistent():
    q = int(EdwardsFq.field_char())
    assert EdwardsFq3.t * 2**EdwardsFq3.s + 1 == q**3
    assert EdwardsFq3.euler == (q**3 - 1) // 2
    assert EdwardsFq3.t_minus_1_over_2 == (EdwardsFq3.t - 1) // 2
    assert EdwardsFq6.t * 2**EdwardsFq6.s + 1 == q**6
    assert EdwardsFq6.euler == (q**6 - 1) // 2
    assert EdwardsFq6.t_minus_1_over_2 == (EdwardsFq6.t - 1) // 2


@pytest.mark.parametrize("field", [EdwardsFr, EdwardsFq, EdwardsFq3, EdwardsFq6])
def test_nqr_to_t(field):
    assert field.nqr ** field.t == field.nqr_to_t


@pytest.mark.parametrize("field", [EdwardsFr, EdwardsFq, EdwardsFq3])
def test_nqr_is_non_residue(field):
    assert field.nqr ** field.euler == -field.one()
    with pytest.raises(ValueError):
        field.nqr.sqrt()


@pytest.mark.parametrize("field", [EdwardsFr, EdwardsFq])
def test_root_of_unity_order(field):
    omega = field.root_of_unity
    assert omega ** (2**field.s) == field.one()
    assert omega ** (2 ** (field.s - 1)) == -field.one()


def test_negative_and_string_construction():
    assert EdwardsFq(-1).as_int() == 6210044120409721004947206240885978274523751269793792000
    assert EdwardsFq(-1) == -EdwardsFq.one()
    assert EdwardsFq("19") == EdwardsFq(19)
    with pytest.raises(ValueError):
        EdwardsFq("1x")


def test_base_class_and_field_mixing_rejected():
    with pytest.raises(TypeError):
        PrimeFieldElement(3)
    with pytest.raises(TypeError):
        EdwardsFr(1) + EdwardsFq(1)
    with pytest.raises(TypeError):
        EdwardsFq(EdwardsFr(2))


def test_prime_field_arithmetic():
    a = EdwardsFq(12345)
    b = EdwardsFq(678910)
    assert a * a.inverse() == EdwardsFq.one()
    assert (a + b) - b == a
    assert (a / b) * b == a
    assert a ** -1 == a.inverse()
    assert 3 - a == -(a - 3)
    assert len({EdwardsFq(5), EdwardsFq(5 + Q)}) == 1
    assert a.as_bigint().limbs == ep.Q_LIMBS
    with pytest.raises(ZeroDivisionError):
        EdwardsFq.zero().inverse()


@pytest.mark.parametrize("field", [EdwardsFr, EdwardsFq])
def test_prime_field_sqrt(field):
    a = field(12345)
    root = (a * a).sqrt()
    assert root * root == a * a
    assert root in (a, -a)
    assert field.zero().sqrt() == field.zero()


def test_random_elements_in_range():
    x = EdwardsFr.random_element()
    assert 0 <= x.as_int() < R
    y = EdwardsFq3.random_element()
    assert y * EdwardsFq3.one() == y


def test_fq3_field_laws():
    a = _sample_fq3()
    b = EdwardsFq3(17, 19, 23)
    c = EdwardsFq3(29, 31, 37)
    assert a * (b + c) == a * b + a * c
    assert (a * b) * c == a * (b * c)
    assert a * a.inverse() == EdwardsFq3.one()
    assert a.squared() == a * a
    assert EdwardsFq(7) * a == a * EdwardsFq3(7, 0, 0)
    with pytest.raises(ZeroDivisionError):
        EdwardsFq3.zero().inverse()


def test_fq3_u_cubed_is_non_residue():
    u = EdwardsFq3(0, 1, 0)
    assert u * u * u == EdwardsFq3(EdwardsFq3.non_residue, 0, 0)


def test_fq3_sqrt():
    a = _sample_fq3()
    root = (a * a).sqrt()
    assert root * root == a * a
    assert root in (a, -a)


def test_fq3_frobenius():
    a = _sample_fq3()
    assert a.frobenius_map(1) == a**Q
    assert a.frobenius_map(2) == a.frobenius_map(1).frobenius_map(1)
    assert a.frobenius_map(3) == a
    nr = EdwardsFq3.non_residue
    assert nr ** ((Q - 1) // 3) == EdwardsFq3.frobenius_coeffs_c1[1]


def test_fq6_field_laws():
    a = _sample_fq6()
    b = EdwardsFq6(EdwardsFq3(1, 4, 9), EdwardsFq3(16, 25, 36))
    assert a * a.inverse() == EdwardsFq6.one()
    assert a.squared() == a * a
    assert (a * b) / b == a
    w = EdwardsFq6(0, 1)
    assert w * w == EdwardsFq6(EdwardsFq6.mul_by_non_residue(EdwardsFq3.one()), 0)
    assert EdwardsFq6.mul_by_non_residue(_sample_fq3()) == EdwardsFq3(0, 1, 0) * _sample_fq3()


def test_fq6_frobenius():
    a = _sample_fq6()
    assert a.frobenius_map(1) == a**Q
    assert a.frobenius_map(2) == a.frobenius_map(1).frobenius_map(1)
    assert EdwardsFq(61) ** ((Q - 1) // 6) == EdwardsFq6.frobenius_coeffs_c1[1]
    assert EdwardsFq6.frobenius_coeffs_c1[3] == EdwardsFq(-1)


def test_fq6_cyclotomic_exp_matches_power():
    x = _sample_fq6()
    y = x.frobenius_map(3) * x.inverse()
    assert y.unitary_inverse() == y.inverse()
    w0 = ep.FINAL_EXPONENT_LAST_CHUNK_ABS_OF_W0
    assert y.cyclotomic_exp(w0) == y ** int(w0)
    assert y.cyclotomic_exp(0) == EdwardsFq6.one()
    with pytest.raises(ValueError):
        y.cyclotomic_exp(-1)


def test_g1_generator_on_curve():
    x, y = ep.G1_ONE_XY
    x2, y2 = x.squared(), y.squared()
    one = EdwardsFq.one()
    assert ep.COEFF_A * x2 + y2 == one + ep.COEFF_D * x2 * y2
    zx, zy = ep.G1_ZERO_XY
    assert zx.squared() + zy.squared() == one + ep.COEFF_D * zx.squared() * zy.squared()


def test_g2_generator_on_twist():
    x, y = ep.G2_ONE_XY
    x2, y2 = x.squared(), y.squared()
    assert ep.TWIST_COEFF_A * x2 + y2 == EdwardsFq3.one() + ep.TWIST_COEFF_D * x2 * y2


def test_twist_multiplier_constants():
    z = _sample_fq3()
    by_a = EdwardsFq3(
        ep.TWIST_MUL_BY_A_C0 * z.c2, ep.TWIST_MUL_BY_A_C1 * z.c0, ep.TWIST_MUL_BY_A_C2 * z.c1
    )
    by_d = EdwardsFq3(
        ep.TWIST_MUL_BY_D_C0 * z.c2, ep.TWIST_MUL_BY_D_C1 * z.c0, ep.TWIST_MUL_BY_D_C2 * z.c1
    )
    assert by_a == ep.TWIST_COEFF_A * z
    assert by_d == ep.TWIST_COEFF_D * z
    assert ep.TWIST_MUL_BY_Q_Y == EdwardsFq6.frobenius_coeffs_c1[1]
    assert ep.TWIST_MUL_BY_Q_Z == ep.TWIST_MUL_BY_Q_Y


def test_final_exponent_last_chunk_decomposition():
    q = int(EdwardsFq.field_char())
    r = int(EdwardsFr.field_char())
    w0 = int(ep.FINAL_EXPONENT_LAST_CHUNK_ABS_OF_W0)
    w1 = int(ep.FINAL_EXPONENT_LAST_CHUNK_W1)
    assert ep.FINAL_EXPONENT_LAST_CHUNK_IS_W0_NEG is True
    assert (q * q - q + 1) % r == 0
    assert w1 * q - w0 == (q * q - q + 1) // r


def test_ceil_sizes():
    assert EdwardsFq.ceil_size_in_bits() == ep.Q_BITCOUNT
    assert EdwardsFq3.ceil_size_in_bits() == 3 * ep.Q_BITCOUNT
    assert EdwardsFq6.ceil_size_in_bits() == 6 * ep.Q_BITCOUNT