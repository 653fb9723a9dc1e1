import pytest

from edwardsff.bigint import Bigint
from edwardsff.edwards_g1 import EdwardsG1
from edwardsff.edwards_params import (
    G1_ONE_XY,
    MODULUS_Q,
    MODULUS_R,
    EdwardsFq,
    EdwardsFr,
)


@pytest.fixture
def generator():
    return EdwardsG1.one()


def test_generator_and_zero_are_well_formed(generator):
    assert generator.is_well_formed()
    assert not generator.is_zero()
    assert EdwardsG1.zero().is_zero()
    assert EdwardsG1.zero().is_well_formed()


def test_affine_coordinates_of_generator(generator):
    assert generator.to_affine_coordinates() == G1_ONE_XY


def test_affine_coordinates_of_zero():
    assert EdwardsG1.zero().to_affine_coordinates() == (EdwardsFq.zero(), EdwardsFq.one())


def test_identity_laws(generator):
    zero = EdwardsG1.zero()
    assert generator + zero == generator
    assert zero + generator == generator
    assert (generator - generator).is_zero()
    assert zero.dbl().is_zero()


def test_zero_equality_ignores_x():
    assert EdwardsG1.from_coordinates(7, 0, 0) == EdwardsG1.zero()
    assert EdwardsG1.zero() != EdwardsG1.one()


def test_double_matches_add(generator):
    assert generator.dbl() == generator.add(generator)
    assert 2 * generator == generator.dbl()
    assert 3 * generator == generator + generator + generator


def test_order_annihilates_generator(generator):
    assert (EdwardsG1.order() * generator).is_zero()
    assert (MODULUS_R - 1) * generator == -generator


def test_group_laws_on_random_points():
    p = EdwardsG1.random_element()
    q = EdwardsG1.random_element()
    r = EdwardsG1.random_element()
    assert p + q == q + p
    assert (p + q) + r == p + (q + r)
    assert (p + q).is_well_formed()
    assert (p - q) + q == p


def test_scalar_types_agree(generator):
    assert EdwardsFr(5) * generator == 5 * generator
    assert Bigint(5, 3) * generator == 5 * generator
    assert 0 * generator == EdwardsG1.zero()


def test_scalar_distributes(generator):
    assert 7 * generator + 11 * generator == 18 * generator


def test_negative_scalar_raises():
    with pytest.raises(ValueError):
        -3 * EdwardsG1.one()


def test_to_special_keeps_point(generator):
    p = 9 * generator
    before = p.copy()
    p.to_special()
    assert p.is_special()
    assert p.Z == EdwardsFq.one()
    assert p == before


def test_to_special_on_zero_is_noop():
    zero = EdwardsG1.zero()
    zero.to_special()
    assert zero.is_zero()
    assert zero.is_special()


def test_mixed_add_matches_add(generator):
    p = 4 * generator
    q = 6 * generator
    q.to_special()
    assert p.mixed_add(q) == p + q
    assert EdwardsG1.zero().mixed_add(q) == q
    assert p.mixed_add(EdwardsG1.zero()) == p


def test_batch_to_special(generator):
    points = [k * generator for k in (2, 3, 5, 8)]
    originals = [p.copy() for p in points]
    EdwardsG1.batch_to_special_all_non_zeros(points)
    assert all(p.Z == EdwardsFq.one() for p in points)
    assert points == originals


def test_affine_round_trip(generator):
    p = 13 * generator
    x, y = p.to_affine_coordinates()
    assert EdwardsG1(x, y) == p


def test_malformed_point_detected():
    assert not EdwardsG1.from_coordinates(1, 2, 3).is_well_formed()


def test_sizes():
    assert int(EdwardsG1.order()) == MODULUS_R
    assert int(EdwardsG1.field_char()) == MODULUS_Q
    assert EdwardsG1.size_in_bits() == 184


def test_str_of_zero_and_generator(generator):
    assert str(EdwardsG1.zero()) == "O"
    x, y = G1_ONE_XY
    assert str(generator) == f"({x} , {y})"