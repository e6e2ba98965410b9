import math

import pytest

from twentygames.angle import Angle, deg, rad


def close(v):
    return pytest.approx(v, abs=1e-5)


def test_factories_match_expected_radians():
    assert Angle.from_radians(0.0).radians == 0.0
    assert Angle.from_radians(1.5).radians == 1.5
    assert Angle.from_degrees(0.0).radians == 0.0
    assert Angle.from_degrees(180.0).radians == close(math.pi)
    assert Angle.from_degrees(90.0).radians == close(math.pi / 2.0)
    assert Angle.zero().radians == 0.0


def test_round_trips_through_both_units():
    a = Angle.from_degrees(45.0)
    assert a.degrees() == close(45.0)
    assert a.radians == close(math.pi / 4.0)
    assert Angle.from_radians(math.pi).degrees() == close(180.0)


def test_arithmetic_preserves_units():
    assert (Angle.from_degrees(45.0) + Angle.from_degrees(45.0)).degrees() == close(90.0)
    assert (Angle.from_degrees(90.0) - Angle.from_degrees(30.0)).degrees() == close(60.0)
    assert (-Angle.from_degrees(45.0)).degrees() == close(-45.0)
    assert (Angle.from_degrees(45.0) * 2.0).degrees() == close(90.0)
    assert (3.0 * Angle.from_degrees(30.0)).degrees() == close(90.0)
    assert (Angle.from_degrees(90.0) / 2.0).degrees() == close(45.0)


def test_augmented_assignment():
    a = Angle.from_degrees(10.0)
    a += Angle.from_degrees(5.0)
    assert a.degrees() == close(15.0)
    a -= Angle.from_degrees(15.0)
    assert a.degrees() == close(0.0)
    a = Angle.from_degrees(20.0)
    a *= 2.0
    assert a.degrees() == close(40.0)
    a /= 4.0
    assert a.degrees() == close(10.0)


def test_all_six_comparisons():
    small = Angle.from_degrees(30.0)
    big = Angle.from_degrees(45.0)
    assert small < big
    assert big > small
    assert small <= small
    assert big >= big
    assert small == Angle.from_degrees(30.0)
    assert small != big


def test_shorthands_construct_correctly():
    assert deg(45.0).degrees() == close(45.0)
    assert rad(1.0).radians == close(1.0)
    assert (deg(90.0) + deg(90.0)).degrees() == close(180.0)


def test_degrees_of_180_degree_angle():
    a = Angle.from_degrees(180.0)
    assert a.radians == close(math.pi)
    assert a.degrees() == close(180.0)


def test_adding_a_bare_number_is_rejected():
    with pytest.raises(TypeError):
        Angle.from_degrees(10.0) + 1.0


def test_multiplying_by_an_angle_is_rejected():
    with pytest.raises(TypeError):
        Angle.from_degrees(10.0) * Angle.from_degrees(2.0)