from dataclasses import FrozenInstanceError
from fractions import Fraction

import pytest

from unitmaths.core.dimensions import (
    AREA,
    DIMENSIONLESS,
    ENERGY,
    FORCE,
    LENGTH,
    MASS,
    TIME,
    VOLUME,
)
from unitmaths.core.unit import (
    DIMENSIONLESS_UNIT,
    Scalar,
    Unit,
    compose,
    invert_combine,
    power,
)

m = Unit(LENGTH, 1.0)
km = Unit(LENGTH, 1000.0)
s = Unit(TIME, 1.0)
minute = Unit(TIME, 60.0)
N = Unit(FORCE, 1.0)


# -------------------------------
# construction
# -------------------------------

def test_unit_fields():
    assert km.dimension == LENGTH
    assert km.factor == 1000.0

def test_plain_tuple_dimension_is_coerced():
    u = Unit((1, 0, 0, 0, 0, 0, 0), 2.0)
    assert u.dimension == LENGTH
    assert type(u.dimension).__name__ == "Dimension"

def test_non_positive_factor_is_not_validated():
    assert Unit(LENGTH, -1.0).factor == -1.0

def test_unit_is_frozen_and_slotted():
    with pytest.raises(FrozenInstanceError):
        m.factor = 2.0
    with pytest.raises((AttributeError, TypeError)):
        m.some_new_attr = 42

def test_base_uses_number_type():
    u = Unit.base(MASS, Fraction)
    assert u.factor == 1 and isinstance(u.factor, Fraction)

def test_equality_is_exact():
    assert Unit(LENGTH, 1.0) == m
    assert Unit(LENGTH, 1.0 + 1e-15) != m
    assert Unit(TIME, 1.0) != m
    assert hash(Unit(LENGTH, 1000.0)) == hash(km)

def test_scalar_protocol():
    from decimal import Decimal

    assert isinstance(1.5, Scalar)
    assert isinstance(Fraction(1, 2), Scalar)
    assert isinstance(Decimal("1.5"), Scalar)


# -------------------------------
# algebra
# -------------------------------

def test_compose():
    j = compose(N, m)
    assert j == Unit(ENERGY, 1.0)
    assert N * m == j
    assert (km * km) == Unit(AREA, 1e6)

def test_invert_combine():
    kmh = invert_combine(km, Unit(TIME, 3600.0))
    assert kmh.dimension == LENGTH - TIME
    assert kmh.factor == pytest.approx(1000.0 / 3600.0)
    assert (km / minute).factor == pytest.approx(1000 / 60)

def test_invert_combine_self_is_identity():
    for u in (m, km, minute, N, Unit(VOLUME, 1e-6)):
        assert invert_combine(u, u) == Unit(DIMENSIONLESS, 1)
        assert u / u == DIMENSIONLESS_UNIT

def test_power():
    assert power(km, 3) == Unit(VOLUME, 1e9)
    assert km ** 2 == Unit(AREA, 1e6)
    assert power(minute, -1).dimension == -TIME
    assert power(minute, -1).factor == pytest.approx(1 / 60.0)
    assert power(km, 0) == Unit(DIMENSIONLESS, 1.0)

def test_power_rejects_non_integer():
    with pytest.raises(TypeError):
        power(m, 0.5)

def test_reciprocal():
    assert 1 / minute == minute ** -1
    with pytest.raises(TypeError):
        2 / minute

def test_fraction_factors_stay_exact():
    mL = Unit(VOLUME, Fraction(1, 1_000_000))
    assert (mL ** -1).factor == Fraction(1_000_000)
    assert (mL * Unit(DIMENSIONLESS, Fraction(3))).factor == Fraction(3, 1_000_000)

def test_mul_with_non_unit_is_not_supported():
    with pytest.raises(TypeError):
        m * "m"


# -------------------------------
# partial order
# -------------------------------

def test_same_dimension_compares_by_factor():
    assert m < km
    assert km > m
    assert m <= Unit(LENGTH, 1.0) and m >= Unit(LENGTH, 1.0)
    assert m.partial_compare(km) == -1
    assert km.partial_compare(m) == 1
    assert m.partial_compare(Unit(LENGTH, 1.0)) == 0

def test_different_dimensions_are_incomparable():
    assert m.partial_compare(s) is None
    assert not (m < s) and not (m > s)
    assert not (m <= s) and not (m >= s)

def test_sorting_within_a_dimension():
    assert sorted([km, Unit(LENGTH, 0.01), m]) == [Unit(LENGTH, 0.01), m, km]
