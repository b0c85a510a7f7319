"""End-to-end scenarios over the SI preset."""

import math

import pytest

from unitmaths.core.dimensions import AMOUNT_OF_SUBSTANCE, CONCENTRATION, LENGTH, VOLUME
from unitmaths.core.unit import Unit
from unitmaths.core.value import Value
from unitmaths.errors import DimensionMismatch


def test_volume_times_molarity_gives_amount(si):
    vol = si.parse_value("30 mL")
    con = si.parse_value("0.1 M")
    amount = vol * con
    assert amount.dimension == AMOUNT_OF_SUBSTANCE
    assert amount.base_magnitude == pytest.approx(3e-3)
    assert si.render(amount) == "0.003 mol"
    assert f"{amount.dimension:#}" == "Amount of Substance"


def test_titration_of_strong_acid_with_strong_base(si):
    # 30 mL of 0.1 M acid neutralised by 15 mL of 0.1 M base
    vol1, con1 = si.value("30 mL"), si.value("0.1 M")
    vol2, con2 = si.value("15 mL"), si.value("0.1 M")

    assert si.render(si.convert(vol1, "L")) == "0.03 L"

    hydronium = vol1 * con1 - vol2 * con2
    assert si.render(hydronium) == "0.0015 mol"

    volume = vol1 + vol2
    assert volume.dimension == VOLUME
    assert si.render(volume) == "45 mL"

    concentration = hydronium / volume
    assert concentration.dimension == CONCENTRATION
    assert si.render(concentration) == "0.0333333333333333 M"

    molar = si.cast(concentration, si["M"])
    ph = -math.log10(molar.magnitude)
    assert ph == pytest.approx(1.4771, abs=1e-4)


def test_lengths_with_different_factors_add(si):
    five_m = Value(5.0, si["m"])
    three_k_mm = Value(3000.0, Unit(LENGTH, 0.001))
    total = five_m + three_k_mm
    assert total.unit == si["m"]
    assert total.magnitude == pytest.approx(8.0)
    assert si.render(total) == "8 m"


def test_length_plus_time_is_a_dimension_mismatch(si):
    with pytest.raises(DimensionMismatch):
        si.value("1 m") + si.value("1 s")


def test_rendered_value_parses_back(si):
    for symbol, unit in si.items():
        original = Value(1.25, unit)
        again = si.parse_value(si.render(original))
        assert again is not None, symbol
        assert again.dimension == original.dimension
        assert again.base_magnitude == pytest.approx(original.base_magnitude)
