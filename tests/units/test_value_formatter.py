import logging
from fractions import Fraction

import pytest

from unitmaths.core.dimensions import (
    DIMENSIONLESS,
    FORCE,
    FREQUENCY,
    MOMENTUM,
    TIME,
    VELOCITY,
)
from unitmaths.core.unit import Unit
from unitmaths.core.value import Value
from unitmaths.units.formatter import best_unit, format_base_units, format_unit, format_value
from unitmaths.units.registry import SI, BaseUnits, UnitSystem


# -------------------------------
# best_unit
# -------------------------------

def test_best_unit_exact_match(si):
    assert best_unit(si, si["mL"]) == ("mL", si["mL"])

def test_best_unit_closest_factor_not_exact(si):
    # 100 s is nearer to a minute (|60-100|) than to a second (|1-100|)
    assert best_unit(si, Unit(TIME, 100.0)) == ("min", si["min"])

def test_best_unit_requires_identical_dimension(si):
    assert best_unit(si, Unit(VELOCITY, 1.0)) is None

def test_best_unit_tie_goes_to_first_registered(fresh_si):
    fresh_si.register("Bq", Unit(FREQUENCY, 1.0))
    assert best_unit(fresh_si, Unit(FREQUENCY, 1.0))[0] == "Hz"

def test_reregistering_keeps_tie_break_position(fresh_si):
    fresh_si.register("Bq", Unit(FREQUENCY, 1.0))
    fresh_si.register("Hz", Unit(FREQUENCY, 1.0))
    assert best_unit(fresh_si, Unit(FREQUENCY, 1.0))[0] == "Hz"
    assert list(fresh_si).index("Hz") < list(fresh_si).index("Bq")

def test_system_best_unit_delegates(si):
    assert si.best_unit(si["km"]) == ("km", si["km"])


# -------------------------------
# format_value
# -------------------------------

def test_render_registered_unit(si):
    assert si.render(Value(30.0, si["mL"])) == "30 mL"

def test_render_rescales_into_candidate(si):
    amount = si.value("30 mL") * si.value("0.1 M")
    assert format_value(si, amount) == "0.003 mol"

def test_render_picks_closest_scale(si):
    assert si.render(Value(1.0, Unit(TIME, 100.0))) == "1.66666666666667 min"

def test_render_int_magnitude(si):
    assert si.render(Value(5, si["m"])) == "5 m"

def test_render_composite_unit_with_named_dimension(si):
    assert si.render(si.value("3 kg m/s2")) == "3 N"

def test_render_fallback_base_units(si, caplog):
    momentum = Value(2.0, si.unit("kg m/s"))
    with caplog.at_level(logging.DEBUG, logger="unitmaths.units.formatter"):
        assert si.render(momentum) == "2 kg¹m¹s⁻¹"
    assert "falling back" in caplog.text
    assert momentum.dimension == MOMENTUM

def test_render_fallback_expresses_magnitude_in_base_units(si):
    v = si.value("36 km/h")
    assert si.render(v) == "10 m¹s⁻¹"

def test_render_fallback_canonical_order(si):
    v = Value(1.0, si.unit("mol K cd A s m kg"))
    assert si.render(v) == "1 kg¹m¹s¹A¹K¹mol¹cd¹"

def test_render_dimensionless_without_registered_unit(si):
    assert si.render(Value(0.5, Unit(DIMENSIONLESS, 1.0))) == "0.5"

def test_render_dimensionless_with_registered_unit(fresh_si):
    fresh_si.register("rad", Unit(DIMENSIONLESS, 1.0))
    assert fresh_si.render(Value(0.5, Unit(DIMENSIONLESS, 1.0))) == "0.5 rad"

def test_render_fraction_system():
    system = UnitSystem.si(number=Fraction)
    v = system.value("1 mol") / Fraction(3)
    assert system.render(v) == "1/3 mol"

def test_render_custom_base_units():
    cgs = BaseUnits("cm", "s", "g", "A", "K", "mol", "cd")
    system = UnitSystem.with_base(cgs)
    assert system.render(Value(1.0, Unit(FORCE, 1.0))) == "1 g¹cm¹s⁻²"


# -------------------------------
# helpers
# -------------------------------

def test_format_base_units():
    assert format_base_units(SI, FORCE) == "kg¹m¹s⁻²"
    assert format_base_units(SI, DIMENSIONLESS) == ""

def test_format_unit(si):
    assert format_unit(si, si.unit("km/h")) == "0.277777777777778 m¹s⁻¹"
    assert si.render_unit(si["km"]) == "1 km"
    assert si.render_unit(si.unit("m2")) == "1 m²"
