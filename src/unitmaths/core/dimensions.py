# unitmaths.core.dimensions

from __future__ import annotations

import operator
from typing import Any, Dict, Iterable, Tuple, TypeAlias, Union

from unitmaths.core.utils import superscript_int

# --- Public typing -----------------------------------------------------------
Dim: TypeAlias = "Dimension"
DimTuple = Tuple[int, int, int, int, int, int, int]
DimLike = Union["Dimension", DimTuple, Iterable[int]]

# Storage order of the exponents.
AXES: Tuple[str, ...] = (
    "length",
    "time",
    "mass",
    "current",
    "temperature",
    "substance_amount",
    "luminous_intensity",
)
_AXIS_INDEX: Dict[str, int] = {name: i for i, name in enumerate(AXES)}

# Rendering order (mass first), used by both the verbose dimension form
# and the base-unit fallback of the value formatter.
CANONICAL_ORDER: Tuple[str, ...] = (
    "mass",
    "length",
    "time",
    "current",
    "temperature",
    "substance_amount",
    "luminous_intensity",
)

_LABELS: Dict[str, str] = {
    "mass": "mass",
    "length": "length",
    "time": "time",
    "current": "current",
    "temperature": "temperature",
    "substance_amount": "substance amount",
    "luminous_intensity": "luminous intensity",
}


# --- Core object -------------------------------------------------------------

class Dimension(tuple):
    """
    Immutable 7-length vector of integer exponents over the base dimensions
    (length, time, mass, current, temperature, substance amount, luminous
    intensity).

    Tuple subclass => hashable and usable as dict keys. The arithmetic
    operators are overridden so they act on exponents instead of doing tuple
    concatenation/repetition:

    - ``a + b``  componentwise sum (multiplying units)
    - ``a - b``  componentwise difference (dividing units)
    - ``a * n``  scaling by an integer (raising a unit to a power)
    """

    __slots__ = ()

    def __new__(cls, data: DimLike = (0, 0, 0, 0, 0, 0, 0)) -> "Dimension":
        if isinstance(data, Dimension):
            return data

        t = tuple(operator.index(x) for x in data)
        if len(t) != 7:
            raise ValueError(
                "Dimension must have length 7 "
                "(length, time, mass, current, temperature, substance_amount, luminous_intensity)."
            )
        return tuple.__new__(cls, t)

    @classmethod
    def of(cls, **exponents: int) -> "Dimension":
        """Build a dimension from keyword exponents, e.g. ``Dimension.of(length=1, time=-2)``."""
        values = [0] * 7
        for name, exp in exponents.items():
            try:
                values[_AXIS_INDEX[name]] = exp
            except KeyError:
                raise TypeError(f"Unknown dimension axis {name!r}") from None
        return cls(values)

    # --- Algebra ---
    def add(self, other: DimLike) -> "Dimension":
        o = Dimension(other)
        return Dimension(x + y for x, y in zip(self, o, strict=True))

    def subtract(self, other: DimLike) -> "Dimension":
        o = Dimension(other)
        return Dimension(x - y for x, y in zip(self, o, strict=True))

    def scale(self, n: int) -> "Dimension":
        try:
            k = operator.index(n)
        except TypeError:
            raise TypeError(
                f"Dimension exponents scale by integers only, got {type(n).__name__}"
            ) from None
        return Dimension(x * k for x in self)

    def __add__(self, other: Any) -> "Dimension":  # type: ignore[override]
        if not isinstance(other, tuple):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> "Dimension":
        if not isinstance(other, tuple):
            return NotImplemented
        return Dimension(other).add(self)

    def __sub__(self, other: Any) -> "Dimension":
        if not isinstance(other, tuple):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> "Dimension":
        if not isinstance(other, tuple):
            return NotImplemented
        return Dimension(other).subtract(self)

    def __mul__(self, n: Any) -> "Dimension":  # type: ignore[override]
        if isinstance(n, bool) or not hasattr(n, "__index__"):
            return NotImplemented
        return self.scale(n)

    __rmul__ = __mul__  # type: ignore[assignment]

    def __neg__(self) -> "Dimension":
        return self.scale(-1)

    # --- Helpers ---
    @property
    def is_dimensionless(self) -> bool:
        return all(x == 0 for x in self)

    def __getattr__(self, name: str) -> int:
        # per-axis access: dim.length, dim.mass, ...
        try:
            return self[_AXIS_INDEX[name]]
        except KeyError:
            raise AttributeError(name) from None

    def as_dict(self) -> Dict[str, int]:
        """Nonzero exponents keyed by axis name."""
        return {name: e for name, e in zip(AXES, self) if e != 0}

    @property
    def name(self) -> str:
        """Compact rendering: the canonical name of a known dimension."""
        if self.is_dimensionless:
            return "Dimensionless"
        known = DIMENSION_NAMES.get(self)
        if known is not None:
            return known
        return self.verbose()

    def verbose(self) -> str:
        parts = []
        for axis in CANONICAL_ORDER:
            e = self[_AXIS_INDEX[axis]]
            if e != 0:
                parts.append(f"[{_LABELS[axis]}]{superscript_int(e)}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.verbose()

    def __format__(self, spec: str) -> str:
        """
        ``""`` gives the verbose form (``[mass]¹[length]¹[time]⁻²``);
        ``"#"`` gives the compact form (``Force``).
        """
        if spec == "":
            return self.verbose()
        if spec == "#":
            return self.name
        raise ValueError("Unknown format spec for Dimension; use '' or '#'")

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v}" for k, v in self.as_dict().items())
        return f"Dimension({inner})"


# --- Function forms -----------------------------------------------------------

def add(a: DimLike, b: DimLike) -> Dimension:
    return Dimension(a).add(b)


def subtract(a: DimLike, b: DimLike) -> Dimension:
    return Dimension(a).subtract(b)


def scale(a: DimLike, n: int) -> Dimension:
    return Dimension(a).scale(n)


# --- Public constants --------------------------------------------------------

DIMENSIONLESS: Dim       = Dimension((0, 0, 0, 0, 0, 0, 0))
DIM_0: Dim               = DIMENSIONLESS

LENGTH: Dim              = Dimension.of(length=1)
TIME: Dim                = Dimension.of(time=1)
MASS: Dim                = Dimension.of(mass=1)
CURRENT: Dim             = Dimension.of(current=1)
TEMPERATURE: Dim         = Dimension.of(temperature=1)
AMOUNT_OF_SUBSTANCE: Dim = Dimension.of(substance_amount=1)
LUMINOUS_INTENSITY: Dim  = Dimension.of(luminous_intensity=1)

AREA: Dim                = LENGTH * 2
VOLUME: Dim              = LENGTH * 3
DENSITY: Dim             = MASS - VOLUME
FREQUENCY: Dim           = -TIME
VELOCITY: Dim            = LENGTH - TIME
ACCELERATION: Dim        = VELOCITY - TIME
MOMENTUM: Dim            = MASS + VELOCITY
FORCE: Dim               = MASS + ACCELERATION
ACTION: Dim              = MOMENTUM + LENGTH
ENERGY: Dim              = FORCE + LENGTH
MOLAR_MASS: Dim          = MASS - AMOUNT_OF_SUBSTANCE
CONCENTRATION: Dim       = AMOUNT_OF_SUBSTANCE - VOLUME
POWER: Dim               = ENERGY - TIME
VOLTAGE: Dim             = POWER - CURRENT
RESISTANCE: Dim          = VOLTAGE - CURRENT
CHARGE: Dim              = CURRENT + TIME
PRESSURE: Dim            = FORCE - AREA
CAPACITANCE: Dim         = CHARGE - VOLTAGE
CONDUCTANCE: Dim         = -RESISTANCE
MAGNETIC_FLUX: Dim       = VOLTAGE + TIME
MAGNETIC_FLUX_DENSITY: Dim = MAGNETIC_FLUX - AREA
INDUCTANCE: Dim          = MAGNETIC_FLUX - CURRENT
ILLUMINANCE: Dim         = LUMINOUS_INTENSITY - AREA
CATALYTIC_ACTIVITY: Dim  = AMOUNT_OF_SUBSTANCE - TIME

# Compact display names. First entry wins if two names share a vector.
DIMENSION_NAMES: Dict[Dimension, str] = {}
for _dim, _name in (
    (MASS, "Mass"),
    (LENGTH, "Length"),
    (TIME, "Time"),
    (CURRENT, "Current"),
    (TEMPERATURE, "Temperature"),
    (AMOUNT_OF_SUBSTANCE, "Amount of Substance"),
    (LUMINOUS_INTENSITY, "Luminous Intensity"),
    (AREA, "Area"),
    (VOLUME, "Volume"),
    (DENSITY, "Density"),
    (FREQUENCY, "Frequency"),
    (VELOCITY, "Velocity"),
    (ACCELERATION, "Acceleration"),
    (MOMENTUM, "Momentum"),
    (FORCE, "Force"),
    (ACTION, "Action"),
    (ENERGY, "Energy"),
    (MOLAR_MASS, "Molar Mass"),
    (CONCENTRATION, "Concentration"),
    (POWER, "Power"),
    (VOLTAGE, "Voltage"),
    (RESISTANCE, "Resistance"),
    (CHARGE, "Charge"),
    (PRESSURE, "Pressure"),
    (CAPACITANCE, "Capacitance"),
    (CONDUCTANCE, "Conductance"),
    (MAGNETIC_FLUX, "Magnetic Flux"),
    (MAGNETIC_FLUX_DENSITY, "Magnetic Flux Density"),
    (INDUCTANCE, "Inductance"),
    (ILLUMINANCE, "Illuminance"),
    (CATALYTIC_ACTIVITY, "Catalytic Activity"),
):
    DIMENSION_NAMES.setdefault(_dim, _name)
del _dim, _name
