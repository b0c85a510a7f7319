"""
unitmaths.units.registry
========================

The unit system: a mapping from atomic symbols to `Unit` objects plus the
table of base-unit symbols.

- Build once (``UnitSystem.si()`` or ``UnitSystem.with_base(...)``), extend
  with `UnitSystem.register`, then share read-only. The class does no
  locking; callers that keep registering after handing the system to other
  threads must synchronise themselves.
- Symbols are exact and case-sensitive after NFC normalisation. Prefixed units (``km``, ``mL``) are
  registered individually; nothing is synthesised.
- The scalar type is configurable: every literal and every preset factor is
  produced by the ``number`` callable, so ``UnitSystem.si(number=Fraction)``
  does exact arithmetic.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple

from unitmaths.core.dimensions import (
    AMOUNT_OF_SUBSTANCE,
    CAPACITANCE,
    CATALYTIC_ACTIVITY,
    CHARGE,
    CONCENTRATION,
    CONDUCTANCE,
    CURRENT,
    DIMENSIONLESS,
    ENERGY,
    FORCE,
    FREQUENCY,
    ILLUMINANCE,
    INDUCTANCE,
    LENGTH,
    LUMINOUS_INTENSITY,
    MAGNETIC_FLUX,
    MAGNETIC_FLUX_DENSITY,
    MASS,
    POWER,
    PRESSURE,
    RESISTANCE,
    TEMPERATURE,
    TIME,
    VOLTAGE,
    VOLUME,
    Dimension,
)
from unitmaths.core.unit import NumberParser, Unit
from unitmaths.core.value import Value
from unitmaths.errors import MalformedValue, UnitParseError, UnknownUnit
from unitmaths.units.formatter import best_unit, format_unit, format_value
from unitmaths.units.parser import normalize_symbol, parse_unit

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BaseUnits:
    """Symbol representing factor 1 on each base dimension."""

    length: str
    time: str
    mass: str
    current: str
    temperature: str
    substance_amount: str
    luminous_intensity: str

    def items(self) -> Tuple[Tuple[str, Dimension], ...]:
        return (
            (self.length, LENGTH),
            (self.time, TIME),
            (self.mass, MASS),
            (self.current, CURRENT),
            (self.temperature, TEMPERATURE),
            (self.substance_amount, AMOUNT_OF_SUBSTANCE),
            (self.luminous_intensity, LUMINOUS_INTENSITY),
        )


SI = BaseUnits(
    length="m",
    time="s",
    mass="kg",
    current="A",
    temperature="K",
    substance_amount="mol",
    luminous_intensity="cd",
)


class UnitSystem:
    """Registry of atomic units for one base-unit system."""

    def __init__(self, base: BaseUnits = SI, number: NumberParser = float) -> None:
        self.base = base
        self.number = number
        self._units: Dict[str, Unit] = {}
        self.identity = Unit.base(DIMENSIONLESS, number)

    # --------------------------- construction ------------------------------
    @classmethod
    def with_base(cls, base: BaseUnits = SI, number: NumberParser = float) -> "UnitSystem":
        """A system holding only the seven base units (factor 1)."""
        system = cls(base, number)
        for symbol, dim in base.items():
            system.register(symbol, Unit.base(dim, number))
        return system

    @classmethod
    def si(cls, number: NumberParser = float) -> "UnitSystem":
        """SI base units plus a set of common derived and scaled units."""
        system = cls.with_base(SI, number)
        for symbol, factor, dim in _SI_UNITS:
            system.register(symbol, Unit(dim, number(factor)))
        return system

    # ----------------------------- mapping ---------------------------------
    def register(self, symbol: str, unit: Unit) -> Optional[Unit]:
        """Register ``unit`` under ``symbol``; return the entry it replaced.

        Replacing a symbol keeps its original registration position, which
        is what the formatter's first-registered tie-break sees.
        """
        symbol = normalize_symbol(symbol)
        previous = self._units.get(symbol)
        if previous is not None:
            logger.debug("Replacing unit %r: %r -> %r", symbol, previous, unit)
        self._units[symbol] = unit
        return previous

    def lookup_atomic(self, symbol: str) -> Unit:
        """Exact symbol lookup. Raises `UnknownUnit`."""
        try:
            return self._units[normalize_symbol(symbol)]
        except KeyError:
            raise UnknownUnit(symbol) from None

    def get(self, symbol: str, default: Optional[Unit] = None) -> Optional[Unit]:
        return self._units.get(normalize_symbol(symbol), default)

    def __getitem__(self, symbol: str) -> Unit:
        return self.lookup_atomic(symbol)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and normalize_symbol(symbol) in self._units

    def __iter__(self) -> Iterator[str]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def items(self) -> Iterator[Tuple[str, Unit]]:
        return iter(self._units.items())

    def all(self) -> Dict[str, Unit]:
        return dict(self._units)

    # ----------------------------- parsing ---------------------------------
    def unit(self, text: str) -> Unit:
        """Parse a unit expression; raises `UnitParseError` subclasses."""
        return parse_unit(text, self.lookup_atomic, self.identity)

    def value(self, text: str) -> Value:
        """Parse ``"<number> <unit expression>"``; raises on failure."""
        parts = text.split(None, 1)
        if not parts:
            raise MalformedValue(text, "empty string")
        literal = parts[0]
        rest = parts[1] if len(parts) > 1 else ""
        try:
            magnitude = self.number(literal)
        except (ValueError, ArithmeticError, TypeError):
            raise MalformedValue(text) from None
        return Value(magnitude, self.unit(rest))

    def parse_unit_expression(self, text: str) -> Optional[Unit]:
        """Like `unit`, but a parse failure gives None."""
        try:
            return self.unit(text)
        except UnitParseError as e:
            logger.debug("Bad unit expression %r: %s", text, e)
            return None

    def parse_value(self, text: str) -> Optional[Value]:
        """Like `value`, but a parse failure gives None."""
        try:
            return self.value(text)
        except UnitParseError as e:
            logger.debug("Bad value %r: %s", text, e)
            return None

    def quantity(self, magnitude: Any, symbol: str) -> Value:
        """``magnitude`` of the atomic unit ``symbol``."""
        return Value(magnitude, self.lookup_atomic(symbol))

    # ---------------------------- conversion -------------------------------
    def cast(self, value: Value, target: Unit) -> Value:
        """Re-express ``value`` in ``target``. Raises `DimensionMismatch`."""
        return value.cast(target)

    def convert(self, value: Value, expression: str) -> Value:
        """Parse ``expression`` and cast ``value`` into it."""
        return value.cast(self.unit(expression))

    # ----------------------------- rendering -------------------------------
    def best_unit(self, unit: Unit) -> Optional[Tuple[str, Unit]]:
        return best_unit(self, unit)

    def render(self, value: Value) -> str:
        return format_value(self, value)

    def render_unit(self, unit: Unit) -> str:
        return format_unit(self, unit)

    def __repr__(self) -> str:
        return f"UnitSystem(base={self.base!r}, units={len(self._units)})"


# ---------------------------------------------------------------------------
# SI preset
# ---------------------------------------------------------------------------
# (symbol, factor as text, dimension); factors go through `number` so that
# Fraction/Decimal systems stay exact.
_SI_UNITS: Tuple[Tuple[str, str, Dimension], ...] = (
    ("J",   "1",     ENERGY),
    ("min", "60",    TIME),
    ("h",   "3600",  TIME),
    ("d",   "86400", TIME),
    ("ms",  "1e-3",  TIME),
    ("km",  "1e3",   LENGTH),
    ("cm",  "1e-2",  LENGTH),
    ("mm",  "1e-3",  LENGTH),
    ("g",   "1e-3",  MASS),
    ("mg",  "1e-6",  MASS),
    ("Hz",  "1",     FREQUENCY),
    ("L",   "1e-3",  VOLUME),
    ("mL",  "1e-6",  VOLUME),
    ("M",   "1e3",   CONCENTRATION),
    ("N",   "1",     FORCE),
    ("W",   "1",     POWER),
    ("V",   "1",     VOLTAGE),
    ("Ω",   "1",     RESISTANCE),
    ("C",   "1",     CHARGE),
    ("Pa",  "1",     PRESSURE),
    ("F",   "1",     CAPACITANCE),
    ("S",   "1",     CONDUCTANCE),
    ("Wb",  "1",     MAGNETIC_FLUX),
    ("T",   "1",     MAGNETIC_FLUX_DENSITY),
    ("H",   "1",     INDUCTANCE),
    ("lx",  "1",     ILLUMINANCE),
    ("kat", "1",     CATALYTIC_ACTIVITY),
)


__all__ = [
    "BaseUnits",
    "SI",
    "UnitSystem",
]
