"""
unitmaths.units.formatter
=========================

Text rendering of values against a unit system.

The best display unit is the registered atomic unit of exactly the same
dimension whose factor is closest to the value's factor (not necessarily
equal). When the dimension has no registered unit, the magnitude is expressed
in base units and followed by the base symbols with superscript exponents,
e.g. ``"12 kg¹m²s⁻³A⁻¹"``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Tuple

from unitmaths.core.dimensions import CANONICAL_ORDER, AXES, Dimension
from unitmaths.core.unit import Unit
from unitmaths.core.utils import format_number, superscript_int
from unitmaths.core.value import Value

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from unitmaths.units.registry import BaseUnits, UnitSystem

logger = logging.getLogger(__name__)

_AXIS_INDEX = {name: i for i, name in enumerate(AXES)}


def best_unit(system: "UnitSystem", unit: Unit) -> Optional[Tuple[str, Unit]]:
    """Return ``(symbol, unit)`` of the closest registered unit, or None.

    Candidates must match ``unit.dimension`` exactly; among them the one
    minimising ``|candidate.factor - unit.factor|`` wins. Ties go to the
    symbol registered first; re-registering a symbol does not move it.
    """
    best: Optional[Tuple[str, Unit]] = None
    best_score = None
    for symbol, candidate in system.items():
        if candidate.dimension != unit.dimension:
            continue
        score = abs(candidate.factor - unit.factor)
        if best_score is None or score < best_score:
            best, best_score = (symbol, candidate), score
    return best


def format_base_units(base: "BaseUnits", dimension: Dimension) -> str:
    """Concatenate ``<base symbol><superscript exponent>`` for nonzero axes."""
    parts = []
    for axis in CANONICAL_ORDER:
        e = dimension[_AXIS_INDEX[axis]]
        if e != 0:
            parts.append(f"{getattr(base, axis)}{superscript_int(e)}")
    return "".join(parts)


def format_value(system: "UnitSystem", value: Value) -> str:
    """Render ``value`` as ``"<number> <symbol>"``."""
    found = best_unit(system, value.unit)
    if found is not None:
        symbol, candidate = found
        magnitude = value.magnitude * (value.unit.factor / candidate.factor)
        return f"{format_number(magnitude)} {symbol}"

    logger.debug("No registered unit for %r; falling back to base units", value.unit.dimension)
    suffix = format_base_units(system.base, value.unit.dimension)
    number = format_number(value.magnitude * value.unit.factor)
    return f"{number} {suffix}" if suffix else number


def format_unit(system: "UnitSystem", unit: Unit) -> str:
    """Render one of ``unit``; ``km/h`` gives ``"0.277777777777778 m¹s⁻¹"`` in SI."""
    return format_value(system, Value(system.number("1"), unit))


__all__ = [
    "best_unit",
    "format_base_units",
    "format_value",
    "format_unit",
]
