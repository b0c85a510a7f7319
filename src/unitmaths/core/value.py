"""
unitmaths.core.value
====================

Defines `Value`, a magnitude paired with a `Unit`.

Rules:
- ``+`` / ``-`` need identical dimensions. The right operand is rescaled into
  the left operand's factor; the result keeps the left unit.
- ``*`` / ``/`` between values combine the units with ``compose`` /
  ``invert_combine``. The factor of the result is *not* renormalised, so
  ``(30 mL) * (0.1 M)`` carries the factor ``1e-6 * 1e3``.
- ``*`` / ``/`` by a bare number scale the magnitude only.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from math import isclose
from numbers import Number
from typing import Any

from unitmaths.core.dimensions import Dimension
from unitmaths.core.unit import Unit
from unitmaths.errors import DimensionMismatch


def _is_scalar(x: object) -> bool:
    return isinstance(x, Number) and not isinstance(x, bool)


@dataclass(frozen=True, slots=True)
class Value:
    """
    A physical quantity.

    Attributes
    ----------
    magnitude : Scalar
        Numeric value expressed in ``unit``.
    unit : Unit
        Unit the magnitude is expressed in.
    """

    magnitude: Any
    unit: Unit

    @property
    def dimension(self) -> Dimension:
        return self.unit.dimension

    @property
    def base_magnitude(self) -> Any:
        """Magnitude expressed in base units (factor 1)."""
        return self.magnitude * self.unit.factor

    def _check_same_dimension(self, other: "Value", operation: str) -> None:
        if self.unit.dimension != other.unit.dimension:
            raise DimensionMismatch(operation, self.unit.dimension, other.unit.dimension)

    def _rescaled(self, other: "Value") -> Any:
        """Magnitude of ``other`` expressed in this value's unit factor."""
        if other.unit.factor == self.unit.factor:
            return other.magnitude
        return other.magnitude * (other.unit.factor / self.unit.factor)

    def cast(self, target: Unit) -> "Value":
        """Re-express this value in ``target``; dimensions must match."""
        if target.dimension != self.unit.dimension:
            raise DimensionMismatch("Cast", self.unit.dimension, target.dimension)
        return Value(self.magnitude * (self.unit.factor / target.factor), target)

    def is_close(self, other: "Value", rel_tol: float = 1e-9, abs_tol: float = 0.0) -> bool:
        """Same dimension and base magnitudes equal within tolerance."""
        if not isinstance(other, Value):
            return False
        return self.dimension == other.dimension and isclose(
            self.base_magnitude, other.base_magnitude, rel_tol=rel_tol, abs_tol=abs_tol
        )

    # arithmetic
    def __add__(self, other: object) -> "Value":
        if not isinstance(other, Value):
            return NotImplemented
        self._check_same_dimension(other, "Add")
        return Value(self.magnitude + self._rescaled(other), self.unit)

    def __sub__(self, other: object) -> "Value":
        if not isinstance(other, Value):
            return NotImplemented
        self._check_same_dimension(other, "Sub")
        return Value(self.magnitude - self._rescaled(other), self.unit)

    def __mul__(self, other: object) -> "Value":
        if isinstance(other, Value):
            return Value(self.magnitude * other.magnitude, self.unit.compose(other.unit))
        if _is_scalar(other):
            return Value(self.magnitude * other, self.unit)
        return NotImplemented

    def __rmul__(self, other: object) -> "Value":
        # allows 3 * (2 m) -> 6 m
        if _is_scalar(other):
            return Value(other * self.magnitude, self.unit)
        return NotImplemented

    def __truediv__(self, other: object) -> "Value":
        if isinstance(other, Value):
            return Value(self.magnitude / other.magnitude, self.unit.invert_combine(other.unit))
        if _is_scalar(other):
            return Value(self.magnitude / other, self.unit)
        return NotImplemented

    def __rtruediv__(self, other: object) -> "Value":
        # scalar / value -> inverse dimension
        if _is_scalar(other):
            return Value(other / self.magnitude, self.unit.power(-1))
        return NotImplemented

    def __pow__(self, n: int) -> "Value":
        k = operator.index(n)
        return Value(self.magnitude ** k, self.unit.power(k))

    def __neg__(self) -> "Value":
        return Value(-self.magnitude, self.unit)

    def __pos__(self) -> "Value":
        return self

    def __abs__(self) -> "Value":
        return Value(abs(self.magnitude), self.unit)

    # ordering
    def _compare_key(self, other: object, operation: str) -> tuple[Any, Any]:
        if not isinstance(other, Value):
            raise TypeError(f"Cannot compare Value with type {type(other).__name__}")
        self._check_same_dimension(other, operation)
        return self.magnitude, self._rescaled(other)

    def __lt__(self, other: object) -> bool:
        a, b = self._compare_key(other, "Comparison")
        return a < b

    def __le__(self, other: object) -> bool:
        a, b = self._compare_key(other, "Comparison")
        return a <= b

    def __gt__(self, other: object) -> bool:
        a, b = self._compare_key(other, "Comparison")
        return a > b

    def __ge__(self, other: object) -> bool:
        a, b = self._compare_key(other, "Comparison")
        return a >= b

    def __repr__(self) -> str:
        return f"Value({self.magnitude!r}, {self.unit!r})"


__all__ = ["Value"]
