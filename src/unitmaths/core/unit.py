from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from unitmaths.core.dimensions import DIMENSIONLESS, Dimension, DimLike


@runtime_checkable
class Scalar(Protocol):
    """Capabilities a magnitude or scale factor must offer.

    An ordered field with integer powers: ``float``, ``fractions.Fraction``
    and ``decimal.Decimal`` all qualify. Parsing from text is supplied
    separately, as the ``number`` callable of a unit system.
    """

    def __add__(self, other: Any) -> Any: ...
    def __sub__(self, other: Any) -> Any: ...
    def __mul__(self, other: Any) -> Any: ...
    def __truediv__(self, other: Any) -> Any: ...
    def __pow__(self, n: Any) -> Any: ...
    def __lt__(self, other: Any) -> bool: ...
    def __abs__(self) -> Any: ...


NumberParser = Callable[[str], Any]


@dataclass(frozen=True, slots=True)
class Unit:
    """
    A unit: a dimension plus the factor converting one of it into the base
    system.

    Attributes
    ----------
    dimension : Dimension
        Exponent vector, e.g. metres -> ``Dimension.of(length=1)``.
    factor : Scalar
        Examples: m=1, km=1000, min=60, mL=1e-6.

    Equality is exact on both fields. A non-positive factor is meaningless
    but is not rejected.
    """

    dimension: Dimension
    factor: Any = 1.0

    def __post_init__(self) -> None:
        if not isinstance(self.dimension, Dimension):
            object.__setattr__(self, "dimension", Dimension(self.dimension))

    @classmethod
    def base(cls, dimension: DimLike, number: NumberParser = float) -> "Unit":
        """Factor-1 unit of ``dimension`` in the scalar type produced by ``number``."""
        return cls(Dimension(dimension), number("1"))

    # --- Algebra ---
    def compose(self, other: "Unit") -> "Unit":
        return Unit(self.dimension + other.dimension, self.factor * other.factor)

    def invert_combine(self, other: "Unit") -> "Unit":
        return Unit(self.dimension - other.dimension, self.factor / other.factor)

    def power(self, n: int) -> "Unit":
        k = operator.index(n)
        return Unit(self.dimension * k, self.factor ** k)

    def __mul__(self, other: object) -> "Unit":
        if not isinstance(other, Unit):
            return NotImplemented
        return self.compose(other)

    def __truediv__(self, other: object) -> "Unit":
        if not isinstance(other, Unit):
            return NotImplemented
        return self.invert_combine(other)

    def __rtruediv__(self, n: object) -> "Unit":
        if n != 1:
            raise TypeError(
                f"Invalid operation: cannot divide {n!r} by a Unit. "
                "Only 1/unit (reciprocal) is supported."
            )
        return self.power(-1)

    def __pow__(self, n: int) -> "Unit":
        return self.power(n)

    # --- Partial order ---
    def partial_compare(self, other: "Unit") -> Optional[int]:
        """Compare factors of two units of the same dimension.

        Returns -1, 0 or 1, or ``None`` when the dimensions differ and the
        units are incomparable.
        """
        if self.dimension != other.dimension:
            return None
        if self.factor < other.factor:
            return -1
        if other.factor < self.factor:
            return 1
        return 0

    # Incomparable units compare False both ways, like sets.
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.partial_compare(other) == -1

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.partial_compare(other) in (-1, 0)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.partial_compare(other) == 1

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.partial_compare(other) in (0, 1)

    @property
    def is_dimensionless(self) -> bool:
        return self.dimension.is_dimensionless

    def __repr__(self) -> str:
        return f"Unit({self.dimension!r}, factor={self.factor!r})"


DIMENSIONLESS_UNIT = Unit(DIMENSIONLESS, 1.0)


# --- Function forms -----------------------------------------------------------

def compose(a: Unit, b: Unit) -> Unit:
    return a.compose(b)


def invert_combine(a: Unit, b: Unit) -> Unit:
    return a.invert_combine(b)


def power(a: Unit, n: int) -> Unit:
    return a.power(n)


__all__ = [
    "Scalar",
    "Unit",
    "DIMENSIONLESS_UNIT",
    "compose",
    "invert_combine",
    "power",
]
