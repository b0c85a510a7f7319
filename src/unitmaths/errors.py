"""
unitmaths.errors
================

Exception hierarchy.

Parse errors derive from ``ValueError`` and dimension errors from
``TypeError`` so existing ``except ValueError`` / ``except TypeError``
handlers keep working.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from unitmaths.core.dimensions import Dimension


class UnitsError(Exception):
    """Base class for every error raised by unitmaths."""


class UnitParseError(UnitsError, ValueError):
    """A unit or value string could not be interpreted."""


class UnknownUnit(UnitParseError):
    """A symbol is not registered in the unit system."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Unknown unit symbol: {symbol!r}")


class MalformedExponent(UnitParseError):
    def __init__(self, symbol: str, text: str) -> None:
        self.symbol = symbol
        self.text = text
        super().__init__(f"Exponent {text!r} of unit {symbol!r} is not an integer")


class MalformedValue(UnitParseError):
    """The value string has no separable numeric literal."""

    def __init__(self, text: str, reason: str = "missing or malformed numeric literal") -> None:
        self.text = text
        super().__init__(f"Cannot parse value {text!r}: {reason}")


class DimensionMismatch(UnitsError, TypeError):
    """Two quantities with different dimensions were combined.

    This signals a bookkeeping bug in the caller, not bad user input.
    """

    def __init__(self, operation: str, left: "Dimension", right: "Dimension") -> None:
        self.operation = operation
        self.left = left
        self.right = right
        super().__init__(
            f"{operation} requires same dimensions, got {left:#} and {right:#}"
        )


__all__ = [
    "UnitsError",
    "UnitParseError",
    "UnknownUnit",
    "MalformedExponent",
    "MalformedValue",
    "DimensionMismatch",
]
