"""
unitmaths.core.utils
====================

Character-level helpers shared by the parser and the formatters.

The superscript table is a total, bidirectional mapping over the ten digits
and the minus sign. It is used both to normalise parser input
(``"m⁻²"`` -> ``"m-2"``) and to render exponents (``-2`` -> ``"⁻²"``).
"""

from __future__ import annotations

from typing import Any, Dict

_ASCII = "0123456789-"
_SUPER = "⁰¹²³⁴⁵⁶⁷⁸⁹⁻"

_TO_SUPERSCRIPT = str.maketrans(_ASCII, _SUPER)
_FROM_SUPERSCRIPT = str.maketrans(_SUPER, _ASCII)

# char -> char, both directions
SUPERSCRIPT_MAP: Dict[str, str] = dict(zip(_ASCII, _SUPER))
ASCII_MAP: Dict[str, str] = dict(zip(_SUPER, _ASCII))


def to_superscript(text: str) -> str:
    """Replace ASCII digits and '-' with their superscript glyphs.

    Any other character passes through unchanged:

    >>> to_superscript("m-124")
    'm⁻¹²⁴'
    """
    return text.translate(_TO_SUPERSCRIPT)


def from_superscript(text: str) -> str:
    """Inverse of :func:`to_superscript`; other characters pass through."""
    return text.translate(_FROM_SUPERSCRIPT)


def superscript_int(n: int) -> str:
    # exponent 1 is printed too: '¹'
    return to_superscript(str(int(n)))


def format_number(x: Any) -> str:
    """Render a magnitude for display.

    Floats use 15 significant digits so that binary noise such as
    ``0.30000000000000004`` prints as ``0.3``. Other scalar types (Fraction,
    Decimal, ...) use their own ``str``.
    """
    if isinstance(x, bool):
        return str(int(x))
    if isinstance(x, (int, float)):
        return f"{x:.15g}"
    return str(x)


__all__ = [
    "SUPERSCRIPT_MAP",
    "ASCII_MAP",
    "to_superscript",
    "from_superscript",
    "superscript_int",
    "format_number",
]
