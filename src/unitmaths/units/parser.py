"""
unitmaths.units.parser
======================

Scanner for unit expressions such as ``"kg m/s²"``, ``"mol L⁻¹"`` or
``"m^-2"``.

Grammar::

    unit_expr := term { separator term }
    term      := ["/"] symbol [exponent]  |  "1"
    symbol    := letter { letter }
    exponent  := ["-"] digit { digit }     (ASCII or superscript)
    separator := whitespace | "*" | "·"

Before scanning, the input is NFC-normalised, superscript digits/minus are
mapped to ASCII, ``^`` is dropped and ``*``/``·`` become spaces.

The scanner is a two-state machine (``IN_SYMBOL`` / ``IN_EXPONENT``) with an
``inverted`` flag. A ``/`` sets the flag and the flag is cleared as soon as
the next term is finalised, so a slash inverts exactly one term::

    "kg/mol s"  ->  kg¹ · mol⁻¹ · s¹      (s is NOT inverted)

Symbols are matched case-sensitively against registered atomic units; no
SI-prefix synthesis takes place.
"""

from __future__ import annotations

import enum
import logging
import unicodedata
from functools import lru_cache
from typing import Callable, Iterator, NamedTuple, Tuple

from unitmaths.core.unit import DIMENSIONLESS_UNIT, Unit
from unitmaths.core.utils import from_superscript
from unitmaths.errors import MalformedExponent, UnitParseError

logger = logging.getLogger(__name__)

_SEPARATORS = {"*": " ", "·": " ", "⋅": " "}
_SEPARATOR_TABLE = str.maketrans({**_SEPARATORS, "^": None, "/": " /"})


class _State(enum.Enum):
    IN_SYMBOL = "symbol"
    IN_EXPONENT = "exponent"


class Term(NamedTuple):
    """One atomic unit reference: ``symbol`` raised to ``exponent``."""

    symbol: str
    exponent: int
    inverted: bool = False

    @property
    def signed_exponent(self) -> int:
        return -self.exponent if self.inverted else self.exponent


def normalize_symbol(symbol: str) -> str:
    """Canonical key for an atomic unit symbol.

    Symbols are NFC-normalised the same way as parser input, so a unit
    registered under U+212B ANGSTROM SIGN is found when the parser
    reads it back as U+00C5.
    """
    return unicodedata.normalize("NFC", symbol)


def normalize_expression(text: str) -> str:
    """Apply the preprocessing steps described in the module docstring."""
    text = normalize_symbol(text)
    text = from_superscript(text)
    return text.translate(_SEPARATOR_TABLE)


_EXPONENT_CHARS = frozenset("0123456789-")


def _is_exponent_char(c: str) -> bool:
    # ASCII only; superscripts are already mapped by normalize_expression
    return c in _EXPONENT_CHARS


def iter_terms(text: str) -> Iterator[Term]:
    """Lazily scan ``text`` into terms.

    Raises `UnitParseError` on characters outside the grammar and
    `MalformedExponent` when an exponent is not an integer (``"m-"``,
    ``"m2-1"``). A bare ``"1"`` (as in ``"1/kg"``) yields nothing.
    """
    symbol: list[str] = []
    exponent: list[str] = []
    state = _State.IN_SYMBOL
    inverted = False

    def finish(exp: int) -> Term:
        nonlocal inverted
        term = Term("".join(symbol), exp, inverted)
        inverted = False
        symbol.clear()
        exponent.clear()
        return term

    # trailing separator flushes the last term
    for c in normalize_expression(text) + " ":
        if c.isspace():
            c = " "
        if c == " " and not symbol and not exponent:
            continue

        if c == "/":
            inverted = True
            continue

        if state is _State.IN_SYMBOL:
            if c.isalpha():
                symbol.append(c)
            elif _is_exponent_char(c):
                state = _State.IN_EXPONENT
                exponent.append(c)
            elif c == " ":
                yield finish(1)
            else:
                raise UnitParseError(f"Unexpected character {c!r} in unit expression {text!r}")
            continue

        # _State.IN_EXPONENT
        if _is_exponent_char(c):
            exponent.append(c)
            continue
        if not (c.isalpha() or c == " "):
            raise UnitParseError(f"Unexpected character {c!r} in unit expression {text!r}")

        raw = "".join(exponent)
        if not symbol:
            # a lone "1" is the numerator of "1/kg"
            if raw != "1":
                raise UnitParseError(f"Number {raw!r} without a unit symbol in {text!r}")
            if inverted:
                raise UnitParseError(f"Cannot invert a bare number in {text!r}")
            exponent.clear()
        else:
            try:
                exp = int(raw)
            except ValueError:
                raise MalformedExponent("".join(symbol), raw) from None
            yield finish(exp)

        state = _State.IN_SYMBOL
        if c != " ":
            symbol.append(c)

    if inverted:
        raise UnitParseError(f"Dangling '/' at end of unit expression {text!r}")


# Cache the scanned terms only, so the cache is safe across unit systems.
@lru_cache(maxsize=4096)
def compile_terms(text: str) -> Tuple[Term, ...]:
    return tuple(iter_terms(text))


def parse_unit(
    text: str,
    lookup: Callable[[str], Unit],
    identity: Unit = DIMENSIONLESS_UNIT,
) -> Unit:
    """Fold the terms of ``text`` into one composite `Unit`.

    ``lookup`` resolves an atomic symbol (normally
    ``UnitSystem.lookup_atomic``) and raises `UnknownUnit` for unknown ones.
    The accumulator starts at ``identity`` (dimensionless, factor 1 in the
    caller's scalar type), so ``""`` parses to that identity.
    """
    terms = compile_terms(text)
    unit = identity
    for term in terms:
        unit = unit.compose(lookup(term.symbol).power(term.signed_exponent))
    logger.debug("Parsed unit expression %r into %d term(s)", text, len(terms))
    return unit


__all__ = [
    "Term",
    "normalize_symbol",
    "normalize_expression",
    "iter_terms",
    "compile_terms",
    "parse_unit",
]
