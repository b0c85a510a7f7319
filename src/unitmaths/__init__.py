"""
unitmaths: dimensional analysis and unit notation.

Quantities are (magnitude, unit) pairs; only dimensionally compatible
quantities add or subtract, and unit strings such as ``"kg m/s²"`` or
``"mol/L"`` are parsed into and rendered from the internal representation.

This module exposes a minimal, stable public API. The public classes are
imported lazily on first attribute access.
"""

from importlib import import_module
from importlib import metadata as _metadata
from typing import Any


__license__ = "MIT"

# Try to read the installed package version first; fall back to pyproject for local dev.
try:
    __version__ = _metadata.version("unitmaths")
except _metadata.PackageNotFoundError:
    import os
    import tomllib
    _pyproject = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "..", "pyproject.toml")
    with open(os.path.normpath(_pyproject), "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

_LAZY = {
    "Dimension": "unitmaths.core.dimensions",
    "Unit": "unitmaths.core.unit",
    "Value": "unitmaths.core.value",
    "UnitSystem": "unitmaths.units.registry",
    "BaseUnits": "unitmaths.units.registry",
    "SI": "unitmaths.units.registry",
    "UnitsError": "unitmaths.errors",
    "UnitParseError": "unitmaths.errors",
    "UnknownUnit": "unitmaths.errors",
    "MalformedExponent": "unitmaths.errors",
    "MalformedValue": "unitmaths.errors",
    "DimensionMismatch": "unitmaths.errors",
}


def __getattr__(name: str) -> Any:
    module = _LAZY.get(name)
    if module is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return getattr(import_module(module), name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_LAZY))


# Public names exposed by the package. Keep this minimal and stable.
__all__ = ["__version__", "__license__", *_LAZY]
