"""Unit systems: registry, notation parser and formatter."""

from unitmaths.units.registry import SI, BaseUnits, UnitSystem

__all__ = ["SI", "BaseUnits", "UnitSystem"]
