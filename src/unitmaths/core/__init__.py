"""Dimension vectors, units and values."""
