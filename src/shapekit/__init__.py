"""Immutable 3D primitive shapes and unit-direction vectors."""

__version__ = "0.1.0"
