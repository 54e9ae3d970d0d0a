"""Arithmetic, trigonometry and direct/inverse geodetic problem solving."""

__version__ = "0.1.0"
__all__ = ["basic", "geodesy", "cli"]