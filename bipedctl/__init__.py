"""Orientation math, curves, filters, robot geometry, messages and state estimation for biped control."""

__version__ = "0.1.0"