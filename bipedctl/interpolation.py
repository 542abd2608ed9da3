"""Interpolation between two values over a phase in [0, 1]."""

from __future__ import annotations

import numpy as np


def _values(y):
    if isinstance(y, (list, tuple)):
        return np.asarray(y, dtype=float)
    return y


def _check_phase(x) -> None:
    if not 0 <= x <= 1:
        raise ValueError(f"interpolation phase must be within [0, 1], got {x}")


def lerp(y0, yf, x):
    """Linear interpolation from ``y0`` to ``yf``."""
    _check_phase(x)
    y0, yf = _values(y0), _values(yf)
    return y0 + (yf - y0) * x


def cubic_bezier(y0, yf, x):
    """Cubic Bezier interpolation from ``y0`` to ``yf``."""
    _check_phase(x)
    y0, yf = _values(y0), _values(yf)
    bezier = x * x * x + 3.0 * (x * x * (1.0 - x))
    return y0 + bezier * (yf - y0)


def cubic_bezier_first_derivative(y0, yf, x):
    """Derivative of :func:`cubic_bezier` with respect to ``x``."""
    _check_phase(x)
    y0, yf = _values(y0), _values(yf)
    bezier = 6.0 * x * (1.0 - x)
    return bezier * (yf - y0)


def cubic_bezier_second_derivative(y0, yf, x):
    """Second-derivative term used for swing trajectories: ``-12 x (yf - y0)``."""
    _check_phase(x)
    y0, yf = _values(y0), _values(yf)
    bezier = -12.0 * x
    return bezier * (yf - y0)