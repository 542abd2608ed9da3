"""Small numeric helpers."""

from __future__ import annotations

import numpy as np


def square(a):
    """Return ``a * a``."""
    return a * a


def almost_equal(a, b, tol) -> bool:
    """True when every element of ``a`` and ``b`` differs by less than ``tol``."""
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.shape != b.shape:
        raise ValueError(f"shape mismatch: {a.shape} vs {b.shape}")
    return bool(np.all(np.abs(a - b) < tol))