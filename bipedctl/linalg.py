"""Linear algebra helpers."""

from __future__ import annotations

import numpy as np


def pseudo_inverse(matrix, sigma_threshold) -> np.ndarray:
    """Pseudo-inverse by SVD, treating singular values at or below the threshold as zero.

    A 1x1 matrix is inverted only when its value exceeds the threshold.
    """
    a = np.asarray(matrix, dtype=float)
    if a.ndim != 2:
        raise ValueError(f"matrix must be two-dimensional, got shape {a.shape}")
    if a.shape == (1, 1):
        value = a[0, 0]
        return np.array([[1.0 / value if value > sigma_threshold else 0.0]])
    u, s, vh = np.linalg.svd(a, full_matrices=False)
    keep = s > sigma_threshold
    inv_s = np.divide(1.0, s, out=np.zeros_like(s), where=keep)
    return vh.T @ np.diag(inv_s) @ u.T