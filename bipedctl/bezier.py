"""Bezier curve over a fixed duration."""

from __future__ import annotations

import math

import numpy as np


class BezierCurve:
    """Bezier curve of ``num_ctrl_points`` control points in ``dim`` dimensions.

    The first control point is the start, the last the end.
    """

    def __init__(self, dim, num_ctrl_points):
        if dim < 1:
            raise ValueError("dim must be at least 1")
        if num_ctrl_points < 2:
            raise ValueError("a Bezier curve needs at least two control points")
        self.dim = dim
        self.num_ctrl_points = num_ctrl_points
        self.ctrl_points = np.zeros((num_ctrl_points, dim))
        self.coeff = np.zeros(num_ctrl_points)
        self.end_time: float | None = None

    def set_param(self, ctrl_points, fin_time) -> None:
        """Set the control points and the curve duration."""
        points = np.asarray(ctrl_points, dtype=float)
        if points.shape != (self.num_ctrl_points, self.dim):
            raise ValueError(
                f"expected control points of shape {(self.num_ctrl_points, self.dim)}, "
                f"got {points.shape}"
            )
        self.end_time = float(fin_time)
        self.ctrl_points = points.copy()
        n = self.num_ctrl_points - 1
        self.coeff = np.array([float(math.comb(n, j)) for j in range(n + 1)])

    def _require_params(self) -> float:
        if self.end_time is None:
            raise RuntimeError("curve parameters have not been set")
        return self.end_time

    def curve_point(self, u) -> np.ndarray:
        """Position at time ``u``; before the start or after the end it holds."""
        end = self._require_params()
        if u > end:
            return self.ctrl_points[-1].copy()
        if u < 0.0:
            return self.ctrl_points[0].copy()
        s = u / end
        n = self.num_ctrl_points - 1
        weights = np.array(
            [self.coeff[j] * s**j * (1 - s) ** (n - j) for j in range(n + 1)]
        )
        return weights @ self.ctrl_points

    def curve_velocity(self, u) -> np.ndarray:
        """Velocity at time ``u``; zero outside the curve's duration."""
        end = self._require_params()
        if u > end or u < 0.0:
            return np.zeros(self.dim)
        s = u / end
        n = self.num_ctrl_points - 1
        weights = np.zeros(n + 1)
        weights[0] = self.coeff[0] * (-n * (1 - s) ** (n - 1))
        for j in range(1, n):
            weights[j] = self.coeff[j] * (
                j * s ** (j - 1) * (1 - s) ** (n - j)
                - (n - j) * s**j * (1 - s) ** (n - j - 1)
            )
        weights[n] = self.coeff[n] * n * s ** (n - 1)
        return (weights @ self.ctrl_points) / end