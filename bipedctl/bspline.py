"""Clamped uniform B-spline with boundary derivative constraints."""

from __future__ import annotations

import numpy as np


def _is_equal(x: float, y: float) -> bool:
    return (x - y) * (x - y) < 1.0e-10


class BSpline:
    """B-spline through fixed endpoints with derivative constraints.

    ``const_level_ini`` / ``const_level_fin`` select how many derivatives are
    pinned at each end: 0 position only, 1 adds velocity, 2 adds acceleration.
    ``init`` and ``fin`` hold ``dim`` values per constrained level, position
    first.
    """

    def __init__(self, dim, degree, num_middle, const_level_ini, const_level_fin):
        for name, val in (
            ("dim", dim),
            ("degree", degree),
            ("num_middle", num_middle),
            ("const_level_ini", const_level_ini),
            ("const_level_fin", const_level_fin),
        ):
            if val < 0:
                raise ValueError(f"{name} must be non-negative, got {val}")
        if dim < 1:
            raise ValueError("dim must be at least 1")
        if const_level_ini > degree or const_level_fin > degree:
            raise ValueError("constraint level cannot exceed the spline degree")
        self.dim = dim
        self.degree = degree
        self.num_middle = num_middle
        self.const_level_ini = const_level_ini
        self.const_level_fin = const_level_fin
        self.num_knots = degree + num_middle + 2 + const_level_ini + const_level_fin + 1
        self.num_control_points = num_middle + 2 + const_level_ini + const_level_fin
        if self.num_knots < 2 * (degree + 1):
            raise ValueError(
                f"invalid setup (num_knots, degree): {self.num_knots}, {degree}"
            )
        self.knots = [0.0] * self.num_knots
        self.control_points = np.zeros((self.num_control_points, dim))
        self.fin_time: float | None = None

    def set_param(self, init, fin, middle_points, fin_time) -> None:
        """Fix boundary conditions, middle control points and duration."""
        init = np.asarray(init, dtype=float).ravel()
        fin = np.asarray(fin, dtype=float).ravel()
        expected_ini = self.dim * (self.const_level_ini + 1)
        expected_fin = self.dim * (self.const_level_fin + 1)
        if init.size != expected_ini:
            raise ValueError(f"init must have {expected_ini} values, got {init.size}")
        if fin.size != expected_fin:
            raise ValueError(f"fin must have {expected_fin} values, got {fin.size}")
        middle = np.asarray(middle_points, dtype=float)
        if middle.size != self.num_middle * self.dim:
            raise ValueError(
                f"expected {self.num_middle} middle points of dimension {self.dim}"
            )
        middle = middle.reshape(self.num_middle, self.dim)
        fin_time = float(fin_time)
        self._calc_knots(fin_time)
        self._calc_constrained_points(init, fin, fin_time)
        for i, point in enumerate(middle):
            self.control_points[self.const_level_ini + 1 + i] = point
        self.fin_time = fin_time

    def curve_point(self, u) -> np.ndarray:
        """Position at time ``u``, clamped to the spline's time range."""
        self._require_params()
        u = self._clamp(float(u))
        span = self._find_span(u)
        basis = self._basis_funs(span, u)
        first = span - self.degree
        return sum(
            (n * self.control_points[first + i] for i, n in enumerate(basis)),
            np.zeros(self.dim),
        )

    def curve_derivative(self, u, d) -> np.ndarray:
        """``d``-th derivative at time ``u``, clamped to the time range."""
        if d < 0:
            raise ValueError("derivative order must be non-negative")
        if d > self.degree:
            raise ValueError(
                f"derivative order {d} exceeds spline degree {self.degree}"
            )
        self._require_params()
        u = self._clamp(float(u))
        span = self._find_span(u)
        ders = self._basis_funs_ders(span, u, d)
        first = span - self.degree
        return sum(
            (c * self.control_points[first + j] for j, c in enumerate(ders[d])),
            np.zeros(self.dim),
        )

    def _require_params(self) -> None:
        if self.fin_time is None:
            raise RuntimeError("spline parameters have not been set")

    def _clamp(self, u: float) -> float:
        if u < self.knots[0]:
            return self.knots[0]
        if u > self.knots[-1]:
            return self.knots[-1]
        return u

    def _calc_knots(self, tf: float) -> None:
        p = self.degree
        num_mid = self.num_knots - 2 * p - 2
        step = tf / (num_mid + 1)
        knots = [0.0] * (p + 1)
        for _ in range(num_mid):
            knots.append(knots[-1] + step)
        knots.extend([tf] * (p + 1))
        self.knots = knots

    def _find_span(self, u: float) -> int:
        k = self.knots
        n = self.num_knots
        if u < k[0] or k[-1] < u:
            raise ValueError(f"parameter {u} is outside the knot range")
        if _is_equal(u, k[-1]):
            for i in range(n - 2, -1, -1):
                if k[i] < u <= k[i + 1]:
                    return i
            raise ValueError("no knot span contains the final parameter")
        low, high = 0, n - 1
        mid = (low + high) >> 1
        while u < k[mid] or u >= k[mid + 1]:
            if u < k[mid]:
                high = mid
            else:
                low = mid
            mid = (low + high) >> 1
        return mid

    def _left(self, i: int, j: int, u: float) -> float:
        return u - self.knots[i + 1 - j]

    def _right(self, i: int, j: int, u: float) -> float:
        return self.knots[i + j] - u

    def _basis_funs(self, span: int, u: float) -> list[float]:
        p = self.degree
        n = [0.0] * (p + 1)
        n[0] = 1.0
        temp = 0.0
        for j in range(1, p + 1):
            saved = 0.0
            for r in range(j):
                left = self._left(span, j - r, u)
                right = self._right(span, r + 1, u)
                if right + left != 0:
                    temp = n[r] / (right + left)
                n[r] = saved + right * temp
                saved = left * temp
            n[j] = saved
        return n

    def _basis_funs_ders(self, span: int, u: float, count: int) -> list[list[float]]:
        p = self.degree
        ndu = [[0.0] * (p + 1) for _ in range(p + 1)]
        a = [[0.0] * (p + 1) for _ in range(2)]
        ndu[0][0] = 1.0
        for j in range(1, p + 1):
            saved = 0.0
            for r in range(j):
                left = self._left(span, j - r, u)
                right = self._right(span, r + 1, u)
                ndu[j][r] = right + left
                temp = ndu[r][j - 1] / ndu[j][r]
                ndu[r][j] = saved + right * temp
                saved = left * temp
            ndu[j][j] = saved

        ders = [[0.0] * (p + 1) for _ in range(count + 1)]
        for j in range(p + 1):
            ders[0][j] = ndu[j][p]

        for r in range(p + 1):
            s1, s2 = 0, 1
            a[0][0] = 1.0
            for k in range(1, count + 1):
                d = 0.0
                rk = r - k
                pk = p - k
                if r >= k:
                    a[s2][0] = a[s1][0] / ndu[pk + 1][rk]
                    d = a[s2][0] * ndu[rk][pk]
                j1 = 1 if rk >= -1 else -rk
                j2 = k - 1 if r - 1 <= pk else p - r
                for j in range(j1, j2 + 1):
                    a[s2][j] = (a[s1][j] - a[s1][j - 1]) / ndu[pk + 1][rk + j]
                    d += a[s2][j] * ndu[rk + j][pk]
                if r <= pk:
                    a[s2][k] = -a[s1][k - 1] / ndu[pk + 1][r]
                    d += a[s2][k] * ndu[r][pk]
                ders[k][r] = d
                s1, s2 = s2, s1

        factor = p
        for k in range(1, count + 1):
            ders[k] = [value * factor for value in ders[k]]
            factor *= p - k
        return ders

    def _calc_constrained_points(self, init: np.ndarray, fin: np.ndarray, tf: float) -> None:
        dim = self.dim
        p = self.degree
        cps = self.control_points
        last = self.num_control_points
        cps[0] = init[:dim]
        cps[last - 1] = fin[:dim]

        d_mat = self._basis_funs_ders(self._find_span(0.0), 0.0, self.const_level_ini)
        for j in range(1, self.const_level_ini + 1):
            value = init[j * dim:(j + 1) * dim].copy()
            for h in range(j, 0, -1):
                value -= d_mat[j][h - 1] * cps[h - 1]
            cps[j] = value / d_mat[j][j]

        c_mat = self._basis_funs_ders(self._find_span(tf), tf, self.const_level_fin)
        for idx in range(1, self.const_level_fin + 1):
            value = fin[idx * dim:(idx + 1) * dim].copy()
            for h in range(idx, 0, -1):
                value -= c_mat[idx][p + 1 - h] * cps[last - h]
            cps[last - 1 - idx] = value / c_mat[idx][p - idx]