"""First-order low-pass IIR filter."""

from __future__ import annotations

import math

import numpy as np


def _as_state(value):
    if isinstance(value, (list, tuple, np.ndarray)):
        return np.array(value, dtype=float)
    return value


class FirstOrderIIRFilter:
    """First-order filter: ``state = alpha * x + (1 - alpha) * state``.

    The state may be a scalar or a numpy array.
    """

    def __init__(self, alpha, initial_value):
        self.alpha = float(alpha)
        self._state = _as_state(initial_value)

    @classmethod
    def from_frequencies(cls, cutoff_frequency, sample_frequency, initial_value):
        """Build a filter from a cutoff and a sample frequency."""
        if sample_frequency == 0:
            raise ValueError("sample frequency must be non-zero")
        alpha = 1.0 - math.exp(-2.0 * math.pi * cutoff_frequency / sample_frequency)
        return cls(alpha, initial_value)

    @property
    def value(self):
        """Current filter state, without updating it."""
        return self._state

    def update(self, x):
        """Feed a new sample and return the new state."""
        x = _as_state(x)
        self._state = self.alpha * x + (1.0 - self.alpha) * self._state
        return self._state

    def reset(self) -> None:
        """Set the state to zero, keeping its shape."""
        self._state = self._state * 0.0