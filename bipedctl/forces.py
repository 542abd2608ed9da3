"""External push forces: keyboard teleoperation, contact averaging and display scaling."""

from __future__ import annotations

from enum import Enum

import numpy as np

KEYCODE_UP = 0x41
KEYCODE_DOWN = 0x42
KEYCODE_RIGHT = 0x43
KEYCODE_LEFT = 0x44
KEYCODE_SPACE = 0x20

PULSE_FORCE_X = 60.0
PULSE_FORCE_Y = 30.0
STEP_FORCE_X = 16.0
STEP_FORCE_Y = 8.0
FORCE_LIMIT = 220.0
PULSE_DURATION = 0.1  # seconds a pulse is held before release
DISPLAY_SCALE = 20.0


class ForceMode(Enum):
    """How key presses turn into force."""

    PULSED = 1
    CONTINUOUS = -1


def _clamp(value: float) -> float:
    return max(-FORCE_LIMIT, min(FORCE_LIMIT, value))


class ForceTeleop:
    """Keyboard-driven force applied to the robot trunk.

    In pulsed mode an arrow key sets a fixed force that is released right
    after it is published. In continuous mode each arrow key adds a step to
    the force, limited to ``FORCE_LIMIT``. Space switches modes and zeroes
    the force.
    """

    def __init__(self, mode: ForceMode = ForceMode.PULSED):
        self.mode = ForceMode(mode)
        self.fx = 0.0
        self.fy = 0.0
        self.fz = 0.0

    @property
    def force(self) -> tuple[float, float, float]:
        """The current force ``(fx, fy, fz)``."""
        return (self.fx, self.fy, self.fz)

    def _zero(self) -> None:
        self.fx = self.fy = self.fz = 0.0

    def handle_key(self, code) -> tuple[float, float, float] | None:
        """Apply a key press; return the force to publish, or None if the key is ignored."""
        if isinstance(code, str):
            if len(code) != 1:
                raise ValueError(f"expected a single character, got {code!r}")
            code = ord(code)
        pulsed = self.mode is ForceMode.PULSED
        if code == KEYCODE_UP:
            self.fx = PULSE_FORCE_X if pulsed else _clamp(self.fx + STEP_FORCE_X)
        elif code == KEYCODE_DOWN:
            self.fx = -PULSE_FORCE_X if pulsed else _clamp(self.fx - STEP_FORCE_X)
        elif code == KEYCODE_LEFT:
            self.fy = PULSE_FORCE_Y if pulsed else _clamp(self.fy + STEP_FORCE_Y)
        elif code == KEYCODE_RIGHT:
            self.fy = -PULSE_FORCE_Y if pulsed else _clamp(self.fy - STEP_FORCE_Y)
        elif code == KEYCODE_SPACE:
            self.mode = ForceMode.CONTINUOUS if pulsed else ForceMode.PULSED
            self._zero()
        else:
            return None
        return self.force

    def release(self) -> tuple[float, float, float]:
        """End a pulse: in pulsed mode the force drops to zero. Return the force."""
        if self.mode is ForceMode.PULSED:
            self._zero()
        return self.force


def average_contact_force(forces) -> np.ndarray:
    """Mean of per-contact force vectors; zero when there is no contact."""
    arr = np.asarray(list(forces), dtype=float)
    if arr.size == 0:
        return np.zeros(3)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"forces must be 3-vectors, got shape {arr.shape}")
    return arr.mean(axis=0)


def scale_force_for_display(force) -> np.ndarray:
    """Endpoint of the line drawn for a force vector."""
    arr = np.asarray(force, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"force must have 3 elements, got shape {arr.shape}")
    return arr / DISPLAY_SCALE