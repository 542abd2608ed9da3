"""Joint-space motions for a twelve-joint legged robot: gains and stand-up trajectory."""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np

from bipedctl.messages import MotorCmd

NUM_JOINTS = 12
POSITION_MODE = 0x0A

# Per-leg (hip, thigh, calf) gains; reference values for simulation only.
_JOINT_GAINS = ((70.0, 3.0), (180.0, 8.0), (300.0, 15.0))

STAND_POSITIONS = np.array(
    [0.0, 0.67, -1.3, -0.0, 0.67, -1.3, 0.0, 0.67, -1.3, -0.0, 0.67, -1.3]
)
STAND_STEPS = 2 * 1000


def _joints(values, what: str) -> np.ndarray:
    arr = np.asarray(values, dtype=float).ravel()
    if arr.size != NUM_JOINTS:
        raise ValueError(f"{what} must have {NUM_JOINTS} values, got {arr.size}")
    return arr


def default_motor_commands(current_positions) -> list[MotorCmd]:
    """Position-mode commands holding each joint where it is, with default gains."""
    positions = _joints(current_positions, "current positions")
    commands = []
    for joint, q in enumerate(positions):
        kp, kd = _JOINT_GAINS[joint % 3]
        commands.append(
            MotorCmd(mode=POSITION_MODE, q=float(q), dq=0.0, tau=0.0, kp=kp, kd=kd)
        )
    return commands


def interpolate_positions(start, target, steps) -> Iterator[np.ndarray]:
    """Yield ``steps`` joint targets moving linearly from ``start`` to ``target``.

    The first yielded value is one step past ``start``; the last is ``target``.
    """
    start = _joints(start, "start")
    target = _joints(target, "target")
    i = 1
    while i <= steps:
        percent = i / steps
        yield start * (1.0 - percent) + target * percent
        i += 1


def stand_trajectory(current_positions, steps=STAND_STEPS) -> Iterator[np.ndarray]:
    """Yield joint targets moving from the current positions to the standing pose."""
    return interpolate_positions(current_positions, STAND_POSITIONS, steps)