"""Low-level command and state messages exchanged with the robot."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from bipedctl.enums import UserCommand

NUM_MOTORS = 10


@dataclass
class MotorCmd:
    """Command for a single joint motor."""

    mode: int = 0
    q: float = 0.0
    dq: float = 0.0
    tau: float = 0.0
    kp: float = 0.0
    kd: float = 0.0


@dataclass
class LowlevelCmd:
    """Commands for every joint motor."""

    motor_cmd: list[MotorCmd] = field(
        default_factory=lambda: [MotorCmd() for _ in range(NUM_MOTORS)]
    )


@dataclass
class UserValue:
    """Analog inputs from the operator and the commanded body velocity."""

    lx: float = 0.0
    ly: float = 0.0
    rx: float = 0.0
    ry: float = 0.0
    l2: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    turn_rate: float = 0.0

    def set_zero(self) -> None:
        """Reset every value to zero."""
        self.lx = self.ly = self.rx = self.ry = 0.0
        self.l2 = self.vx = self.vy = self.turn_rate = 0.0


@dataclass
class MotorState:
    """Feedback from a single joint motor."""

    mode: int = 0
    q: float = 0.0
    dq: float = 0.0
    ddq: float = 0.0
    tau_est: float = 0.0


@dataclass
class IMU:
    """Inertial measurement: quaternion ``[w, x, y, z]``, gyro and accelerometer."""

    quaternion: np.ndarray = field(default_factory=lambda: np.zeros(4))
    gyroscope: np.ndarray = field(default_factory=lambda: np.zeros(3))
    accelerometer: np.ndarray = field(default_factory=lambda: np.zeros(3))


@dataclass
class LowlevelState:
    """Complete robot feedback for one control cycle."""

    imu: IMU = field(default_factory=IMU)
    motor_state: list[MotorState] = field(
        default_factory=lambda: [MotorState() for _ in range(NUM_MOTORS)]
    )
    user_cmd: UserCommand = UserCommand.NONE
    user_value: UserValue = field(default_factory=UserValue)
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    v_world: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rpy: np.ndarray = field(default_factory=lambda: np.zeros(3))


@dataclass
class WaypointCmd:
    """Planar waypoint for the body."""

    x: float = 0.0
    y: float = 0.0
    yaw: float = 0.0
    mode: int = 0

    def set_zero(self) -> None:
        """Reset the waypoint to the origin."""
        self.x = 0.0
        self.y = 0.0
        self.yaw = 0.0
        self.mode = 0