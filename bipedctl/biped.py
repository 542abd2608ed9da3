"""Geometry and mass of the supported biped robots."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np


class RobotVariant(Enum):
    """Robot models with known geometry."""

    HECTOR = "hector"
    LAMBDA = "lambda"
    LAMBDA_R2 = "lambda_r2"


DEFAULT_VARIANT = RobotVariant.LAMBDA_R2

NUM_LEGS = 2


@dataclass(frozen=True)
class Biped:
    """Leg offsets, link lengths and mass of a two-legged robot.

    The defaults describe the default variant, ``RobotVariant.LAMBDA_R2``.
    Leg 0 is the left leg (positive y), leg 1 the right leg.
    """

    mass: float = 4.500
    leg_yaw_offset_x: float = 0.0
    leg_yaw_offset_y: float = 0.053
    leg_yaw_offset_z: float = -0.085
    leg_roll_offset_x: float = 0.0
    leg_roll_offset_y: float = 0.007
    leg_roll_offset_z: float = 0.0
    hip_link_length: float = 0.0
    thigh_link_length: float = 0.153
    calf_link_length: float = 0.153

    @classmethod
    def for_variant(cls, variant: RobotVariant) -> "Biped":
        """Geometry of the given robot variant."""
        try:
            return cls(**_VARIANTS[RobotVariant(variant)])
        except KeyError:
            raise ValueError(f"unknown robot variant: {variant!r}") from None

    @staticmethod
    def _check_leg(leg: int) -> None:
        if not 0 <= leg < NUM_LEGS:
            raise ValueError("Invalid leg index")

    def hip_yaw_location(self, leg: int) -> np.ndarray:
        """Hip yaw joint location in the body frame."""
        self._check_leg(leg)
        y = self.leg_yaw_offset_y if leg == 0 else -self.leg_yaw_offset_y
        return np.array([self.leg_yaw_offset_x, y, self.leg_yaw_offset_z])

    def hip_roll_location(self, leg: int) -> np.ndarray:
        """Hip roll joint location relative to the hip yaw joint."""
        self._check_leg(leg)
        y = self.leg_roll_offset_y if leg == 0 else -self.leg_roll_offset_y
        return np.array([self.leg_roll_offset_x, y, self.leg_roll_offset_z])


_VARIANTS: dict[RobotVariant, dict[str, float]] = {
    RobotVariant.HECTOR: dict(
        mass=13.856,
        leg_yaw_offset_x=0.0,
        leg_yaw_offset_y=0.047,
        leg_yaw_offset_z=-0.1265,
        leg_roll_offset_x=0.0465,
        leg_roll_offset_y=0.015,
        leg_roll_offset_z=-0.0705,
        hip_link_length=0.018,
        thigh_link_length=0.22,
        calf_link_length=0.22,
    ),
    RobotVariant.LAMBDA: dict(
        mass=4.500,
        leg_yaw_offset_x=0.0,
        leg_yaw_offset_y=0.053,
        leg_yaw_offset_z=-0.091,
        leg_roll_offset_x=0.0,
        leg_roll_offset_y=0.0,
        leg_roll_offset_z=0.0,
        hip_link_length=0.0,
        thigh_link_length=0.153,
        calf_link_length=0.153,
    ),
    RobotVariant.LAMBDA_R2: dict(
        mass=4.500,
        leg_yaw_offset_x=0.0,
        leg_yaw_offset_y=0.053,
        leg_yaw_offset_z=-0.085,
        leg_roll_offset_x=0.0,
        leg_roll_offset_y=0.007,
        leg_roll_offset_z=0.0,
        hip_link_length=0.0,
        thigh_link_length=0.153,
        calf_link_length=0.153,
    ),
}